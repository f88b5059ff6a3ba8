"""
Web UI module for the DustWatch System.

This module provides a Streamlit-based dashboard over the DustControlSystem.
Supports three pages: Dashboard (ward map, fleet statistics, critical wards
and action plans), Ward details (per-route readings for one ward), and
Contractors (performance breakdown and alerts).
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

# Add project root to Python path to enable imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from dustwatch.action_plan import Priority
from dustwatch.dust_control_system import DustControlSystem
from dustwatch.errors import UnknownUnitError
from dustwatch.indicators import (
    Tone,
    effectiveness_tone,
    fleet_action_tone,
    fleet_pm_tone,
    ward_action_tone,
    ward_status_tone,
)
from dustwatch.log_config import configure_logging
from dustwatch.mock_data import MOCK_ACTION_PLANS, default_repository
from dustwatch.settings import load_settings
from dustwatch.status_classifier import StatusLevel
from dustwatch.ward_data import WardData

TONE_ICONS = {
    Tone.SUCCESS: "🟢",
    Tone.WARNING: "🟠",
    Tone.DANGER: "🔴",
    Tone.PRIMARY: "🔵",
}

STATUS_ICONS = {
    StatusLevel.GOOD: "🟢",
    StatusLevel.MODERATE: "🟡",
    StatusLevel.POOR: "🟠",
    StatusLevel.CRITICAL: "🔴",
}

PRIORITY_ICONS = {"high": "🔴", "medium": "🟠", "low": "🟢"}
ACTION_PLAN_LIMIT = 5

MAP_CENTER = {"lat": 28.63, "lon": 77.22}


# Initialize the system once per session
if "dust_control_system" not in st.session_state:
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_file)
    st.session_state.dust_control_system = DustControlSystem(default_repository(), settings=settings)

if "selected_ward_id" not in st.session_state:
    st.session_state.selected_ward_id: Optional[str] = None


def build_ward_map(system: DustControlSystem) -> go.Figure:
    """
    Builds the ward map: each ward polygon filled with its own color and
    outlined with its status color.
    """
    fig = go.Figure()
    for ward in system.repository:
        status = system.classifier.classify(ward.pm_level)
        lats = [lat for lat, _ in ward.coordinates]
        lons = [lon for _, lon in ward.coordinates]
        fig.add_trace(go.Scattermap(
            lat=lats,
            lon=lons,
            mode="lines",
            fill="toself",
            fillcolor=ward.color,
            line={"color": status.color, "width": 2},
            opacity=0.6,
            name=ward.name,
            text=f"{ward.name}: PM10 {ward.pm_level:.0f} µg/m³ ({status.label})",
            hoverinfo="text",
        ))

    fig.update_layout(
        map_style="open-street-map",
        map={"center": MAP_CENTER, "zoom": 9.5},
        margin={"r": 0, "t": 0, "l": 0, "b": 0},
        height=520,
        showlegend=False,
    )
    return fig


def render_overview(system: DustControlSystem) -> None:
    """Fleet-wide stat cards."""
    summary = system.overview()
    cols = st.columns(4)
    cols[0].metric(
        f"{TONE_ICONS[fleet_pm_tone(summary.average_pm)]} Avg PM10 (µg/m³)",
        summary.average_pm,
    )
    cols[1].metric(
        f"{TONE_ICONS[fleet_action_tone(summary.action_count)]} Routes need action",
        summary.action_count,
        help=f"of {summary.total_count} monitored routes",
    )
    effectiveness = summary.measured_effectiveness
    cols[2].metric(
        f"{TONE_ICONS[effectiveness_tone(effectiveness)]} Effectiveness",
        "n/a" if effectiveness is None else f"{effectiveness}%",
    )
    cols[3].metric("💧 Avg humidity", f"{summary.average_humidity}%")


def render_wards_list(system: DustControlSystem) -> None:
    """All wards, highest PM first."""
    st.subheader("All Wards")
    rows = []
    for ward in system.ranked_wards():
        status = system.classifier.classify(ward.pm_level)
        rows.append({
            "Ward": ward.name,
            "Status": f"{STATUS_ICONS[status]} {status.label}",
            "PM10": ward.pm_level,
            "Action": f"{ward.routes_needing_action}/{ward.routes_count}",
            "Contractor": ward.contractor,
            "Updated": ward.last_updated,
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def render_critical_wards(system: DustControlSystem) -> None:
    critical = system.critical_wards()
    if not critical:
        return
    lines = [
        f"- **{w.name}**: PM10 {w.pm_level:.0f} µg/m³, {w.routes_needing_action} routes need sprinkling"
        for w in critical
    ]
    st.error("⚠️ Wards needing immediate action\n\n" + "\n".join(lines))


def render_action_plans(system: DustControlSystem) -> None:
    """
    Sprinkling schedule, one tab per time slot: the static plan next to one
    built from the routes that currently need action.
    """
    st.subheader("Action Plans")
    tabs = st.tabs([f"{plan.slot.value.title()} ({plan.slot.window})" for plan in MOCK_ACTION_PLANS])
    for tab, plan in zip(tabs, MOCK_ACTION_PLANS):
        with tab:
            static_col, derived_col = st.columns(2)
            with static_col:
                st.caption("Scheduled")
                for item in plan.items:
                    st.write(f"{PRIORITY_ICONS[item.priority.value]} **{item.name}**: {item.reason}")
            with derived_col:
                derived = system.action_plan(plan.slot, limit=ACTION_PLAN_LIMIT)
                counts = ", ".join(
                    f"{derived.count_by_priority(p)} {p.value}" for p in Priority
                )
                st.caption(f"From current readings ({counts})")
                for item in derived.items:
                    st.write(f"{PRIORITY_ICONS[item.priority.value]} **{item.name}**: {item.reason}")


def render_dashboard(system: DustControlSystem) -> None:
    render_overview(system)

    map_col, list_col = st.columns([3, 2])
    with map_col:
        st.subheader("Delhi Ward Map")
        st.plotly_chart(build_ward_map(system), use_container_width=True)
        st.caption(" · ".join(f"{STATUS_ICONS[s]} {s.label}" for s in StatusLevel))
    with list_col:
        render_critical_wards(system)
        render_wards_list(system)

    render_action_plans(system)


def render_ward_details(system: DustControlSystem, ward: WardData) -> None:
    """Per-ward statistics and route table."""
    status = system.classifier.classify(ward.pm_level)
    st.header(f"{ward.name} Ward")
    st.caption(f"Contractor: {ward.contractor} · Updated {ward.last_updated}")

    cols = st.columns(5)
    cols[0].metric(f"{TONE_ICONS[ward_status_tone(status)]} Current PM10", ward.pm_level)
    cols[1].metric(
        f"{TONE_ICONS[ward_action_tone(ward.routes_needing_action)]} Routes need action",
        ward.routes_needing_action,
        help=f"of {ward.routes_count} total",
    )
    effectiveness = "n/a" if ward.effectiveness is None else f"{ward.effectiveness:.0f}%"
    cols[2].metric(f"{TONE_ICONS[effectiveness_tone(ward.effectiveness)]} Effectiveness", effectiveness)
    cols[3].metric("💧 Humidity", f"{ward.humidity:.0f}%")
    cols[4].metric("🛣️ Total routes", ward.routes_count)

    if status.is_alarming:
        st.error(f"Immediate Action Required: {ward.routes_needing_action} routes need immediate sprinkling")
    else:
        st.success("Ward Under Control: PM levels are within acceptable range")

    now = datetime.now()
    rows = []
    for idx, route in enumerate(system.ward_routes(ward.id, now=now), start=1):
        if route.last_sprinkled is None:
            sprinkled = "Not sprinkled yet"
        else:
            hours = int((now - route.last_sprinkled).total_seconds() // 3600)
            sprinkled = f"Sprinkled {hours} hours ago"
        rows.append({
            "#": idx,
            "Route": route.name,
            "Status": f"{STATUS_ICONS[route.status]} {route.status.label}",
            "PM10": route.pm_before,
            "After": route.pm_after,
            "Last sprinkled": sprinkled,
            "Action": "Action" if route.needs_sprinkling else "",
        })
    st.subheader(f"All Routes in {ward.name}")
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def render_contractors(system: DustControlSystem) -> None:
    """Contractor breakdown and derived alerts."""
    st.header("Contractor Performance")
    rows = [
        {
            "Contractor": group.key,
            "Status": f"{STATUS_ICONS[group.status]} {group.status.label}",
            "Avg PM10": group.average_pm,
            "Routes need action": group.needs_action_count,
            "Total routes": group.total_count,
            "Effectiveness": f"{group.average_effectiveness}%",
            "Wards": len(group.unit_ids),
        }
        for group in system.contractor_performance().values()
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    st.subheader("Alerts")
    alerts = system.alerts()
    if not alerts:
        st.success("No contractor alerts.")
        return
    st.dataframe(
        pd.DataFrame([
            {
                "Contractor": a.contractor,
                "Kind": a.kind.value,
                "Route": a.unit_id,
                "Message": a.message,
                "Time": a.timestamp.strftime("%H:%M"),
            }
            for a in alerts
        ]),
        use_container_width=True,
        hide_index=True,
    )


def main() -> None:
    """
    Main function that runs the Streamlit dashboard.

    Sets up the page layout and dispatches to the page chosen in the sidebar.
    """
    st.set_page_config(page_title="DustWatch Delhi", layout="wide")
    st.title("DustWatch: Ward Dust Mitigation")

    system: DustControlSystem = st.session_state.dust_control_system

    page = st.sidebar.selectbox("Page", ["Dashboard", "Ward details", "Contractors"])

    if page == "Dashboard":
        render_dashboard(system)
    elif page == "Ward details":
        ward_ids = [w.id for w in system.repository]
        default_index = 0
        if st.session_state.selected_ward_id in ward_ids:
            default_index = ward_ids.index(st.session_state.selected_ward_id)
        ward_id = st.sidebar.selectbox(
            "Ward",
            ward_ids,
            index=default_index,
            format_func=lambda wid: system.repository.get(wid).name,
        )
        st.session_state.selected_ward_id = ward_id
        try:
            ward = system.ward(ward_id)
        except UnknownUnitError:
            st.warning("Ward not found. Back to Dashboard to pick another ward.")
            return
        render_ward_details(system, ward)
    else:
        render_contractors(system)


if __name__ == "__main__":
    main()
