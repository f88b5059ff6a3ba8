"""
Mock data module for the DustWatch System.

Holds the demo dataset for Delhi: eleven wards with map polygons and readings,
the static sprinkling schedule, and a route synthesizer that expands a ward
into its individual routes. Route synthesis draws from an injected numpy
Generator, so a fixed seed always yields the same routes.
"""

from datetime import datetime, timedelta
from typing import Optional

import numpy as np

from .action_plan import ActionPlan, ActionPlanItem, Priority, TimeSlot
from .route_info import RouteInfo
from .ward_data import WardData
from .ward_repository import WardRepository

# PM readings vary by this much (exclusive upper bound) around the ward level
PM_VARIATION = 30
# Synthesized readings never fall below this floor
MIN_ROUTE_PM = 50

ROUTE_NAMES = [
    "Main Street", "Highway Connector", "Industrial Road", "Market Lane",
    "Residential Block A", "Commercial Zone", "School Road", "Hospital Road",
    "Ring Road Section", "Metro Station Road", "Bus Depot Road", "Park Avenue",
    "Temple Street", "Bridge Approach", "Flyover Section", "Construction Zone",
]

DELHI_WARDS = (
    WardData(
        id="north",
        name="North",
        color="#fce7f3",
        coordinates=(
            (28.75, 77.15), (28.78, 77.18), (28.80, 77.22), (28.78, 77.28),
            (28.74, 77.30), (28.70, 77.28), (28.68, 77.22), (28.70, 77.16), (28.75, 77.15),
        ),
        pm_level=178,
        humidity=48,
        routes_count=12,
        routes_needing_action=4,
        last_updated="5 min ago",
        contractor="ABC Contractors",
        effectiveness=42,
    ),
    WardData(
        id="north-west",
        name="North West",
        color="#e0e7ff",
        coordinates=(
            (28.72, 77.02), (28.76, 77.08), (28.75, 77.15), (28.70, 77.16),
            (28.66, 77.12), (28.64, 77.06), (28.68, 77.02), (28.72, 77.02),
        ),
        pm_level=156,
        humidity=52,
        routes_count=8,
        routes_needing_action=2,
        last_updated="3 min ago",
        contractor="Green Clean Ltd",
        effectiveness=58,
    ),
    WardData(
        id="north-east",
        name="North East",
        color="#dbeafe",
        coordinates=(
            (28.74, 77.30), (28.72, 77.34), (28.68, 77.36), (28.64, 77.34),
            (28.66, 77.28), (28.70, 77.28), (28.74, 77.30),
        ),
        pm_level=245,
        humidity=44,
        routes_count=6,
        routes_needing_action=4,
        last_updated="2 min ago",
        contractor="XYZ Services",
        effectiveness=28,
    ),
    WardData(
        id="west",
        name="West",
        color="#fef3c7",
        coordinates=(
            (28.66, 77.02), (28.68, 77.02), (28.64, 77.06), (28.66, 77.12),
            (28.64, 77.16), (28.60, 77.14), (28.56, 77.10), (28.58, 77.04), (28.66, 77.02),
        ),
        pm_level=134,
        humidity=56,
        routes_count=10,
        routes_needing_action=1,
        last_updated="4 min ago",
        contractor="ABC Contractors",
        effectiveness=62,
    ),
    WardData(
        id="central",
        name="Central",
        color="#fed7aa",
        coordinates=(
            (28.68, 77.22), (28.70, 77.28), (28.66, 77.28), (28.64, 77.24),
            (28.64, 77.20), (28.68, 77.22),
        ),
        pm_level=198,
        humidity=50,
        routes_count=14,
        routes_needing_action=5,
        last_updated="1 min ago",
        contractor="XYZ Services",
        effectiveness=45,
    ),
    WardData(
        id="new-delhi",
        name="New Delhi",
        color="#fef9c3",
        coordinates=(
            (28.64, 77.16), (28.64, 77.20), (28.64, 77.24), (28.60, 77.26),
            (28.56, 77.24), (28.56, 77.18), (28.60, 77.14), (28.64, 77.16),
        ),
        pm_level=112,
        humidity=58,
        routes_count=16,
        routes_needing_action=2,
        last_updated="2 min ago",
        contractor="Green Clean Ltd",
        effectiveness=71,
    ),
    WardData(
        id="south-west",
        name="South West",
        color="#d9f99d",
        coordinates=(
            (28.56, 77.04), (28.58, 77.04), (28.56, 77.10), (28.56, 77.18),
            (28.52, 77.16), (28.48, 77.12), (28.46, 77.06), (28.50, 77.02), (28.56, 77.04),
        ),
        pm_level=98,
        humidity=62,
        routes_count=9,
        routes_needing_action=0,
        last_updated="6 min ago",
        contractor="ABC Contractors",
        effectiveness=78,
    ),
    WardData(
        id="south",
        name="South",
        color="#e9d5ff",
        coordinates=(
            (28.56, 77.18), (28.56, 77.24), (28.54, 77.28), (28.50, 77.30),
            (28.46, 77.26), (28.48, 77.20), (28.52, 77.16), (28.56, 77.18),
        ),
        pm_level=142,
        humidity=54,
        routes_count=11,
        routes_needing_action=2,
        last_updated="3 min ago",
        contractor="Green Clean Ltd",
        effectiveness=55,
    ),
    WardData(
        id="south-east",
        name="South East",
        color="#a5f3fc",
        coordinates=(
            (28.60, 77.26), (28.64, 77.28), (28.62, 77.34), (28.58, 77.36),
            (28.54, 77.32), (28.54, 77.28), (28.60, 77.26),
        ),
        pm_level=167,
        humidity=51,
        routes_count=7,
        routes_needing_action=2,
        last_updated="4 min ago",
        contractor="XYZ Services",
        effectiveness=48,
    ),
    WardData(
        id="east",
        name="East",
        color="#99f6e4",
        coordinates=(
            (28.66, 77.28), (28.68, 77.36), (28.64, 77.38), (28.62, 77.34),
            (28.64, 77.28), (28.66, 77.28),
        ),
        pm_level=212,
        humidity=46,
        routes_count=8,
        routes_needing_action=3,
        last_updated="2 min ago",
        contractor="XYZ Services",
        effectiveness=35,
    ),
    WardData(
        id="shahdara",
        name="Shahdara",
        color="#fecaca",
        coordinates=(
            (28.68, 77.36), (28.72, 77.34), (28.74, 77.38), (28.72, 77.42),
            (28.68, 77.40), (28.66, 77.38), (28.68, 77.36),
        ),
        pm_level=289,
        humidity=42,
        routes_count=5,
        routes_needing_action=4,
        last_updated="1 min ago",
        contractor="ABC Contractors",
        effectiveness=22,
    ),
)

MOCK_ACTION_PLANS = (
    ActionPlan(
        slot=TimeSlot.MORNING,
        items=(
            ActionPlanItem("r1", "Shahdara Main Road", Priority.HIGH, "PM10 at 289 µg/m³"),
            ActionPlanItem("r5", "North East Highway", Priority.HIGH, "PM10 at 245 µg/m³"),
            ActionPlanItem("r2", "East Industrial Belt", Priority.MEDIUM, "Needs re-sprinkle"),
        ),
    ),
    ActionPlan(
        slot=TimeSlot.EVENING,
        items=(
            ActionPlanItem("r2", "Central Market Road", Priority.HIGH, "Expected PM spike"),
            ActionPlanItem("r3", "North Construction Zone", Priority.MEDIUM, "Preventive action"),
        ),
    ),
    ActionPlan(
        slot=TimeSlot.NIGHT,
        items=(
            ActionPlanItem("r1", "South Residential Area", Priority.MEDIUM, "Overnight settlement"),
        ),
    ),
)


def default_repository() -> WardRepository:
    """Repository over the Delhi demo wards."""
    return WardRepository(DELHI_WARDS)


def generate_routes_for_ward(
    ward: WardData,
    rng: np.random.Generator,
    now: Optional[datetime] = None,
) -> list[RouteInfo]:
    """
    Expands a ward into routes_count synthetic routes.

    The first routes_needing_action routes need sprinkling and are untreated;
    they entered the queue 1 to 12 hours before now. The others were sprinkled
    1 to 4 hours ago and carry an "after" reading reduced by roughly the
    ward's effectiveness.

    Args:
        ward: Ward to expand
        rng: Random generator; pass np.random.default_rng(seed) for
             reproducible output
        now: Reference time for timestamps; datetime.now() if None

    Returns:
        Routes sorted by descending PM reading (stable)
    """
    now = now or datetime.now()
    reduction = (ward.effectiveness or 0) / 100
    routes = []

    for i in range(ward.routes_count):
        # Integer variation in [-30, 30)
        variation = int(rng.integers(-PM_VARIATION, PM_VARIATION))
        pm = max(MIN_ROUTE_PM, ward.pm_level + variation)
        needs_sprinkling = i < ward.routes_needing_action

        if needs_sprinkling:
            pm_after = None
            last_sprinkled = None
            created_at = now - timedelta(hours=int(rng.integers(1, 13)))
        else:
            # Per-route effectiveness jitters +/- 10 points around the ward figure
            route_reduction = min(max(reduction + rng.uniform(-0.1, 0.1), 0.0), 1.0)
            pm_after = round(pm * (1 - route_reduction))
            last_sprinkled = now - timedelta(hours=int(rng.integers(1, 5)))
            created_at = last_sprinkled

        routes.append(
            RouteInfo(
                id=f"{ward.id}-r{i + 1}",
                name=f"{ROUTE_NAMES[i % len(ROUTE_NAMES)]} - {ward.name}",
                ward_id=ward.id,
                contractor=ward.contractor,
                pm_before=pm,
                pm_after=pm_after,
                humidity=ward.humidity,
                needs_sprinkling=needs_sprinkling,
                last_sprinkled=last_sprinkled,
                created_at=created_at,
            )
        )

    return sorted(routes, key=lambda r: r.pm_before, reverse=True)
