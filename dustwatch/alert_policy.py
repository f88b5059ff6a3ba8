"""
Alert policy module for the DustWatch System.

This module derives contractor performance alerts from route records. Alerts
are never stored: they are recomputed from the current routes each time the
dashboard asks for them. The rules live behind the AlertPolicy protocol so a
different policy can be plugged into the DustControlSystem.

The default ContractorAlertPolicy raises three kinds of alert:
- ineffective: a contractor's last N treatments averaged below a threshold
- skipped: a route still needing sprinkling has waited past a staleness window
- worsening: a treated route reads higher after sprinkling than before
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Protocol, Sequence

from .route_info import RouteInfo


class AlertKind(str, Enum):
    INEFFECTIVE = "ineffective"
    SKIPPED = "skipped"
    WORSENING = "worsening"


@dataclass(frozen=True)
class Alert:
    """
    A derived contractor performance flag.

    Attributes:
        contractor: Contractor the alert is raised against
        kind: What triggered the alert
        unit_id: Route the alert refers to
        message: Human-readable description
        timestamp: Evaluation time the alert was derived at
    """

    contractor: str
    kind: AlertKind
    unit_id: str
    message: str
    timestamp: datetime


class AlertPolicy(Protocol):
    """Anything that can turn a set of routes into alerts."""

    def evaluate(self, routes: Sequence[RouteInfo], now: datetime) -> list[Alert]: ...


class ContractorAlertPolicy:
    """
    Default alert rules for contractor performance.

    Args:
        window: Number of most recent treatments considered per contractor
        threshold: Mean effectiveness (percent) below which the contractor
            is flagged as ineffective
        staleness: How long an untreated route may wait before it counts
            as skipped
    """

    def __init__(
        self,
        window: int = 3,
        threshold: float = 15.0,
        staleness: timedelta = timedelta(hours=6),
    ) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self.threshold = threshold
        self.staleness = staleness

    def evaluate(self, routes: Sequence[RouteInfo], now: datetime) -> list[Alert]:
        """
        Derives all alerts for the given routes.

        Alerts are grouped by contractor in first-seen order; within a
        contractor they are ordered ineffective, skipped, worsening, then by
        route input order.

        Args:
            routes: Routes to evaluate
            now: Evaluation time, used for staleness and alert timestamps

        Returns:
            List of alerts, possibly empty
        """
        by_contractor: dict[str, list[RouteInfo]] = {}
        for route in routes:
            by_contractor.setdefault(route.contractor, []).append(route)

        alerts: list[Alert] = []
        for contractor, contractor_routes in by_contractor.items():
            alerts.extend(self._ineffective(contractor, contractor_routes, now))
            alerts.extend(self._skipped(contractor, contractor_routes, now))
            alerts.extend(self._worsening(contractor, contractor_routes, now))
        return alerts

    def _ineffective(self, contractor: str, routes: list[RouteInfo], now: datetime) -> list[Alert]:
        treated = [r for r in routes if r.effectiveness is not None]

        # Oldest first; undated treatments keep input order after dated ones
        treated.sort(key=lambda r: (r.last_sprinkled is None, r.last_sprinkled or datetime.min))
        recent = treated[-self.window:]
        if len(recent) < self.window:
            return []

        mean_effectiveness = sum(r.effectiveness for r in recent) / len(recent)
        if mean_effectiveness >= self.threshold:
            return []

        latest = recent[-1]
        return [
            Alert(
                contractor=contractor,
                kind=AlertKind.INEFFECTIVE,
                unit_id=latest.id,
                message=(
                    f"Last {self.window} treatments averaged {mean_effectiveness:.0f}% "
                    f"PM reduction (threshold {self.threshold:.0f}%)"
                ),
                timestamp=now,
            )
        ]

    def _skipped(self, contractor: str, routes: list[RouteInfo], now: datetime) -> list[Alert]:
        alerts = []
        for route in routes:
            if not route.needs_sprinkling or route.is_treated or route.created_at is None:
                continue
            waiting = now - route.created_at
            if waiting > self.staleness:
                hours = waiting.total_seconds() / 3600
                alerts.append(
                    Alert(
                        contractor=contractor,
                        kind=AlertKind.SKIPPED,
                        unit_id=route.id,
                        message=f"{route.name} not sprinkled for {hours:.1f} hours",
                        timestamp=now,
                    )
                )
        return alerts

    def _worsening(self, contractor: str, routes: list[RouteInfo], now: datetime) -> list[Alert]:
        alerts = []
        for route in routes:
            if route.pm_after is not None and route.pm_after > route.pm_before:
                alerts.append(
                    Alert(
                        contractor=contractor,
                        kind=AlertKind.WORSENING,
                        unit_id=route.id,
                        message=(
                            f"{route.name} PM10 rose from {route.pm_before:.0f} "
                            f"to {route.pm_after:.0f} µg/m³ after sprinkling"
                        ),
                        timestamp=now,
                    )
                )
        return alerts
