"""
Action plan module for the DustWatch System.

Sprinkling is scheduled in three daily time slots. An action plan lists the
routes to treat in a slot together with a priority and a short reason.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .priority_ranking import rank_priority
from .route_info import RouteInfo
from .status_classifier import StatusClassifier, StatusLevel


class TimeSlot(str, Enum):
    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"

    @property
    def window(self) -> str:
        return SLOT_WINDOWS[self]


SLOT_WINDOWS = {
    TimeSlot.MORNING: "6:00 - 10:00",
    TimeSlot.EVENING: "16:00 - 19:00",
    TimeSlot.NIGHT: "22:00 - 02:00",
}


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ActionPlanItem:
    route_id: str
    name: str
    priority: Priority
    reason: str


@dataclass(frozen=True)
class ActionPlan:
    slot: TimeSlot
    items: tuple[ActionPlanItem, ...]

    def count_by_priority(self, priority: Priority) -> int:
        return sum(1 for item in self.items if item.priority == priority)


_PRIORITY_BY_STATUS = {
    StatusLevel.CRITICAL: Priority.HIGH,
    StatusLevel.POOR: Priority.MEDIUM,
    StatusLevel.MODERATE: Priority.LOW,
    StatusLevel.GOOD: Priority.LOW,
}


def priority_for(pm_level: float, classifier: Optional[StatusClassifier] = None) -> Priority:
    """Maps a PM10 reading to a sprinkling priority via its status tier."""
    classifier = classifier or StatusClassifier()
    return _PRIORITY_BY_STATUS[classifier.classify(pm_level)]


def build_action_plan(
    routes: Sequence[RouteInfo],
    slot: TimeSlot,
    limit: Optional[int] = None,
) -> ActionPlan:
    """
    Builds a plan for one slot from the routes that need sprinkling.

    Routes are taken in priority order (highest impact first).

    Args:
        routes: Candidate routes
        slot: Time slot the plan is for
        limit: Maximum number of routes in the plan, or None for all

    Returns:
        ActionPlan for the slot
    """
    ranked = rank_priority(routes)
    if limit is not None:
        ranked = ranked[:limit]

    items = tuple(
        ActionPlanItem(
            route_id=route.id,
            name=route.name,
            priority=priority_for(route.pm_level),
            reason=f"PM10 at {route.pm_level:.0f} µg/m³",
        )
        for route in ranked
    )
    return ActionPlan(slot=slot, items=items)
