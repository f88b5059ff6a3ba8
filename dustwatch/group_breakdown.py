"""
Group breakdown module for the DustWatch System.

Partitions wards or routes by a key (contractor, ward) and applies the fleet
averages within each partition. Groups come back in the order their key first
appears in the input unless the caller asks for a sort.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .fleet_summary import FleetAggregator
from .status_classifier import StatusLevel
from .unit import MonitoredUnit

SORT_KEYS = ("average_pm", "key")


@dataclass(frozen=True)
class GroupBreakdown:
    """
    Aggregates for one group of units.

    Attributes:
        key: Group key (contractor name, ward id, ...)
        average_pm: Mean PM10 of the group's units, rounded half-up
        needs_action_count: Sum of the units' action counts
        total_count: Sum of the units' route counts
        average_effectiveness: Mean effectiveness of units that have one, or 0
        status: Status tier of average_pm
        unit_ids: Identifiers of the group's units, in input order
    """

    key: str
    average_pm: int
    needs_action_count: int
    total_count: int
    average_effectiveness: int
    status: StatusLevel
    unit_ids: tuple[str, ...]


def breakdown(
    units: Sequence[MonitoredUnit],
    key_fn: Callable[[MonitoredUnit], str],
    sort_by: Optional[str] = None,
    aggregator: Optional[FleetAggregator] = None,
) -> dict[str, GroupBreakdown]:
    """
    Groups units by key_fn and aggregates each group.

    Every unit lands in exactly one group. Singleton groups are handled like
    any other (the mean of one value is that value).

    Args:
        units: Wards or routes to group
        key_fn: Function returning the group key of a unit
        sort_by: None to keep first-seen key order, "average_pm" for highest
            average first, or "key" for alphabetical order
        aggregator: FleetAggregator to use; a default one if None

    Returns:
        Mapping from group key to GroupBreakdown (empty for empty input)

    Raises:
        ValueError: If sort_by is not one of the supported values
    """
    if sort_by is not None and sort_by not in SORT_KEYS:
        raise ValueError(f"Unknown sort_by: {sort_by}")

    aggregator = aggregator or FleetAggregator()

    # dict preserves insertion order, so keys stay in first-seen order
    partitions: dict[str, list[MonitoredUnit]] = {}
    for unit in units:
        partitions.setdefault(key_fn(unit), []).append(unit)

    groups = []
    for key, members in partitions.items():
        summary = aggregator.summarize(members)
        groups.append(
            GroupBreakdown(
                key=key,
                average_pm=summary.average_pm,
                needs_action_count=summary.action_count,
                total_count=summary.total_count,
                average_effectiveness=summary.average_effectiveness,
                status=summary.status,
                unit_ids=tuple(m.id for m in members),
            )
        )

    if sort_by == "average_pm":
        groups.sort(key=lambda g: g.average_pm, reverse=True)
    elif sort_by == "key":
        groups.sort(key=lambda g: g.key)

    return {g.key: g for g in groups}


def breakdown_by_contractor(
    units: Sequence[MonitoredUnit],
    sort_by: Optional[str] = None,
) -> dict[str, GroupBreakdown]:
    """Breakdown keyed by contractor name."""
    return breakdown(units, lambda u: u.contractor, sort_by=sort_by)


def breakdown_by_ward(routes: Sequence, sort_by: Optional[str] = None) -> dict[str, GroupBreakdown]:
    """Breakdown of routes keyed by their ward_id."""
    return breakdown(routes, lambda r: r.ward_id, sort_by=sort_by)
