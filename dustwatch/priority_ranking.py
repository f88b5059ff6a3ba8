"""
Priority ranking module for the DustWatch System.

Orders wards or routes for the dashboard lists: the action queue (units
needing action, most severe first), the full list by PM reading, and the
critical callout. All sorts use Python's stable sorted(), so units with equal
keys keep their input order.
"""

from typing import Optional, Sequence

from .status_classifier import StatusClassifier
from .unit import MonitoredUnit


def impact_score(unit: MonitoredUnit) -> float:
    """Explicit impact score of a unit, or its PM reading when it has none."""
    if unit.impact_score is not None:
        return unit.impact_score
    return unit.pm_level


def rank_priority(units: Sequence[MonitoredUnit]) -> list:
    """
    Units needing action, ordered by descending impact score.

    Ranking an already ranked list returns the same order.

    Args:
        units: Wards or routes

    Returns:
        New list containing only units with needs_action set
    """
    needing_action = [u for u in units if u.needs_action]
    return sorted(needing_action, key=impact_score, reverse=True)


def rank_by_pm(units: Sequence[MonitoredUnit]) -> list:
    """All units ordered by descending PM reading."""
    return sorted(units, key=lambda u: u.pm_level, reverse=True)


def critical_units(
    units: Sequence[MonitoredUnit],
    limit: Optional[int] = 4,
    classifier: Optional[StatusClassifier] = None,
) -> list:
    """
    Units whose status is poor or critical, in input order.

    Args:
        units: Wards or routes
        limit: Maximum number of units to return, or None for all
        classifier: StatusClassifier to use; a default one if None

    Returns:
        Alarming units, truncated to limit
    """
    classifier = classifier or StatusClassifier()
    alarming = [u for u in units if classifier.classify(u.pm_level).is_alarming]
    if limit is None:
        return alarming
    return alarming[:limit]
