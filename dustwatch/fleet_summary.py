"""
Fleet summary module for the DustWatch System.

This module contains the FleetSummary dataclass and the FleetAggregator class
which computes fleet-wide statistics over a sequence of wards or routes:
total and action counts, average PM10, average treatment effectiveness and
average humidity. Averages are rounded half-up to whole numbers, matching
the integer values shown on the dashboard cards.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .errors import EmptyInputError
from .status_classifier import StatusClassifier, StatusLevel
from .unit import MonitoredUnit


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer, with halves rounded towards +infinity.

    Python's built-in round() uses banker's rounding (192.5 -> 192); the
    dashboard needs 192.5 -> 193.
    """
    return int(math.floor(value + 0.5))


def mean_of_present(values: Iterable[Optional[float]]) -> Optional[float]:
    """
    Arithmetic mean of the values that are not None.

    Returns:
        The mean, or None if no value is present
    """
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


@dataclass(frozen=True)
class FleetSummary:
    """
    Fleet-wide statistics for one set of units.

    Attributes:
        unit_count: Number of units summarized (wards or routes)
        total_count: Sum of each unit's route count
        action_count: Sum of each unit's routes needing action
        average_pm: Mean PM10 reading, rounded half-up
        average_effectiveness: Mean effectiveness over units that have one,
            rounded half-up; 0 when no unit has one
        effectiveness_count: Number of units that contributed an
            effectiveness value
        average_humidity: Mean humidity over units that report one,
            rounded half-up; 0 when no unit reports one
        status: Status tier of average_pm
    """

    unit_count: int
    total_count: int
    action_count: int
    average_pm: int
    average_effectiveness: int
    average_humidity: int
    status: StatusLevel
    effectiveness_count: int = 0

    @property
    def measured_effectiveness(self) -> Optional[int]:
        """average_effectiveness, or None when no unit has been measured."""
        if self.effectiveness_count == 0:
            return None
        return self.average_effectiveness


class FleetAggregator:
    """
    Computes fleet-wide aggregates over wards or routes.

    Empty input is rejected with EmptyInputError rather than producing NaN.
    Units without an effectiveness value (untreated routes, unmeasured
    wards) are excluded from the effectiveness mean instead of counting as
    0 % effective.
    """

    def __init__(self, classifier: Optional[StatusClassifier] = None) -> None:
        self.classifier = classifier or StatusClassifier()

    def average_pm(self, units: Sequence[MonitoredUnit]) -> int:
        """
        Mean PM10 reading, rounded half-up.

        Raises:
            EmptyInputError: If units is empty
        """
        if not units:
            raise EmptyInputError("average_pm")
        return round_half_up(sum(u.pm_level for u in units) / len(units))

    def average_effectiveness(self, units: Sequence[MonitoredUnit]) -> int:
        """
        Mean effectiveness over units that have a value, rounded half-up.

        Returns 0 when no unit qualifies (including an empty sequence).
        """
        value = mean_of_present(u.effectiveness for u in units)
        if value is None:
            return 0
        return round_half_up(value)

    def average_humidity(self, units: Sequence[MonitoredUnit]) -> int:
        """Mean humidity over units that report one; 0 if none does."""
        value = mean_of_present(u.humidity for u in units)
        if value is None:
            return 0
        return round_half_up(value)

    def summarize(self, units: Sequence[MonitoredUnit]) -> FleetSummary:
        """
        Computes all fleet aggregates in one pass over the units.

        Args:
            units: Non-empty sequence of wards or routes

        Returns:
            FleetSummary with counts, rounded averages and the status tier
            of the average PM reading

        Raises:
            EmptyInputError: If units is empty
        """
        units = list(units)
        if not units:
            raise EmptyInputError("summarize")

        average_pm = self.average_pm(units)

        return FleetSummary(
            unit_count=len(units),
            total_count=sum(u.unit_count for u in units),
            action_count=sum(u.action_count for u in units),
            average_pm=average_pm,
            average_effectiveness=self.average_effectiveness(units),
            average_humidity=self.average_humidity(units),
            status=self.classifier.classify(average_pm),
            effectiveness_count=sum(1 for u in units if u.effectiveness is not None),
        )
