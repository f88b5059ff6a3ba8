"""
Route info module for the DustWatch System.

This module defines the RouteInfo dataclass which represents a single road
segment inside a ward. A route carries the PM10 reading taken before
sprinkling and, once treated, the reading taken after. Effectiveness is
derived from the two readings and is absent (None) for untreated routes.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .errors import MissingDerivedValueError
from .status_classifier import StatusLevel, classify


@dataclass(frozen=True)
class RouteInfo:
    """
    Represents one monitored road segment.

    Attributes:
        id: Unique route identifier (e.g. "north-r1")
        name: Display name
        ward_id: Identifier of the ward the route belongs to
        contractor: Contractor responsible for sprinkling the route
        pm_before: PM10 reading in µg/m³ before treatment (must be >= 0)
        pm_after: PM10 reading after treatment, or None if not yet treated
        humidity: Relative humidity in percent, or None if not measured
        needs_sprinkling: True if the route requires intervention
        last_sprinkled: When the route was last sprinkled, or None if never
        created_at: When the route entered the work queue, or None if unknown
        impact_score: Explicit priority score, or None to rank by PM reading
    """

    id: str
    name: str
    ward_id: str
    contractor: str
    pm_before: float
    pm_after: Optional[float] = None
    humidity: Optional[float] = None
    needs_sprinkling: bool = False
    last_sprinkled: Optional[datetime] = None
    created_at: Optional[datetime] = None
    impact_score: Optional[float] = None

    @property
    def pm_level(self) -> float:
        return self.pm_before

    @property
    def status(self) -> StatusLevel:
        return classify(self.pm_before)

    @property
    def unit_count(self) -> int:
        return 1

    @property
    def action_count(self) -> int:
        return 1 if self.needs_sprinkling else 0

    @property
    def needs_action(self) -> bool:
        return self.needs_sprinkling

    @property
    def is_treated(self) -> bool:
        return self.pm_after is not None

    @property
    def effectiveness(self) -> Optional[float]:
        """
        Percentage PM reduction achieved by the last treatment.

        Computed as (before - after) / before * 100. A missing "after"
        reading means the route has not been treated, so the value is None
        rather than 0. A zero "before" reading leaves nothing to reduce and
        also yields None.

        Returns:
            Reduction in percent (negative if PM rose), or None
        """
        if self.pm_after is None or self.pm_before <= 0:
            return None
        return (self.pm_before - self.pm_after) * 100 / self.pm_before

    def require_effectiveness(self) -> float:
        """
        Returns the effectiveness, raising if the route is untreated.

        Raises:
            MissingDerivedValueError: If pm_after is absent or pm_before is 0
        """
        value = self.effectiveness
        if value is None:
            reason = "route not yet treated" if self.pm_after is None else "pm_before is 0"
            raise MissingDerivedValueError(self.id, "effectiveness", reason)
        return value

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validates route readings against acceptable ranges.

        Returns:
            A tuple of (valid, reason) where reason is None if valid
        """
        if not self.id:
            return (False, "id must not be empty")

        if not self.contractor:
            return (False, "contractor must not be empty")

        if self.pm_before < 0:
            return (False, "pm_before must be >= 0")

        if self.pm_after is not None and self.pm_after < 0:
            return (False, "pm_after must be >= 0")

        if self.humidity is not None and not 0 <= self.humidity <= 100:
            return (False, "humidity must be between 0 and 100")

        return (True, None)
