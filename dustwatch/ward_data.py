"""
Ward data module for the DustWatch System.

This module defines the WardData dataclass which represents a municipal ward:
its map polygon, current PM10 reading, humidity, route counts, responsible
contractor and treatment effectiveness. It provides validation to ensure data
integrity before the ward enters a repository.
"""

from dataclasses import dataclass
from typing import Optional

from .status_classifier import StatusLevel, classify


@dataclass(frozen=True)
class WardData:
    """
    Represents one municipal ward and its latest dust readings.

    Wards aggregate several routes. The analytics treat a ward and a route
    the same way through the shared accessors (pm_level, unit_count,
    action_count, effectiveness, impact_score).

    Attributes:
        id: Unique ward identifier (e.g. "north-east")
        name: Display name
        color: Map fill color (hex)
        coordinates: Polygon vertices as (latitude, longitude) pairs
        pm_level: PM10 reading in µg/m³ (must be >= 0)
        humidity: Relative humidity in percent (must be between 0 and 100)
        routes_count: Number of monitored routes in the ward (must be >= 0)
        routes_needing_action: Routes that need sprinkling
            (must be between 0 and routes_count)
        last_updated: Display string for the last reading (e.g. "5 min ago")
        contractor: Contractor responsible for the ward
        effectiveness: Average PM reduction in percent, or None if not measured
    """

    id: str
    name: str
    color: str
    coordinates: tuple[tuple[float, float], ...]
    pm_level: float
    humidity: float
    routes_count: int
    routes_needing_action: int
    last_updated: str
    contractor: str
    effectiveness: Optional[float] = None

    @property
    def status(self) -> StatusLevel:
        return classify(self.pm_level)

    @property
    def unit_count(self) -> int:
        return self.routes_count

    @property
    def action_count(self) -> int:
        return self.routes_needing_action

    @property
    def needs_action(self) -> bool:
        return self.routes_needing_action > 0

    @property
    def impact_score(self) -> Optional[float]:
        # Wards carry no explicit score; ranking falls back to pm_level
        return None

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validates all ward fields against acceptable ranges.

        Checks:
        - id and contractor must be non-empty
        - pm_level must be non-negative
        - humidity must be between 0 and 100
        - routes_count must be non-negative
        - routes_needing_action must be between 0 and routes_count
        - effectiveness, when present, must be between 0 and 100

        Returns:
            A tuple containing:
            - bool: True if all validations pass, False otherwise
            - Optional[str]: None if valid, or a descriptive error message if invalid
        """
        if not self.id:
            return (False, "id must not be empty")

        if not self.contractor:
            return (False, "contractor must not be empty")

        if self.pm_level < 0:
            return (False, "pm_level must be >= 0")

        if self.humidity < 0 or self.humidity > 100:
            return (False, "humidity must be between 0 and 100")

        if self.routes_count < 0:
            return (False, "routes_count must be >= 0")

        # A ward cannot have more routes needing action than routes
        if self.routes_needing_action < 0 or self.routes_needing_action > self.routes_count:
            return (False, "routes_needing_action must be between 0 and routes_count")

        if self.effectiveness is not None and not 0 <= self.effectiveness <= 100:
            return (False, "effectiveness must be between 0 and 100")

        return (True, None)
