"""
Unit protocol for the DustWatch System.

Wards and routes play the same role in the analytics. This module names the
accessors both record types expose so aggregation, grouping and ranking can
accept either.
"""

from typing import Optional, Protocol


class MonitoredUnit(Protocol):
    """Read-only view shared by WardData and RouteInfo."""

    @property
    def id(self) -> str: ...

    @property
    def contractor(self) -> str: ...

    @property
    def pm_level(self) -> float: ...

    @property
    def humidity(self) -> Optional[float]: ...

    @property
    def unit_count(self) -> int: ...

    @property
    def action_count(self) -> int: ...

    @property
    def needs_action(self) -> bool: ...

    @property
    def effectiveness(self) -> Optional[float]: ...

    @property
    def impact_score(self) -> Optional[float]: ...
