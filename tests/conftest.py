"""
Pytest configuration for DustWatch System tests.

Registers custom markers and provides shared fixtures.
"""

from datetime import datetime

import pytest

from dustwatch.route_info import RouteInfo
from dustwatch.ward_data import WardData


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def now():
    """Fixed evaluation time shared by time-dependent tests."""
    return datetime(2024, 11, 5, 12, 0, 0)


@pytest.fixture
def make_ward():
    """Factory fixture building a valid WardData with overridable fields."""
    def _make_ward(**overrides) -> WardData:
        fields = {
            "id": "ward",
            "name": "Ward",
            "color": "#ffffff",
            "coordinates": ((28.6, 77.2), (28.7, 77.3), (28.6, 77.2)),
            "pm_level": 120,
            "humidity": 50,
            "routes_count": 10,
            "routes_needing_action": 2,
            "last_updated": "1 min ago",
            "contractor": "ABC Contractors",
            "effectiveness": 50,
        }
        fields.update(overrides)
        return WardData(**fields)
    return _make_ward


@pytest.fixture
def make_route():
    """Factory fixture building a valid RouteInfo with overridable fields."""
    def _make_route(**overrides) -> RouteInfo:
        fields = {
            "id": "route",
            "name": "Main Street",
            "ward_id": "ward",
            "contractor": "ABC Contractors",
            "pm_before": 150,
        }
        fields.update(overrides)
        return RouteInfo(**fields)
    return _make_route
