"""
Tests for WardData component.

Tests cover:
- Equivalence classes: valid data, invalid data
- Boundary value analysis: humidity range, routes needing action
- Shared unit accessors used by the analytics
"""

import pytest
from dustwatch.status_classifier import StatusLevel


class TestWardDataValidation:
    """Test suite for WardData validation."""

    # ==================== Equivalence Classes ====================

    def test_valid_ward(self, make_ward):
        """Equivalence class: All valid values → validation passes."""
        valid, reason = make_ward().validate()
        assert valid is True
        assert reason is None

    def test_invalid_empty_id(self, make_ward):
        valid, reason = make_ward(id="").validate()
        assert valid is False
        assert "id" in reason

    def test_invalid_empty_contractor(self, make_ward):
        valid, reason = make_ward(contractor="").validate()
        assert valid is False
        assert "contractor" in reason

    def test_invalid_negative_pm(self, make_ward):
        """Error scenario: Negative PM → validation fails."""
        valid, reason = make_ward(pm_level=-1).validate()
        assert valid is False
        assert "pm_level" in reason

    def test_invalid_negative_routes_count(self, make_ward):
        valid, reason = make_ward(routes_count=-1, routes_needing_action=0).validate()
        assert valid is False
        assert "routes_count" in reason

    def test_invalid_effectiveness_above_100(self, make_ward):
        valid, reason = make_ward(effectiveness=101).validate()
        assert valid is False
        assert "effectiveness" in reason

    def test_missing_effectiveness_is_valid(self, make_ward):
        """Unmeasured effectiveness is allowed."""
        valid, reason = make_ward(effectiveness=None).validate()
        assert valid is True

    # ==================== Boundary Value Analysis ====================

    @pytest.mark.parametrize("humidity, expected", [
        (-1, False),
        (0, True),
        (100, True),
        (101, False),
    ])
    def test_humidity_boundaries(self, make_ward, humidity, expected):
        valid, _ = make_ward(humidity=humidity).validate()
        assert valid is expected

    @pytest.mark.parametrize("needing_action, expected", [
        (-1, False),
        (0, True),
        (10, True),
        (11, False),
    ])
    def test_routes_needing_action_boundaries(self, make_ward, needing_action, expected):
        """Boundary: routes_needing_action must stay within [0, routes_count]."""
        valid, _ = make_ward(routes_count=10, routes_needing_action=needing_action).validate()
        assert valid is expected


class TestWardDataAccessors:
    """Test suite for the unit accessors of WardData."""

    def test_counts_map_to_route_fields(self, make_ward):
        ward = make_ward(routes_count=12, routes_needing_action=4)
        assert ward.unit_count == 12
        assert ward.action_count == 4
        assert ward.needs_action is True

    def test_no_routes_needing_action(self, make_ward):
        assert make_ward(routes_needing_action=0).needs_action is False

    def test_status_from_pm_level(self, make_ward):
        assert make_ward(pm_level=289).status == StatusLevel.CRITICAL

    def test_no_impact_score(self, make_ward):
        assert make_ward().impact_score is None

    def test_ward_is_immutable(self, make_ward):
        ward = make_ward()
        with pytest.raises(AttributeError):
            ward.pm_level = 10
