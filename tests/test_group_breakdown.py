"""
Tests for group breakdown.

Tests cover:
- Partitioning: every unit in exactly one group
- Ordering: first-seen key order, optional sorts
- Singleton groups
- Contractor breakdown of the demo wards
"""

import pytest
from dustwatch.group_breakdown import breakdown, breakdown_by_contractor, breakdown_by_ward
from dustwatch.mock_data import DELHI_WARDS
from dustwatch.status_classifier import StatusLevel


class TestBreakdown:
    """Test suite for breakdown()."""

    @pytest.fixture
    def routes(self, make_route):
        """Routes from three wards, interleaved."""
        return [
            make_route(id="r1", ward_id="west", pm_before=120, needs_sprinkling=True),
            make_route(id="r2", ward_id="north", pm_before=200),
            make_route(id="r3", ward_id="west", pm_before=140, pm_after=70),
            make_route(id="r4", ward_id="east", pm_before=260, needs_sprinkling=True),
            make_route(id="r5", ward_id="north", pm_before=160, needs_sprinkling=True),
        ]

    def test_groups_partition_input(self, routes):
        """Property: union of groups == input, no duplicates."""
        groups = breakdown_by_ward(routes)
        ids = [uid for g in groups.values() for uid in g.unit_ids]
        assert sorted(ids) == sorted(r.id for r in routes)
        assert len(ids) == len(set(ids))

    def test_first_seen_order(self, routes):
        assert list(breakdown_by_ward(routes)) == ["west", "north", "east"]

    def test_group_aggregates(self, routes):
        west = breakdown_by_ward(routes)["west"]
        assert west.average_pm == 130
        assert west.needs_action_count == 1
        assert west.total_count == 2
        assert west.status == StatusLevel.MODERATE
        assert west.unit_ids == ("r1", "r3")
        assert west.average_effectiveness == 50

    def test_singleton_group(self, make_ward):
        """Scenario: a single-unit group averages to its own reading."""
        groups = breakdown([make_ward(id="west", pm_level=134)], lambda w: w.id)
        assert groups["west"].average_pm == 134
        assert groups["west"].status == StatusLevel.MODERATE

    def test_sort_by_average_pm(self, routes):
        assert list(breakdown_by_ward(routes, sort_by="average_pm")) == ["east", "north", "west"]

    def test_sort_by_key(self, routes):
        assert list(breakdown_by_ward(routes, sort_by="key")) == ["east", "north", "west"]

    def test_unknown_sort_raises(self, routes):
        with pytest.raises(ValueError):
            breakdown_by_ward(routes, sort_by="humidity")

    def test_empty_input_gives_no_groups(self):
        assert breakdown([], lambda u: u.contractor) == {}


class TestContractorBreakdown:
    """Test suite for the contractor breakdown of the demo wards."""

    @pytest.fixture
    def groups(self):
        return breakdown_by_contractor(DELHI_WARDS)

    def test_contractor_order(self, groups):
        assert list(groups) == ["ABC Contractors", "Green Clean Ltd", "XYZ Services"]

    def test_abc_contractors(self, groups):
        abc = groups["ABC Contractors"]
        assert abc.average_pm == 175
        assert abc.needs_action_count == 9
        assert abc.total_count == 36
        assert abc.average_effectiveness == 51
        assert abc.status == StatusLevel.POOR
        assert abc.unit_ids == ("north", "west", "south-west", "shahdara")

    def test_green_clean(self, groups):
        green = groups["Green Clean Ltd"]
        assert green.average_pm == 137
        assert green.status == StatusLevel.MODERATE

    def test_xyz_services_half_rounds_up(self, groups):
        """822 / 4 = 205.5 rounds up to 206."""
        xyz = groups["XYZ Services"]
        assert xyz.average_pm == 206
        assert xyz.needs_action_count == 14
