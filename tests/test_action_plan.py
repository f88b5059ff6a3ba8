"""
Tests for action plans.

Tests cover:
- Time slot windows and priorities
- Building a plan from routes
- The static demo schedule
"""

import pytest
from dustwatch.action_plan import Priority, TimeSlot, build_action_plan, priority_for
from dustwatch.mock_data import MOCK_ACTION_PLANS


class TestPriority:
    """Test suite for priority_for()."""

    @pytest.mark.parametrize("pm, expected", [
        (289, Priority.HIGH),
        (251, Priority.HIGH),
        (250, Priority.MEDIUM),
        (151, Priority.MEDIUM),
        (150, Priority.LOW),
        (40, Priority.LOW),
    ])
    def test_priority_follows_status(self, pm, expected):
        assert priority_for(pm) == expected

    def test_slot_windows(self):
        assert TimeSlot.MORNING.window == "6:00 - 10:00"
        assert TimeSlot.EVENING.window == "16:00 - 19:00"
        assert TimeSlot.NIGHT.window == "22:00 - 02:00"


class TestBuildActionPlan:
    """Test suite for build_action_plan()."""

    @pytest.fixture
    def routes(self, make_route):
        return [
            make_route(id="r1", name="Market Lane - East", pm_before=212, needs_sprinkling=True),
            make_route(id="r2", name="Main Street - East", pm_before=289, needs_sprinkling=True),
            make_route(id="r3", name="School Road - East", pm_before=300, needs_sprinkling=False),
            make_route(id="r4", name="Park Avenue - East", pm_before=120, needs_sprinkling=True),
        ]

    def test_plan_in_priority_order(self, routes):
        plan = build_action_plan(routes, TimeSlot.MORNING)
        assert plan.slot == TimeSlot.MORNING
        assert [item.route_id for item in plan.items] == ["r2", "r1", "r4"]

    def test_plan_items(self, routes):
        first = build_action_plan(routes, TimeSlot.MORNING).items[0]
        assert first.name == "Main Street - East"
        assert first.priority == Priority.HIGH
        assert first.reason == "PM10 at 289 µg/m³"

    def test_limit(self, routes):
        plan = build_action_plan(routes, TimeSlot.EVENING, limit=2)
        assert len(plan.items) == 2

    def test_no_routes_needing_action(self, make_route):
        plan = build_action_plan([make_route(needs_sprinkling=False)], TimeSlot.NIGHT)
        assert plan.items == ()

    def test_count_by_priority(self, routes):
        plan = build_action_plan(routes, TimeSlot.MORNING)
        assert plan.count_by_priority(Priority.HIGH) == 1
        assert plan.count_by_priority(Priority.MEDIUM) == 1
        assert plan.count_by_priority(Priority.LOW) == 1


class TestMockActionPlans:
    """Test suite for the static demo schedule."""

    def test_one_plan_per_slot(self):
        assert [plan.slot for plan in MOCK_ACTION_PLANS] == list(TimeSlot)

    def test_morning_plan(self):
        morning = MOCK_ACTION_PLANS[0]
        assert len(morning.items) == 3
        assert morning.count_by_priority(Priority.HIGH) == 2
