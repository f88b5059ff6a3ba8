"""
Tests for WardRepository and SnapshotHolder components.

Tests cover:
- Lookup by id: hit, miss, find
- Construction errors: duplicate ids, invalid wards
- Snapshot publishing
"""

import pytest
from dustwatch.errors import UnknownUnitError
from dustwatch.mock_data import DELHI_WARDS, default_repository
from dustwatch.ward_repository import SnapshotHolder, WardRepository


class TestWardRepository:
    """Test suite for WardRepository."""

    @pytest.fixture
    def repository(self):
        return default_repository()

    def test_get_known_ward(self, repository):
        assert repository.get("shahdara").pm_level == 289

    def test_get_unknown_ward_raises(self, repository):
        """Error scenario: lookup with no match."""
        with pytest.raises(UnknownUnitError) as exc_info:
            repository.get("atlantis")
        assert exc_info.value.unit_id == "atlantis"

    def test_unknown_unit_is_key_error(self, repository):
        with pytest.raises(KeyError):
            repository.get("atlantis")

    def test_find_returns_none_for_unknown(self, repository):
        assert repository.find("atlantis") is None
        assert repository.find("west").name == "West"

    def test_preserves_order_and_size(self, repository):
        assert len(repository) == 11
        assert [w.id for w in repository] == [w.id for w in DELHI_WARDS]
        assert repository.all() == DELHI_WARDS

    def test_contains(self, repository):
        assert "east" in repository
        assert "atlantis" not in repository

    def test_contractors_first_seen(self, repository):
        assert repository.contractors() == ["ABC Contractors", "Green Clean Ltd", "XYZ Services"]

    def test_duplicate_id_raises(self, make_ward):
        with pytest.raises(ValueError, match="duplicate"):
            WardRepository([make_ward(id="a"), make_ward(id="a")])

    def test_invalid_ward_raises(self, make_ward):
        with pytest.raises(ValueError, match="humidity"):
            WardRepository([make_ward(humidity=150)])

    def test_invalid_ward_allowed_without_validation(self, make_ward):
        repository = WardRepository([make_ward(humidity=150)], validate=False)
        assert len(repository) == 1

    def test_input_list_changes_do_not_leak(self, make_ward):
        wards = [make_ward(id="a")]
        repository = WardRepository(wards)
        wards.append(make_ward(id="b"))
        assert len(repository) == 1

    def test_empty_repository(self):
        assert len(WardRepository([])) == 0


class TestSnapshotHolder:
    """Test suite for SnapshotHolder."""

    def test_publish_replaces_current(self, make_ward):
        first = WardRepository([make_ward(id="a")])
        second = WardRepository([make_ward(id="b")])
        holder = SnapshotHolder(first)

        assert holder.current() is first
        assert holder.version == 1

        assert holder.publish(second) == 2
        assert holder.current() is second

    def test_reader_keeps_old_snapshot(self, make_ward):
        holder = SnapshotHolder(WardRepository([make_ward(id="a")]))
        snapshot = holder.current()
        holder.publish(WardRepository([make_ward(id="b")]))
        assert "a" in snapshot
        assert "b" not in snapshot
