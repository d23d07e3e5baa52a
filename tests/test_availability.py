"""Tests for the availability index and priority ordering."""
import pytest

from shiftrota.engine.availability import build_availability_index
from shiftrota.engine.priority import order_cells, priority_key
from shiftrota.models.person import Person
from shiftrota.models.slot import Cell


class TestAvailabilityIndex:
    """Tests for build_availability_index."""

    def test_covers_every_cell(self, sample_roster, catalog):
        index = build_availability_index(sample_roster, catalog)
        assert len(index.eligible) == 28

    def test_eligible_in_roster_order(self, sample_roster, catalog):
        index = build_availability_index(sample_roster, catalog)

        assert index.eligible_for(Cell(0, "06:00-12:00")) == ["Alice", "Bob", "Diana"]
        assert index.eligible_for(Cell(1, "06:00-12:00")) == ["Alice", "Bob", "Eve"]
        assert index.eligible_for(Cell(0, "00:00-06:00")) == ["Alice", "Charlie", "Diana"]
        assert index.eligible_for(Cell(2, "18:00-00:00")) == ["Alice", "Charlie"]

    def test_weekly_totals(self, sample_roster, catalog):
        index = build_availability_index(sample_roster, catalog)

        assert index.totals == {
            "Alice": 28,
            "Bob": 14,
            "Charlie": 14,
            "Diana": 6,
            "Eve": 2,
        }

    def test_slots_outside_catalog_ignored(self, catalog):
        p = Person(name="A", availability={0: ["06:00-12:00", "01:00-02:00"]})
        index = build_availability_index([p], catalog)
        assert index.total("A") == 1

    def test_denominator_floored_at_one(self, catalog):
        index = build_availability_index([Person(name="Nobody")], catalog)
        assert index.total("Nobody") == 0
        assert index.denominator("Nobody") == 1

    def test_candidate_and_empty_cells(self, catalog):
        eve = Person(name="Eve", availability={1: ["06:00-12:00"], 3: ["06:00-12:00"]})
        index = build_availability_index([eve], catalog)

        assert index.candidate_cells == [Cell(1, "06:00-12:00"), Cell(3, "06:00-12:00")]
        assert len(index.empty_cells) == 26

    def test_roster_not_mutated(self, sample_roster, catalog):
        before = [p.to_dict() for p in sample_roster]
        build_availability_index(sample_roster, catalog)
        assert [p.to_dict() for p in sample_roster] == before


class TestPriorityOrdering:
    """Tests for order_cells."""

    @pytest.fixture
    def roster(self, catalog):
        return [
            Person.fully_available("A", catalog),
            Person(name="B", availability={3: ["06:00-12:00"], 5: ["18:00-00:00"]}),
            Person(name="C", availability={5: ["18:00-00:00"]}),
        ]

    def test_scarcest_first(self, roster, catalog):
        order = order_cells(build_availability_index(roster, catalog))

        assert len(order) == 28
        assert order[0] == Cell(0, "06:00-12:00")
        assert order[-2] == Cell(3, "06:00-12:00")
        assert order[-1] == Cell(5, "18:00-00:00")

    def test_ties_by_day_then_catalog_position(self, roster, catalog):
        order = order_cells(build_availability_index(roster, catalog))

        assert order[:5] == [
            Cell(0, "06:00-12:00"),
            Cell(0, "12:00-18:00"),
            Cell(0, "18:00-00:00"),
            Cell(0, "00:00-06:00"),
            Cell(1, "06:00-12:00"),
        ]

    def test_catalog_position_not_label_order(self, four_hour_catalog):
        # "02:00-06:00" sorts before "06:00-10:00" as text but is last in the catalog
        p = Person(name="A", availability={0: ["02:00-06:00", "06:00-10:00"]})
        order = order_cells(build_availability_index([p], four_hour_catalog))
        assert order == [Cell(0, "06:00-10:00"), Cell(0, "02:00-06:00")]

    def test_keys_non_decreasing(self, sample_roster, catalog):
        index = build_availability_index(sample_roster, catalog)
        keys = [priority_key(index, c) for c in order_cells(index)]
        assert keys == sorted(keys)

    def test_empty_cells_excluded(self, catalog):
        p = Person(name="A", availability={2: ["12:00-18:00"]})
        assert order_cells(build_availability_index([p], catalog)) == [Cell(2, "12:00-18:00")]

    def test_empty_roster(self, catalog):
        assert order_cells(build_availability_index([], catalog)) == []
