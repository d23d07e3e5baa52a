"""Tests for assignment validation."""
import pytest

from shiftrota.engine.assign import generate_assignment
from shiftrota.engine.validation import ValidationResult, validate_assignment
from shiftrota.models.assignment import Assignment, CellAssignment
from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings


class TestValidateAssignment:
    """Tests for validate_assignment function."""

    @pytest.fixture
    def settings(self):
        return SchedulerSettings(day_headcount=2, night_headcount=1, weekly_cap=3)

    @pytest.fixture
    def team(self):
        return [
            Person(name="Ann", availability={0: ["06:00-12:00", "12:00-18:00"]}),
            Person(name="Ben", availability={0: ["06:00-12:00", "18:00-00:00"]}),
        ]

    def test_returns_result(self, team, catalog, settings):
        """Test validate returns a ValidationResult."""
        result = validate_assignment(Assignment(), team, catalog, settings)

        assert isinstance(result, ValidationResult)
        assert result.is_valid

    def test_engine_output_is_valid(self, sample_roster, catalog):
        """Engine output never breaks an invariant."""
        settings = SchedulerSettings(day_headcount=2, night_headcount=2, weekly_cap=6)
        assignment = generate_assignment(sample_roster, catalog, settings)

        result = validate_assignment(assignment, sample_roster, catalog, settings)

        assert result.is_valid
        assert result.deficit == assignment.total_deficit
        assert result.deficit > 0

    def test_unavailable_person(self, team, catalog, settings):
        assignment = Assignment(entries=[CellAssignment(0, "18:00-00:00", ["Ann"], 1)])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.unavailable == 1
        assert not result.is_valid
        assert result.get_critical_violations()[0].person == "Ann"

    def test_duplicate_member(self, team, catalog, settings):
        assignment = Assignment(entries=[CellAssignment(0, "06:00-12:00", ["Ann", "Ann"], 2)])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.duplicate_members == 1
        assert result.unavailable == 0

    def test_unknown_person(self, team, catalog, settings):
        assignment = Assignment(entries=[CellAssignment(0, "06:00-12:00", ["Zed"], 2)])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.unknown_people == 1
        assert result.deficit == 1

    def test_overstaffed_beyond_eligible(self, team, catalog):
        """Only Ann can work Sunday 12-18, so two members is too many."""
        settings = SchedulerSettings(day_headcount=2)
        assignment = Assignment(entries=[
            CellAssignment(0, "12:00-18:00", ["Ann", "Ben"], 2),
        ])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.overstaffed == 1
        assert result.unavailable == 1

    def test_cap_exceeded(self, team, catalog):
        settings = SchedulerSettings(day_headcount=2, weekly_cap=1)
        assignment = Assignment(entries=[
            CellAssignment(0, "06:00-12:00", ["Ann"], 2),
            CellAssignment(0, "12:00-18:00", ["Ann"], 2),
        ])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.cap_exceeded == 1
        assert "cap is 1" in result.get_critical_violations()[0].message

    def test_duplicate_roster_names_warn(self, catalog, settings):
        team = [Person(name="Ann"), Person(name="Ann")]

        result = validate_assignment(Assignment(), team, catalog, settings)

        assert result.duplicate_names == 1
        assert result.is_valid
        assert len(result.get_warnings()) == 1

    def test_deficit_is_not_a_violation(self, team, catalog, settings):
        assignment = Assignment(entries=[CellAssignment(0, "06:00-12:00", [], 2)])

        result = validate_assignment(assignment, team, catalog, settings)

        assert result.deficit == 2
        assert result.is_valid

    def test_as_dict(self):
        """Test as_dict method."""
        result = ValidationResult(unavailable=2, overstaffed=1)

        d = result.as_dict()

        assert d["unavailable"] == 2
        assert d["overstaffed"] == 1
        assert d["cap_exceeded"] == 0
        assert set(d) == {
            "unavailable", "cap_exceeded", "overstaffed", "duplicate_members",
            "unknown_people", "duplicate_names", "deficit",
        }
