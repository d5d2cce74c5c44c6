"""Tests for hall and roster validation."""

import pytest

from exam_seating.exceptions import InvalidHallError
from exam_seating.models import Hall, SeatDefinition, StudentSet
from exam_seating.validators import (
    check_allow_lists,
    validate_exam,
    validate_hall_layout,
    validate_halls,
)


class TestValidateHallLayout:
    """Tests for validate_hall_layout."""

    def test_valid_layout(self, gapped_hall):
        assert validate_hall_layout(gapped_hall) == (True, None)

    def test_duplicate_position(self):
        hall = Hall(
            id="h",
            name="Hall",
            layout=[SeatDefinition(id="a", row=0, col=0), SeatDefinition(id="b", row=0, col=0)],
        )
        is_valid, error = validate_hall_layout(hall)
        assert not is_valid
        assert "row 0, column 0" in error

    def test_duplicate_seat_id(self):
        hall = Hall(
            id="h",
            name="Hall",
            layout=[SeatDefinition(id="a", row=0, col=0), SeatDefinition(id="a", row=0, col=1)],
        )
        is_valid, error = validate_hall_layout(hall)
        assert not is_valid
        assert "Duplicate seat id 'a'" in error

    def test_negative_position(self):
        hall = Hall(id="h", name="Hall", layout=[SeatDefinition(id="a", row=-1, col=0)])
        is_valid, _ = validate_hall_layout(hall)
        assert not is_valid


class TestValidateHalls:
    """Tests for validate_halls."""

    def test_duplicate_hall_id(self, hall_factory):
        with pytest.raises(InvalidHallError) as exc_info:
            validate_halls([hall_factory("A", 2), hall_factory("A", 3)])
        assert exc_info.value.hall_id == "A"

    def test_empty_hall_is_valid(self):
        validate_halls([Hall(id="e", name="Empty")])


class TestCheckAllowLists:
    """Tests for check_allow_lists."""

    def test_unrestricted_halls_ignored(self, hall_factory, two_sets):
        assert check_allow_lists([hall_factory("A", 4)], two_sets) == []

    def test_unknown_sets(self, hall_factory, two_sets):
        warnings = check_allow_lists([hall_factory("R", 4, allowed=["set101", "X"])], two_sets)
        assert warnings == ["Hall 'Hall R' allows unknown sets: X"]

    def test_empty_allow_list(self, hall_factory, two_sets):
        warnings = check_allow_lists([hall_factory("R", 4, allowed=[])], two_sets)
        assert warnings == ["Hall 'Hall R' is restricted but allows no sets"]


class TestValidateExam:
    """Tests for validate_exam."""

    def test_valid_exam(self, hall_factory, two_sets):
        validation = validate_exam([hall_factory("A", 20)], two_sets)
        assert validation["valid"]
        assert validation["errors"] == []
        assert validation["total_students"] == 18
        assert validation["total_seats"] == 20

    def test_collects_errors(self):
        validation = validate_exam([], [StudentSet(id="s", label="1", student_count=0)])
        assert not validation["valid"]
        assert "No halls given" in validation["errors"]
        assert any("student count must be positive" in e for e in validation["errors"])
        assert validation["total_students"] == 0

    def test_short_capacity_is_not_a_validation_error(self, hall_factory, two_sets):
        validation = validate_exam([hall_factory("A", 5)], two_sets)
        assert validation["valid"]
        assert validation["total_students"] > validation["total_seats"]
