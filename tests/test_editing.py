"""Tests for manual re-seating of allocated plans."""

import pytest

from exam_seating.allocator.engine import allocate
from exam_seating.editing import PlanEditor
from exam_seating.exceptions import SeatingError
from exam_seating.models import StudentSet


def row_ids(plan, hall_id: str) -> list[str | None]:
    return [seat.student.id if seat.student else None for seat in plan.grid(hall_id)[0]]


@pytest.fixture
def editor(hall_factory):
    """Editor over hall A with 1001 and 1002 in the first two of four seats."""
    result = allocate(
        [hall_factory("A", 4)],
        [StudentSet(id="s", label="1", student_count=2)],
        seating_type="normal",
    )
    return PlanEditor(result.plan)


class TestMove:
    """Tests for PlanEditor.move."""

    def test_move_to_empty_seat(self, editor):
        editor.move("1001", "A", 0, 3)
        assert row_ids(editor.plan, "A") == [None, "1002", None, "1001"]

    def test_move_onto_taken_seat_swaps(self, editor):
        editor.move("1001", "A", 0, 1)
        assert row_ids(editor.plan, "A") == ["1002", "1001", None, None]
        assert editor.plan.total_assigned == 2

    def test_move_to_own_seat(self, editor):
        editor.move("1001", "A", 0, 0)
        assert row_ids(editor.plan, "A") == ["1001", "1002", None, None]

    def test_unknown_student(self, editor):
        with pytest.raises(SeatingError, match="not seated"):
            editor.move("9999", "A", 0, 3)

    @pytest.mark.parametrize("hall_id,row,col", [("A", 1, 0), ("A", 0, 9), ("B", 0, 0)])
    def test_rejects_positions_without_a_seat(self, editor, hall_id, row, col):
        with pytest.raises(SeatingError):
            editor.move("1001", hall_id, row, col)
        assert row_ids(editor.plan, "A") == ["1001", "1002", None, None]


class TestEditorLayoutGaps:
    """Tests for gaps and faculty seats."""

    @pytest.fixture
    def gap_editor(self, gapped_hall):
        result = allocate([gapped_hall], [StudentSet(id="s", label="9", student_count=1)])
        return PlanEditor(result.plan)

    def test_refuses_cell_without_seat(self, gap_editor):
        with pytest.raises(SeatingError, match="No seat at row 0, column 1"):
            gap_editor.move("9001", "gap", 0, 1)

    def test_refuses_faculty_seat(self, gap_editor):
        with pytest.raises(SeatingError, match="not assignable"):
            gap_editor.move("9001", "gap", 1, 1)
        assert gap_editor.plan.find_student("9001").id == "a"

    def test_move_across_gap(self, gap_editor):
        gap_editor.move("9001", "gap", 0, 2)
        assert gap_editor.plan.find_student("9001").id == "b"


class TestHolding:
    """Tests for unseating and placing students."""

    def test_unseat_blocks_commit(self, editor):
        student = editor.unseat("1002")

        assert student.id == "1002"
        assert editor.holding == [student]
        assert editor.plan.find_student("1002") is None
        with pytest.raises(SeatingError, match="1 students are unseated"):
            editor.commit()

    def test_place_from_holding(self, editor):
        editor.unseat("1002")
        displaced = editor.place("1002", "A", 0, 3)

        assert displaced is None
        assert editor.holding == []
        assert editor.commit() is editor.plan
        assert row_ids(editor.plan, "A") == ["1001", None, None, "1002"]

    def test_place_onto_taken_seat_displaces_to_holding(self, editor):
        editor.unseat("1002")
        displaced = editor.place("1002", "A", 0, 0)

        assert displaced.id == "1001"
        assert [s.id for s in editor.holding] == ["1001"]
        assert row_ids(editor.plan, "A") == ["1002", None, None, None]

    def test_place_requires_student_in_holding(self, editor):
        with pytest.raises(SeatingError, match="not in holding"):
            editor.place("1001", "A", 0, 3)
