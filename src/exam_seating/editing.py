"""Manual re-seating of an allocated plan."""

import logging

from .exceptions import SeatingError
from .models import Seat, SeatingPlan, Student

logger = logging.getLogger(__name__)


class PlanEditor:
    """Moves students between the seats of a plan.

    The plan is edited in place. Students taken out of their seat wait in
    ``holding`` until they are placed again, and a plan cannot be
    committed while anyone is in holding.

    Usage:
        editor = PlanEditor(result.plan)
        editor.move("101001", "hallA", row=2, col=3)
        plan = editor.commit()
    """

    def __init__(self, plan: SeatingPlan):
        self.plan = plan
        self.holding: list[Student] = []

    def seat_at(self, hall_id: str, row: int, col: int) -> Seat:
        """Get the declared seat at a grid position.

        Raises:
            SeatingError: If the hall is unknown or no seat is declared there
        """
        if hall_id not in self.plan.grids:
            raise SeatingError(f"Unknown hall '{hall_id}'")
        grid = self.plan.grid(hall_id)
        if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
            seat = grid[row][col]
            if seat is not None:
                return seat
        raise SeatingError(f"No seat at row {row}, column {col} in hall '{hall_id}'")

    def _assignable_seat(self, hall_id: str, row: int, col: int) -> Seat:
        seat = self.seat_at(hall_id, row, col)
        if not seat.definition.is_assignable:
            raise SeatingError(f"Seat '{seat.id}' in hall '{hall_id}' is not assignable")
        return seat

    def move(self, student_id: str, hall_id: str, row: int, col: int) -> None:
        """Move a seated student to another seat.

        If the target seat is taken, the two students swap seats.

        Raises:
            SeatingError: If the student is not seated or the target is not
                an assignable seat. The plan is left unchanged.
        """
        source = self.plan.find_student(student_id)
        if source is None:
            raise SeatingError(f"Student '{student_id}' is not seated")
        target = self._assignable_seat(hall_id, row, col)
        if target is source:
            return

        student = source.vacate()
        displaced = target.vacate()
        target.assign(student)
        if displaced is not None:
            source.assign(displaced)
            logger.debug(f"Swapped '{student.id}' and '{displaced.id}'")
        else:
            logger.debug(f"Moved '{student.id}' to seat '{target.id}' in hall '{hall_id}'")

    def unseat(self, student_id: str) -> Student:
        """Take a student out of their seat and into holding."""
        seat = self.plan.find_student(student_id)
        if seat is None:
            raise SeatingError(f"Student '{student_id}' is not seated")
        student = seat.vacate()
        self.holding.append(student)
        return student

    def place(self, student_id: str, hall_id: str, row: int, col: int) -> Student | None:
        """Seat a student from holding.

        A student already sitting in the target seat goes to holding.

        Returns:
            The displaced student, or None if the seat was empty
        """
        student = next((s for s in self.holding if s.id == student_id), None)
        if student is None:
            raise SeatingError(f"Student '{student_id}' is not in holding")
        target = self._assignable_seat(hall_id, row, col)

        displaced = target.vacate()
        target.assign(student)
        self.holding.remove(student)
        if displaced is not None:
            self.holding.append(displaced)
        return displaced

    def commit(self) -> SeatingPlan:
        """Get the edited plan.

        Raises:
            SeatingError: If students are still in holding
        """
        if self.holding:
            raise SeatingError(
                f"Cannot save changes: {len(self.holding)} students are unseated in holding"
            )
        return self.plan
