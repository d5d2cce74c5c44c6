"""Seat allocation engine.

Two variants share the same placement primitives:

- classic: every non-faculty seat of every hall forms one pool; hall
  constraints are ignored.
- constrained: restricted halls are filled first from the students their
  allow-list admits. Students that do not fit are returned to the unseated
  pool, which is then placed into all unrestricted halls combined.

Allocation is a pure function of its inputs. Errors derived from
SeatingError are returned in the AllocationResult, never raised.
"""

import logging
from typing import Any

from ..config import SeatingConfig
from ..exceptions import (
    InsufficientCapacityError,
    SeatingError,
    UnroutableOverflowError,
)
from ..models import (
    AllocationMode,
    AllocationResult,
    Hall,
    Seat,
    SeatingPlan,
    SeatingType,
    Student,
    StudentSet,
)
from ..roster import build_roster
from ..validators import check_allow_lists, validate_halls
from .exporter import parse_exam
from .interleave import interleave
from .plan import assemble_plan, compute_statistics
from .seats import eligible_students, extract_seat_pool, route_halls

logger = logging.getLogger(__name__)


class SeatAllocator:
    """Assigns students to hall seats."""

    def __init__(self, config: SeatingConfig | None = None):
        """
        Initialize the allocator.

        Args:
            config: Seating configuration. Defaults are used if omitted.
        """
        self.config = config or SeatingConfig()

    def allocate(
        self,
        halls: list[Hall],
        student_sets: list[StudentSet],
        mode: AllocationMode | str | None = None,
        seating_type: SeatingType | str | None = None,
    ) -> AllocationResult:
        """
        Allocate every student to a seat.

        Args:
            halls: Halls in input order.
            student_sets: Student sets in input order.
            mode: Classic or constrained allocation (config default if omitted).
            seating_type: Fair or normal seating (config default if omitted).

        Returns:
            AllocationResult with a complete plan, or with ``plan=None`` and an
            error message. Never a partial plan.
        """
        mode = AllocationMode.parse(mode or self.config.mode)
        seating_type = SeatingType.parse(seating_type or self.config.seating_type)
        result = AllocationResult(mode=mode, seating_type=seating_type)
        warnings: list[str] = []

        try:
            validate_halls(halls)
            roster = build_roster(student_sets, self.config, warnings)
            labels = {s.id: s.label for s in student_sets}
            hall_names = {hall.id: hall.name for hall in halls}

            logger.info(
                f"Allocating {len(roster)} students from {len(student_sets)} sets "
                f"into {len(halls)} halls ({mode.value}, {seating_type.value})"
            )

            if mode is AllocationMode.CLASSIC:
                seats_by_hall = self._allocate_classic(
                    halls, roster, seating_type, labels, hall_names, warnings
                )
            else:
                warnings.extend(check_allow_lists(halls, student_sets))
                seats_by_hall = self._allocate_constrained(
                    halls, roster, seating_type, labels, hall_names, warnings
                )

            plan = assemble_plan(halls, seats_by_hall)
            self._verify_plan(plan, halls, roster, mode)
        except SeatingError as e:
            logger.error(f"Allocation failed: {e}")
            result.warnings = warnings
            result.error = str(e)
            result.failure = e
            return result

        result.plan = plan
        result.warnings = warnings
        result.statistics = compute_statistics(plan, halls, student_sets)
        logger.info(
            f"Seated {result.statistics.total_assigned} students "
            f"with {len(warnings)} warnings"
        )
        return result

    def _allocate_classic(
        self,
        halls: list[Hall],
        roster: list[Student],
        seating_type: SeatingType,
        labels: dict[str, str],
        hall_names: dict[str, str],
        warnings: list[str],
    ) -> dict[str, list[Seat]]:
        """Place the whole roster into the seats of all halls pooled together."""
        seats_by_hall = {hall.id: extract_seat_pool(hall) for hall in halls}
        pool = [seat for hall in halls for seat in seats_by_hall[hall.id]]

        if len(roster) > len(pool):
            raise InsufficientCapacityError(required=len(roster), available=len(pool))

        placement = interleave(pool, roster, seating_type, labels, hall_names)
        warnings.extend(placement.warnings)

        if placement.unplaced:
            raise InsufficientCapacityError(required=len(roster), available=len(placement.placed))

        return seats_by_hall

    def _allocate_constrained(
        self,
        halls: list[Hall],
        roster: list[Student],
        seating_type: SeatingType,
        labels: dict[str, str],
        hall_names: dict[str, str],
        warnings: list[str],
    ) -> dict[str, list[Seat]]:
        """Fill restricted halls first, then consolidate the rest into unrestricted halls."""
        routing = route_halls(halls)
        seats_by_hall: dict[str, list[Seat]] = {}
        remaining = list(roster)
        overflow_halls: list[str] = []

        for hall in routing.restricted:
            pool = extract_seat_pool(hall)
            seats_by_hall[hall.id] = pool
            eligible = eligible_students(hall, remaining)
            if not eligible:
                logger.debug(f"No eligible students left for restricted hall '{hall.name}'")
                continue

            placement = interleave(pool, eligible, seating_type, labels, hall_names)
            warnings.extend(placement.warnings)

            seated = {student.id for student in placement.placed}
            remaining = [student for student in remaining if student.id not in seated]
            logger.debug(f"Restricted hall '{hall.name}' seated {len(seated)} of {len(eligible)}")

            if placement.unplaced:
                overflow_halls.append(hall.name)
                message = (
                    f"{len(placement.unplaced)} overflowed from {hall.name}; "
                    "returned to the unrestricted pool"
                )
                logger.warning(message)
                warnings.append(message)

        for hall in routing.unrestricted:
            seats_by_hall[hall.id] = extract_seat_pool(hall)
        pool = [seat for hall in routing.unrestricted for seat in seats_by_hall[hall.id]]

        if len(remaining) > len(pool):
            raise UnroutableOverflowError(
                required=len(remaining),
                available=len(pool),
                overflow_halls=overflow_halls,
            )

        if remaining:
            placement = interleave(pool, remaining, seating_type, labels, hall_names)
            warnings.extend(placement.warnings)
            if placement.unplaced:
                raise UnroutableOverflowError(
                    required=len(remaining),
                    available=len(placement.placed),
                    overflow_halls=overflow_halls,
                )

        return seats_by_hall

    def _verify_plan(
        self,
        plan: SeatingPlan,
        halls: list[Hall],
        roster: list[Student],
        mode: AllocationMode,
    ) -> None:
        """Check that every student sits exactly once and hall constraints hold.

        Raises:
            SeatingError: If the plan breaks an allocation invariant
        """
        seen: set[str] = set()
        for hall in halls:
            for seat in plan.assigned_seats(hall.id):
                student = seat.student
                if student.id in seen:
                    raise SeatingError(f"Student '{student.id}' was seated twice")
                seen.add(student.id)
                if mode is AllocationMode.CONSTRAINED and not hall.constraint.allows(
                    student.set_id
                ):
                    raise SeatingError(
                        f"Student '{student.id}' was seated in hall '{hall.name}' "
                        "which does not admit their set"
                    )

        if len(seen) != len(roster):
            raise SeatingError(f"Seated {len(seen)} of {len(roster)} students")


def allocate(
    halls: list[Hall],
    student_sets: list[StudentSet],
    mode: AllocationMode | str | None = None,
    seating_type: SeatingType | str | None = None,
    config: SeatingConfig | None = None,
) -> AllocationResult:
    """Allocate seats for one exam. See SeatAllocator.allocate."""
    return SeatAllocator(config).allocate(halls, student_sets, mode, seating_type)


def allocate_batch(
    exams: list[dict[str, Any]],
    config: SeatingConfig | None = None,
) -> dict[str, AllocationResult]:
    """Allocate seats for several independent exams.

    Each exam is a mapping with ``id``, ``halls``, ``student_sets`` (or
    ``studentSets``) and optional ``mode`` and ``seating_type``. A failing
    exam gets an error result; the remaining exams are still allocated.

    Args:
        exams: Exam records as loaded from JSON
        config: Seating configuration shared by all runs

    Returns:
        Dictionary mapping exam id to its AllocationResult
    """
    allocator = SeatAllocator(config)
    results: dict[str, AllocationResult] = {}

    for index, exam in enumerate(exams):
        exam_id = str(exam.get("id", f"exam-{index + 1}"))
        try:
            halls, student_sets = parse_exam(exam)
            mode = exam.get("mode", exam.get("editorMode"))
            seating_type = exam.get("seating_type", exam.get("seatingType"))
            results[exam_id] = allocator.allocate(halls, student_sets, mode, seating_type)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed exam record '{exam_id}': {e}")
            failure = SeatingError(f"Malformed exam record '{exam_id}': {e}")
            results[exam_id] = AllocationResult(error=str(failure), failure=failure)

    return results
