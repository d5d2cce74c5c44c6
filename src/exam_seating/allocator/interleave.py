"""Round-robin placement of students from several sets onto an ordered seat list.

Sets take turns in input order, one student per turn, so two students of
the same set never sit next to each other in fill order while another set
still has students left. Once a single set remains, its students are
either spaced out with one empty seat between them (fair seating) or
packed densely.
"""

import logging
from collections import deque
from dataclasses import dataclass, field

from ..models import Seat, SeatingType, Student

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    """Outcome of placing students onto a seat list.

    Attributes:
        placed: Students seated, in placement order
        unplaced: Students left without a seat, in roster order
        warnings: Non-fatal notices (spacing shortfall)
        seats_used: Number of seats consumed from the start of the list,
                    including gaps left by spacing
    """

    placed: list[Student] = field(default_factory=list)
    unplaced: list[Student] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    seats_used: int = 0


def group_by_set(students: list[Student]) -> dict[str, deque[Student]]:
    """Group students into per-set queues, keeping first-seen set order."""
    queues: dict[str, deque[Student]] = {}
    for student in students:
        queues.setdefault(student.set_id, deque()).append(student)
    return queues


def spaced_seats_required(count: int) -> int:
    """Seats needed to seat ``count`` students with one gap between each."""
    return 2 * count - 1 if count > 0 else 0


def place_single_set(
    seats: list[Seat],
    start: int,
    queue: deque[Student],
    placed: list[Student],
    fair: bool = True,
) -> tuple[int, int]:
    """Seat the students of the last remaining set.

    With ``fair`` set and enough room for ``student, gap, student, ...``
    every other seat is used; otherwise students are packed densely.

    Args:
        seats: Ordered seat list
        start: Index of the first free seat
        queue: Students of the remaining set; consumed as they are seated
        placed: List collecting seated students
        fair: Whether to attempt spacing

    Returns:
        Tuple of (next free seat index, spacing shortfall in seats). The
        shortfall is 0 when spacing was honored or not requested.
    """
    available = len(seats) - start
    required = spaced_seats_required(len(queue))
    spaced = fair and available >= required
    shortfall = 0 if spaced or not fair else required - available
    step = 2 if spaced else 1

    cursor = start
    while queue and cursor < len(seats):
        student = queue.popleft()
        seats[cursor].assign(student)
        placed.append(student)
        cursor += step

    return min(cursor, len(seats)), shortfall


def interleave(
    seats: list[Seat],
    students: list[Student],
    seating_type: SeatingType = SeatingType.FAIR,
    set_labels: dict[str, str] | None = None,
    hall_names: dict[str, str] | None = None,
) -> PlacementResult:
    """Fill seats by rotating across the sets that still have students.

    Each turn takes the head student of the next active set and seats it on
    the next free seat. A set that runs out leaves the rotation. Placement
    stops when everyone is seated or the seats run out.

    Args:
        seats: Ordered seat list; seats are assigned in place
        students: Students to seat, grouped by set in roster order
        seating_type: FAIR spaces out a lone remaining set when possible
        set_labels: Optional set id -> display label mapping for warnings
        hall_names: Optional hall id -> hall name mapping for warnings

    Returns:
        PlacementResult with seated and unseated students
    """
    set_labels = set_labels or {}
    hall_names = hall_names or {}
    queues = group_by_set(students)
    active = deque(set_id for set_id, queue in queues.items() if queue)
    result = PlacementResult()
    cursor = 0

    while active and cursor < len(seats):
        if len(active) == 1 and seating_type is SeatingType.FAIR:
            set_id = active.popleft()
            queue = queues[set_id]
            remaining = len(queue)
            start = cursor
            cursor, shortfall = place_single_set(seats, cursor, queue, result.placed)
            if shortfall:
                halls = list(
                    dict.fromkeys(
                        hall_names.get(seat.hall_id, seat.hall_id) for seat in seats[start:cursor]
                    )
                )
                label = set_labels.get(set_id, set_id)
                message = (
                    f"Fair spacing not possible for set '{label}' in {', '.join(halls)}: "
                    f"{remaining} students need {spaced_seats_required(remaining)} seats, "
                    f"{len(seats) - start} available (short by {shortfall}); seated densely"
                )
                logger.warning(message)
                result.warnings.append(message)
            else:
                logger.debug(f"Spaced {remaining} students of set '{set_id}' from seat {start}")
            break

        set_id = active[0]
        queue = queues[set_id]
        student = queue.popleft()
        seats[cursor].assign(student)
        result.placed.append(student)
        cursor += 1

        if queue:
            active.rotate(-1)
        else:
            active.popleft()

    result.seats_used = cursor
    result.unplaced = [student for queue in queues.values() for student in queue]
    return result
