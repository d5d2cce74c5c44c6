"""Assemble per-hall seat grids from allocated seats."""

from collections import Counter

from ..models import Grid, Hall, PlanStatistics, Seat, SeatingPlan, StudentSet


def assemble_grid(hall: Hall, allocated: list[Seat]) -> Grid:
    """Build the row/column grid of one hall.

    The grid is sized by the hall's declared layout only. Every declared
    seat appears exactly once: the allocated Seat when one exists at its
    position, otherwise a fresh empty Seat of the same kind. Positions
    without a declared seat stay None.

    Args:
        hall: Hall with its full (unfiltered) layout
        allocated: Seats of this hall produced by the allocation step

    Returns:
        Grid of Seat or None cells
    """
    rows, cols = hall.dimensions
    grid: Grid = [[None] * cols for _ in range(rows)]
    by_position = {seat.definition.position: seat for seat in allocated if seat.hall_id == hall.id}

    for definition in hall.layout:
        seat = by_position.get(definition.position)
        if seat is None or not definition.is_assignable:
            seat = Seat(definition=definition, hall_id=hall.id)
        grid[definition.row][definition.col] = seat

    return grid


def assemble_plan(halls: list[Hall], seats_by_hall: dict[str, list[Seat]]) -> SeatingPlan:
    """Build the seating plan for all halls, in hall input order."""
    return SeatingPlan(
        grids={hall.id: assemble_grid(hall, seats_by_hall.get(hall.id, [])) for hall in halls}
    )


def compute_statistics(
    plan: SeatingPlan,
    halls: list[Hall],
    student_sets: list[StudentSet],
) -> PlanStatistics:
    """Count seats and seated students per hall and per set."""
    by_hall = {hall.id: len(plan.assigned_seats(hall.id)) for hall in halls}
    set_counts = Counter(seat.student.set_id for seat in plan.assigned_seats())

    return PlanStatistics(
        total_students=sum(s.size for s in student_sets),
        total_seats=sum(hall.assignable_count for hall in halls),
        total_assigned=sum(by_hall.values()),
        by_hall=by_hall,
        by_set={s.id: set_counts.get(s.id, 0) for s in student_sets},
        hall_capacity={hall.id: hall.assignable_count for hall in halls},
    )
