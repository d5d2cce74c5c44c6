"""Seat pool extraction and hall routing."""

from dataclasses import dataclass, field

from ..models import FillDirection, Hall, Seat, Student


def fill_order_key(direction: FillDirection):
    """Sort key ordering seat definitions by a fill direction."""
    if direction is FillDirection.COLUMN_MAJOR:
        return lambda seat: (seat.col, seat.row)
    return lambda seat: (seat.row, seat.col)


def extract_seat_pool(hall: Hall) -> list[Seat]:
    """Get the assignable seats of a hall in fill order.

    Faculty seats are excluded. Every seat is a fresh, empty Seat stamped
    with the hall id.

    Args:
        hall: Hall to extract seats from

    Returns:
        Ordered list of unassigned seats
    """
    assignable = [seat for seat in hall.layout if seat.is_assignable]
    assignable.sort(key=fill_order_key(hall.constraint.fill_direction))
    return [Seat(definition=seat, hall_id=hall.id) for seat in assignable]


@dataclass
class HallRouting:
    """Halls split by admission mode, each list in input order."""

    restricted: list[Hall] = field(default_factory=list)
    unrestricted: list[Hall] = field(default_factory=list)


def route_halls(halls: list[Hall]) -> HallRouting:
    """Split halls into restricted and unrestricted halls."""
    routing = HallRouting()
    for hall in halls:
        if hall.constraint.is_restricted:
            routing.restricted.append(hall)
        else:
            routing.unrestricted.append(hall)
    return routing


def eligible_students(hall: Hall, remaining: list[Student]) -> list[Student]:
    """Get the not-yet-seated students a restricted hall admits.

    Args:
        hall: Restricted hall
        remaining: Students still unseated, in roster order

    Returns:
        Students whose set is on the hall's allow-list, in roster order
    """
    return [student for student in remaining if hall.constraint.allows(student.set_id)]
