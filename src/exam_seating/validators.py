"""Validation logic for halls and student sets."""

from .exceptions import InvalidHallError, SeatingError
from .models import Hall, StudentSet
from .roster import build_roster


def validate_hall_layout(hall: Hall) -> tuple[bool, str | None]:
    """Validate the seat layout of a hall.

    Row/column pairs and seat ids must be unique, coordinates non-negative.

    Args:
        hall: Hall to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    positions: set[tuple[int, int]] = set()
    seat_ids: set[str] = set()

    for seat in hall.layout:
        if seat.row < 0 or seat.col < 0:
            return False, f"Seat '{seat.id}' has a negative position ({seat.row}, {seat.col})"
        if seat.position in positions:
            return False, f"More than one seat at row {seat.row}, column {seat.col}"
        if seat.id in seat_ids:
            return False, f"Duplicate seat id '{seat.id}'"
        positions.add(seat.position)
        seat_ids.add(seat.id)

    return True, None


def validate_halls(halls: list[Hall]) -> None:
    """Validate all halls before allocation.

    Raises:
        InvalidHallError: On duplicate hall ids or a malformed layout
    """
    hall_ids: set[str] = set()
    for hall in halls:
        if hall.id in hall_ids:
            raise InvalidHallError("duplicate hall id", hall.id)
        hall_ids.add(hall.id)

        is_valid, error = validate_hall_layout(hall)
        if not is_valid:
            raise InvalidHallError(error, hall.id)


def check_allow_lists(halls: list[Hall], student_sets: list[StudentSet]) -> list[str]:
    """Find restricted halls whose allow-list names unknown sets.

    Returns:
        List of warning messages
    """
    known = {s.id for s in student_sets}
    warnings = []
    for hall in halls:
        if not hall.constraint.is_restricted:
            continue
        if not hall.constraint.allowed_set_ids:
            warnings.append(f"Hall '{hall.name}' is restricted but allows no sets")
            continue
        unknown = [sid for sid in hall.constraint.allowed_set_ids if sid not in known]
        if unknown:
            warnings.append(f"Hall '{hall.name}' allows unknown sets: {', '.join(unknown)}")
    return warnings


def validate_exam(halls: list[Hall], student_sets: list[StudentSet]) -> dict:
    """Validate an exam's halls and sets without allocating seats.

    Returns:
        Dictionary with ``valid``, ``errors``, ``warnings``, ``total_students``
        and ``total_seats``
    """
    errors: list[str] = []
    warnings: list[str] = []
    total_students = 0

    if not halls:
        errors.append("No halls given")

    try:
        validate_halls(halls)
    except SeatingError as e:
        errors.append(str(e))

    try:
        total_students = len(build_roster(student_sets, warnings=warnings))
    except SeatingError as e:
        errors.append(str(e))

    warnings.extend(check_allow_lists(halls, student_sets))

    return {
        "valid": not errors,
        "errors": errors,
        "warnings": warnings,
        "total_students": total_students,
        "total_seats": sum(hall.assignable_count for hall in halls),
    }
