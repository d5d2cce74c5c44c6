"""Roster building: expand student sets into individual students."""

import logging
import re

from .config import SeatingConfig
from .exceptions import InvalidRosterError
from .models import Student, StudentSet

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")


def id_prefix(student_set: StudentSet, position: int, config: SeatingConfig) -> tuple[str, bool]:
    """Get the prefix for synthesized student ids of a set.

    Args:
        student_set: Set whose ids are synthesized
        position: 1-based position of the set in the input
        config: Seating configuration

    Returns:
        Tuple of (prefix, is_placeholder)
    """
    label = WHITESPACE_PATTERN.sub("", student_set.label)
    if label.isascii() and label.isdigit():
        return label, False
    return f"{config.placeholder_prefix}{position}-", True


def synthesize_ids(prefix: str, count: int, min_padding: int) -> list[str]:
    """Generate sequential register numbers, e.g. 101001, 101002, ...

    Args:
        prefix: Prefix prepended to every sequence number
        count: Number of ids to generate
        min_padding: Minimum width of the zero-padded sequence

    Returns:
        List of ids
    """
    width = max(min_padding, len(str(count)))
    return [f"{prefix}{str(n).zfill(width)}" for n in range(1, count + 1)]


def validate_student_set(student_set: StudentSet) -> None:
    """Check that a set declares an unambiguous, non-empty roster.

    Raises:
        InvalidRosterError: If the count is non-positive, the explicit list
            is empty, or the list and the count disagree
    """
    count = student_set.student_count
    students = student_set.students

    if count is not None and count <= 0:
        raise InvalidRosterError(f"student count must be positive, got {count}", student_set.id)

    if students is None:
        if count is None:
            raise InvalidRosterError("neither students nor a student count given", student_set.id)
        return

    if not students:
        if count:
            raise InvalidRosterError(
                f"student list is empty but a count of {count} was declared", student_set.id
            )
        raise InvalidRosterError("student list is empty", student_set.id)

    if count is not None and count != len(students):
        raise InvalidRosterError(
            f"{len(students)} students listed but a count of {count} was declared",
            student_set.id,
        )


def build_roster(
    student_sets: list[StudentSet],
    config: SeatingConfig | None = None,
    warnings: list[str] | None = None,
) -> list[Student]:
    """Expand student sets into one ordered list of students.

    Set input order and within-set order are preserved. Explicit rosters
    are used verbatim; otherwise ids are synthesized from the set label.

    Args:
        student_sets: Sets in input order
        config: Seating configuration (defaults if omitted)
        warnings: List collecting non-fatal notices

    Returns:
        Ordered list of Student records

    Raises:
        InvalidRosterError: On malformed sets or duplicate ids
    """
    config = config or SeatingConfig()
    if not student_sets:
        raise InvalidRosterError("no student sets given")

    seen_sets: set[str] = set()
    for student_set in student_sets:
        if student_set.id in seen_sets:
            raise InvalidRosterError("duplicate set id", student_set.id)
        seen_sets.add(student_set.id)
        validate_student_set(student_set)

    roster: list[Student] = []
    owners: dict[str, str] = {}
    for position, student_set in enumerate(student_sets, start=1):
        if student_set.students is not None:
            ids = [str(s) for s in student_set.students]
        else:
            prefix, is_placeholder = id_prefix(student_set, position, config)
            if is_placeholder and warnings is not None:
                warnings.append(
                    f"Set '{student_set.label}' has a non-numeric label; "
                    f"synthesized ids use placeholder prefix '{prefix}'"
                )
            ids = synthesize_ids(prefix, student_set.student_count, config.min_id_padding)

        for ordinal, student_id in enumerate(ids):
            if not student_id.strip():
                raise InvalidRosterError(f"blank student id at position {ordinal}", student_set.id)
            if student_id in owners:
                raise InvalidRosterError(
                    f"student '{student_id}' also appears in set '{owners[student_id]}'",
                    student_set.id,
                )
            owners[student_id] = student_set.id
            roster.append(Student(id=student_id, set_id=student_set.id, ordinal=ordinal))

    logger.debug(f"Built roster of {len(roster)} students from {len(student_sets)} sets")
    return roster
