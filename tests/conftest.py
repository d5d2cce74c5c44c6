"""Test fixtures for exam seating tests."""

import pytest

from exam_seating.models import (
    ConstraintMode,
    FillDirection,
    Hall,
    HallConstraint,
    SeatDefinition,
    SeatKind,
    StudentSet,
)


def make_hall(
    hall_id: str,
    seats: int,
    cols: int | None = None,
    allowed: list[str] | None = None,
    direction: FillDirection = FillDirection.ROW_MAJOR,
) -> Hall:
    """Create a hall with ``seats`` standard seats laid out ``cols`` per row."""
    cols = cols or seats
    layout = [
        SeatDefinition(id=f"s{i}", row=i // cols, col=i % cols) for i in range(seats)
    ]
    constraint = HallConstraint(fill_direction=direction)
    if allowed is not None:
        constraint = HallConstraint(
            mode=ConstraintMode.RESTRICTED,
            allowed_set_ids=allowed,
            fill_direction=direction,
        )
    return Hall(id=hall_id, name=f"Hall {hall_id}", layout=layout, constraint=constraint)


@pytest.fixture
def hall_factory():
    """Factory for halls with a simple layout."""
    return make_hall


@pytest.fixture
def two_sets():
    """Two numeric-label sets of 9 students each."""
    return [
        StudentSet(id="set101", label="101", student_count=9),
        StudentSet(id="set102", label="102", student_count=9),
    ]


@pytest.fixture
def gapped_hall():
    """Hall with seats at (0,0) and (0,2) only, plus a faculty seat at (1,1)."""
    return Hall(
        id="gap",
        name="Gap Hall",
        layout=[
            SeatDefinition(id="a", row=0, col=0),
            SeatDefinition(id="b", row=0, col=2),
            SeatDefinition(id="f", row=1, col=1, kind=SeatKind.FACULTY),
        ],
    )


@pytest.fixture
def exam_record():
    """Exam record in the older stored format."""
    return {
        "id": "exam02",
        "title": "Finals - Advanced Mode",
        "halls": [
            {
                "id": "hallC",
                "name": "Hall C",
                "layout": [
                    {"id": f"s{i}", "row": i // 5, "col": i % 5, "type": "standard"}
                    for i in range(10)
                ],
                "constraints": {
                    "type": "advanced",
                    "allowedSetIds": ["set201"],
                    "arrangement": "vertical",
                },
            },
            {"id": "hallD", "name": "Hall D", "rows": 4, "cols": 5},
        ],
        "studentSets": [
            {"id": "set201", "subject": "201", "studentCount": 12},
            {"id": "set202", "subject": "202", "studentCount": 8},
        ],
        "editorMode": "advanced",
        "seatingType": "normal",
    }
