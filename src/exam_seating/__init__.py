"""Exam Seating - seat allocation for examination halls.

This module assigns examinees, grouped into sets (e.g. subjects), to the
seats of one or more halls. Students of different sets are interleaved so
that neighbours in fill order come from different sets, halls may be
restricted to particular sets, and a single remaining set can be spaced
out with empty seats between students.

Example usage:
    from exam_seating import Hall, StudentSet, allocate

    halls = [Hall.grid("hallA", "Hall A", rows=8, cols=8)]
    sets = [
        StudentSet(id="set101", label="101", student_count=30),
        StudentSet(id="set102", label="102", student_count=25),
    ]

    result = allocate(halls, sets)
    if result.success:
        seat = result.plan.find_student("101001")
        print(f"{seat.hall_id} row {seat.row} col {seat.col}")
    else:
        print(result.error)

    # Export to JSON
    from exam_seating.allocator import export_result_json
    export_result_json(result, "plan.json")
"""

from .allocator import SeatAllocator, allocate, allocate_batch
from .config import SeatingConfig, load_config
from .editing import PlanEditor
from .exceptions import (
    CapacityError,
    InsufficientCapacityError,
    InvalidHallError,
    InvalidRosterError,
    SeatingError,
    UnroutableOverflowError,
)
from .importers import read_roster_file, student_set_from_file
from .models import (
    AllocationMode,
    AllocationResult,
    Assigned,
    ConstraintMode,
    Empty,
    FillDirection,
    Hall,
    HallConstraint,
    PlanStatistics,
    Seat,
    SeatDefinition,
    SeatingPlan,
    SeatingType,
    SeatKind,
    Student,
    StudentSet,
)
from .roster import build_roster

__version__ = "0.1.0"

__all__ = [
    # Allocation
    "SeatAllocator",
    "allocate",
    "allocate_batch",
    "build_roster",
    "PlanEditor",
    # Configuration
    "SeatingConfig",
    "load_config",
    # Models
    "AllocationMode",
    "AllocationResult",
    "Assigned",
    "ConstraintMode",
    "Empty",
    "FillDirection",
    "Hall",
    "HallConstraint",
    "PlanStatistics",
    "Seat",
    "SeatDefinition",
    "SeatingPlan",
    "SeatingType",
    "SeatKind",
    "Student",
    "StudentSet",
    # Roster import
    "read_roster_file",
    "student_set_from_file",
    # Exceptions
    "SeatingError",
    "InvalidRosterError",
    "InvalidHallError",
    "CapacityError",
    "InsufficientCapacityError",
    "UnroutableOverflowError",
]
