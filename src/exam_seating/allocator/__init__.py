"""Seat allocation engine.

Main entry points:
- SeatAllocator: Allocator class holding a SeatingConfig
- allocate: Allocate seats for one exam
- allocate_batch: Allocate seats for several independent exams

Usage:
    from exam_seating.allocator import allocate

    result = allocate(halls, student_sets, mode="constrained")
    if result.success:
        print(result.plan.total_assigned)
    else:
        print(result.error)
"""

from .engine import SeatAllocator, allocate, allocate_batch
from .exporter import (
    export_batch_json,
    export_result_json,
    load_exam_data,
    parse_exam,
)
from .interleave import PlacementResult, interleave, spaced_seats_required
from .plan import assemble_grid, assemble_plan, compute_statistics
from .seats import HallRouting, eligible_students, extract_seat_pool, route_halls

__all__ = [
    # Engine
    "SeatAllocator",
    "allocate",
    "allocate_batch",
    # Placement
    "PlacementResult",
    "interleave",
    "spaced_seats_required",
    # Seat pools
    "HallRouting",
    "eligible_students",
    "extract_seat_pool",
    "route_halls",
    # Plan assembly
    "assemble_grid",
    "assemble_plan",
    "compute_statistics",
    # Export
    "export_batch_json",
    "export_result_json",
    "load_exam_data",
    "parse_exam",
]
