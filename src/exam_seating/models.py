"""Data models for exam seating allocation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Self

from .constants import (
    ALLOCATION_MODE_ALIASES,
    CONSTRAINT_MODE_ALIASES,
    FILL_DIRECTION_ALIASES,
    SEAT_ACCESSIBLE,
    SEAT_FACULTY,
    SEAT_STANDARD,
)
from .exceptions import SeatingError


class SeatKind(str, Enum):
    """Kind of a seat in a hall layout."""

    STANDARD = SEAT_STANDARD
    ACCESSIBLE = SEAT_ACCESSIBLE
    FACULTY = SEAT_FACULTY

    @property
    def is_assignable(self) -> bool:
        """Faculty (invigilator) seats never receive a student."""
        return self is not SeatKind.FACULTY


class FillDirection(str, Enum):
    """Order in which the seats of a hall are filled."""

    ROW_MAJOR = "row-major"
    COLUMN_MAJOR = "column-major"

    @classmethod
    def parse(cls, value: "str | FillDirection") -> "FillDirection":
        """Parse a fill direction, accepting 'horizontal'/'vertical' aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        return cls(FILL_DIRECTION_ALIASES.get(key, key))


class ConstraintMode(str, Enum):
    """Admission mode of a hall."""

    UNRESTRICTED = "unrestricted"
    RESTRICTED = "restricted"

    @classmethod
    def parse(cls, value: "str | ConstraintMode") -> "ConstraintMode":
        """Parse a constraint mode, accepting 'no-limit'/'advanced' aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        return cls(CONSTRAINT_MODE_ALIASES.get(key, key))


class AllocationMode(str, Enum):
    """Allocation variant."""

    CLASSIC = "classic"
    CONSTRAINED = "constrained"

    @classmethod
    def parse(cls, value: "str | AllocationMode") -> "AllocationMode":
        """Parse a mode, accepting the editor mode names 'advanced' and 'ai'."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        return cls(ALLOCATION_MODE_ALIASES.get(key, key))


class SeatingType(str, Enum):
    """Whether a lone remaining set is spaced out with empty seats."""

    NORMAL = "normal"
    FAIR = "fair"

    @classmethod
    def parse(cls, value: "str | SeatingType") -> "SeatingType":
        """Parse a seating type."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class Student:
    """A single examinee.

    Attributes:
        id: Register number, unique within one allocation run
        set_id: Identifier of the owning student set
        ordinal: 0-based position within the set
    """

    id: str
    set_id: str
    ordinal: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "set_id": self.set_id, "ordinal": self.ordinal}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Student from a dictionary."""
        return cls(
            id=str(data["id"]),
            set_id=str(data.get("set_id", data.get("setId", ""))),
            ordinal=int(data.get("ordinal", data.get("setNumber", 0))),
        )


@dataclass
class StudentSet:
    """A named group of students sharing placement eligibility.

    Either ``students`` (explicit register numbers) or ``student_count``
    (synthesized identifiers) must be given. When both are given they must
    agree.
    """

    id: str
    label: str
    student_count: int | None = None
    students: list[str] | None = None

    @property
    def size(self) -> int:
        """Number of students this set declares."""
        if self.students is not None:
            return len(self.students)
        return self.student_count or 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "student_count": self.student_count,
        }
        if self.students is not None:
            data["students"] = list(self.students)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a StudentSet from a dictionary."""
        count = data.get("student_count", data.get("studentCount"))
        students = data.get("students")
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", data.get("subject", data["id"]))),
            student_count=int(count) if count is not None else None,
            students=[str(s) for s in students] if students is not None else None,
        )


@dataclass(frozen=True)
class SeatDefinition:
    """A seat declared in a hall layout (0-based row and column)."""

    id: str
    row: int
    col: int
    kind: SeatKind = SeatKind.STANDARD

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_assignable(self) -> bool:
        return self.kind.is_assignable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "row": self.row, "col": self.col, "type": self.kind.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a SeatDefinition from a dictionary."""
        return cls(
            id=str(data["id"]),
            row=int(data["row"]),
            col=int(data["col"]),
            kind=SeatKind(data.get("type", data.get("kind", SEAT_STANDARD))),
        )


@dataclass
class HallConstraint:
    """Admission constraint and fill direction of a hall."""

    mode: ConstraintMode = ConstraintMode.UNRESTRICTED
    allowed_set_ids: list[str] = field(default_factory=list)
    fill_direction: FillDirection = FillDirection.ROW_MAJOR

    def __post_init__(self) -> None:
        self.mode = ConstraintMode.parse(self.mode)
        self.fill_direction = FillDirection.parse(self.fill_direction)

    @property
    def is_restricted(self) -> bool:
        return self.mode is ConstraintMode.RESTRICTED

    def allows(self, set_id: str) -> bool:
        """Check whether students of a set may sit in this hall."""
        if not self.is_restricted:
            return True
        return set_id in self.allowed_set_ids

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mode": self.mode.value,
            "allowed_set_ids": list(self.allowed_set_ids),
            "fill_direction": self.fill_direction.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Self:
        """Create a HallConstraint from a dictionary.

        Accepts both the current keys (``mode``, ``allowed_set_ids``,
        ``fill_direction``) and the older ones (``type``, ``allowedSetIds``,
        ``arrangement``).
        """
        if not data:
            return cls()
        mode = data.get("mode", data.get("type", ConstraintMode.UNRESTRICTED.value))
        allowed = data.get("allowed_set_ids", data.get("allowedSetIds")) or []
        direction = data.get(
            "fill_direction", data.get("arrangement", FillDirection.ROW_MAJOR.value)
        )
        return cls(
            mode=ConstraintMode.parse(mode),
            allowed_set_ids=[str(s) for s in allowed],
            fill_direction=FillDirection.parse(direction),
        )


@dataclass
class Hall:
    """An examination hall with a fixed seat layout."""

    id: str
    name: str
    layout: list[SeatDefinition] = field(default_factory=list)
    constraint: HallConstraint = field(default_factory=HallConstraint)

    @classmethod
    def grid(
        cls,
        id: str,
        name: str,
        rows: int,
        cols: int,
        constraint: HallConstraint | None = None,
    ) -> Self:
        """Build a hall with a full rectangular layout of standard seats.

        Seat ids are ``s0``, ``s1``, ... in row-major order.
        """
        layout = [
            SeatDefinition(id=f"s{index}", row=index // cols, col=index % cols)
            for index in range(rows * cols)
        ]
        return cls(id=id, name=name, layout=layout, constraint=constraint or HallConstraint())

    @property
    def dimensions(self) -> tuple[int, int]:
        """Grid size as (rows, cols), derived from the declared layout only."""
        if not self.layout:
            return (0, 0)
        rows = max(seat.row for seat in self.layout) + 1
        cols = max(seat.col for seat in self.layout) + 1
        return (rows, cols)

    @property
    def assignable_count(self) -> int:
        """Number of seats that can receive a student."""
        return sum(1 for seat in self.layout if seat.is_assignable)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "layout": [seat.to_dict() for seat in self.layout],
            "constraint": self.constraint.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Hall from a dictionary.

        A hall given as ``rows``/``cols`` without a ``layout`` gets a full
        rectangular layout.
        """
        constraint = HallConstraint.from_dict(data.get("constraint", data.get("constraints")))
        hall_id = str(data["id"])
        name = str(data.get("name", hall_id))
        if "layout" not in data and "rows" in data and "cols" in data:
            return cls.grid(hall_id, name, int(data["rows"]), int(data["cols"]), constraint)
        return cls(
            id=hall_id,
            name=name,
            layout=[SeatDefinition.from_dict(s) for s in data.get("layout", [])],
            constraint=constraint,
        )


@dataclass(frozen=True)
class Assigned:
    """Occupant of a seat holding a student."""

    student: Student


@dataclass(frozen=True)
class Empty:
    """Occupant of a seat nobody sits in."""


EMPTY = Empty()

Occupant = Assigned | Empty


@dataclass
class Seat:
    """A seat produced by one allocation run."""

    definition: SeatDefinition
    hall_id: str
    occupant: Occupant = EMPTY

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def row(self) -> int:
        return self.definition.row

    @property
    def col(self) -> int:
        return self.definition.col

    @property
    def kind(self) -> SeatKind:
        return self.definition.kind

    @property
    def student(self) -> Student | None:
        """The seated student, or None for an empty seat."""
        if isinstance(self.occupant, Assigned):
            return self.occupant.student
        return None

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.occupant, Assigned)

    def assign(self, student: Student) -> None:
        """Seat a student here.

        Raises:
            SeatingError: If the seat is a faculty seat or already taken
        """
        if not self.definition.is_assignable:
            raise SeatingError(f"Seat '{self.id}' in hall '{self.hall_id}' is not assignable")
        if self.is_assigned:
            raise SeatingError(f"Seat '{self.id}' in hall '{self.hall_id}' is already taken")
        self.occupant = Assigned(student)

    def vacate(self) -> Student | None:
        """Empty the seat and return the student who sat here, if any."""
        student = self.student
        self.occupant = EMPTY
        return student

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = self.definition.to_dict()
        data["hall_id"] = self.hall_id
        student = self.student
        data["student"] = student.to_dict() if student else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Seat from a dictionary."""
        student = data.get("student")
        return cls(
            definition=SeatDefinition.from_dict(data),
            hall_id=str(data.get("hall_id", data.get("hallId", ""))),
            occupant=Assigned(Student.from_dict(student)) if student else EMPTY,
        )


Grid = list[list[Seat | None]]


@dataclass
class SeatingPlan:
    """Per-hall seat grids. ``None`` cells have no declared seat."""

    grids: dict[str, Grid] = field(default_factory=dict)

    @property
    def hall_ids(self) -> list[str]:
        return list(self.grids.keys())

    def grid(self, hall_id: str) -> Grid:
        """Get the grid of a hall."""
        return self.grids[hall_id]

    def iter_seats(self, hall_id: str | None = None):
        """Yield every declared seat, optionally for one hall only."""
        hall_ids = [hall_id] if hall_id is not None else self.hall_ids
        for hid in hall_ids:
            for row in self.grids[hid]:
                for cell in row:
                    if cell is not None:
                        yield cell

    def assigned_seats(self, hall_id: str | None = None) -> list[Seat]:
        """All seats holding a student."""
        return [seat for seat in self.iter_seats(hall_id) if seat.is_assigned]

    @property
    def total_assigned(self) -> int:
        return len(self.assigned_seats())

    def find_student(self, student_id: str) -> Seat | None:
        """Look up the seat of a student by register number."""
        for seat in self.iter_seats():
            student = seat.student
            if student is not None and student.id == student_id:
                return seat
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            hall_id: [[cell.to_dict() if cell else None for cell in row] for row in grid]
            for hall_id, grid in self.grids.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a SeatingPlan from its dictionary form."""
        return cls(
            grids={
                str(hall_id): [
                    [Seat.from_dict(cell) if cell else None for cell in row] for row in grid
                ]
                for hall_id, grid in data.items()
            }
        )


@dataclass
class PlanStatistics:
    """Counters describing a seating plan."""

    total_students: int = 0
    total_seats: int = 0
    total_assigned: int = 0
    by_hall: dict[str, int] = field(default_factory=dict)
    by_set: dict[str, int] = field(default_factory=dict)
    hall_capacity: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_students": self.total_students,
            "total_seats": self.total_seats,
            "total_assigned": self.total_assigned,
            "utilization": (
                self.total_assigned / self.total_seats if self.total_seats > 0 else 0.0
            ),
            "by_hall": self.by_hall,
            "by_set": self.by_set,
            "hall_capacity": self.hall_capacity,
        }


@dataclass
class AllocationResult:
    """Outcome of one allocation run: a plan with warnings, or an error."""

    plan: SeatingPlan | None = None
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    failure: SeatingError | None = None
    mode: AllocationMode = AllocationMode.CLASSIC
    seating_type: SeatingType = SeatingType.FAIR
    statistics: PlanStatistics | None = None
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def success(self) -> bool:
        return self.plan is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generation_date": self.generation_date,
            "mode": self.mode.value,
            "seating_type": self.seating_type.value,
            "success": self.success,
            "plan": self.plan.to_dict() if self.plan else None,
            "warnings": list(self.warnings),
            "error": self.error,
            "statistics": self.statistics.to_dict() if self.statistics else None,
        }
