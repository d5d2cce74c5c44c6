"""Custom exceptions for exam seating allocation."""


class SeatingError(Exception):
    """Base exception for seating allocation errors."""

    pass


class InvalidRosterError(SeatingError):
    """Malformed student set input."""

    def __init__(self, message: str, set_id: str | None = None):
        self.set_id = set_id
        location = f" in set '{set_id}'" if set_id else ""
        super().__init__(f"Invalid roster{location}: {message}")


class InvalidHallError(SeatingError):
    """Malformed hall layout or constraint."""

    def __init__(self, message: str, hall_id: str | None = None):
        self.hall_id = hall_id
        location = f" in hall '{hall_id}'" if hall_id else ""
        super().__init__(f"Invalid hall{location}: {message}")


class CapacityError(SeatingError):
    """Demand exceeds the seats that can be reached."""

    def __init__(self, message: str, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(message)


class InsufficientCapacityError(CapacityError):
    """Not enough assignable seats across all halls (classic mode)."""

    def __init__(self, required: int, available: int):
        super().__init__(
            f"Not enough seats. {required} students and only {available} available seats.",
            required=required,
            available=available,
        )


class UnroutableOverflowError(CapacityError):
    """Unrestricted halls cannot absorb the remaining students (constrained mode)."""

    def __init__(
        self,
        required: int,
        available: int,
        overflow_halls: list[str] | None = None,
    ):
        self.overflow_halls = overflow_halls or []
        message = (
            f"Not enough seats in unrestricted halls. {required} students remain "
            f"and only {available} unrestricted seats are available."
        )
        if self.overflow_halls:
            message += f" Overflow came from: {', '.join(self.overflow_halls)}"
        super().__init__(message, required=required, available=available)
