"""Constants for exam seating allocation."""

# Seat kinds
SEAT_STANDARD = "standard"
SEAT_ACCESSIBLE = "accessible"
SEAT_FACULTY = "faculty"

# Synthesized student identifiers
PLACEHOLDER_PREFIX = "SET"
MIN_ID_PADDING = 3

# Input aliases used by older exam records
CONSTRAINT_MODE_ALIASES = {
    "no-limit": "unrestricted",
    "advanced": "restricted",
}
FILL_DIRECTION_ALIASES = {
    "horizontal": "row-major",
    "vertical": "column-major",
}

# Roster import
ROSTER_FILE_SUFFIXES = {".xlsx", ".xls", ".csv"}

# Config
DEFAULT_CONFIG_FILENAME = "seating-config.json"

# Exam editor modes stored with older exam records. AI-assisted exams
# fall back to the classic engine.
ALLOCATION_MODE_ALIASES = {
    "advanced": "constrained",
    "ai": "classic",
}
