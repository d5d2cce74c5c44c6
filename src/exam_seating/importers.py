"""Roster import from spreadsheets."""

import re
from pathlib import Path

import pandas as pd

from .constants import ROSTER_FILE_SUFFIXES
from .exceptions import InvalidRosterError
from .models import StudentSet

WHOLE_FLOAT_PATTERN = re.compile(r"^(\d+)\.0+$")


def normalize_register_number(value) -> str | None:
    """Normalize a spreadsheet cell holding a register number.

    Cells are read as text so leading zeros survive. Numeric cells stored
    as floats (``101001.0``) lose their ``.0`` suffix.

    Args:
        value: Raw cell value

    Returns:
        Register number as string, or None for blank cells
    """
    if value is None or pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    match = WHOLE_FLOAT_PATTERN.match(text)
    if match:
        return match.group(1)
    return text or None


def read_roster_file(
    file_path: Path | str,
    column: str | None = None,
    sheet: str | int = 0,
) -> list[str]:
    """Read student register numbers from an Excel or CSV file.

    The first row is a header. Without ``column`` the first column is used.

    Args:
        file_path: Path to .xlsx, .xls or .csv file
        column: Header of the column holding register numbers
        sheet: Sheet name or index for Excel files

    Returns:
        Register numbers in file order, blanks removed

    Raises:
        InvalidRosterError: If the file type is unsupported or the column is missing
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in ROSTER_FILE_SUFFIXES:
        raise InvalidRosterError(
            f"unsupported roster file '{path.name}'. "
            f"Expected one of: {', '.join(sorted(ROSTER_FILE_SUFFIXES))}"
        )

    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str)
    else:
        df = pd.read_excel(path, sheet_name=sheet, dtype=str)

    if df.empty or len(df.columns) == 0:
        return []

    if column is None:
        series = df.iloc[:, 0]
    elif column in df.columns:
        series = df[column]
    else:
        raise InvalidRosterError(
            f"column '{column}' not found in '{path.name}'. "
            f"Available columns: {', '.join(map(str, df.columns))}"
        )

    students = []
    for value in series.tolist():
        register_number = normalize_register_number(value)
        if register_number is not None:
            students.append(register_number)
    return students


def student_set_from_file(
    file_path: Path | str,
    set_id: str,
    label: str,
    column: str | None = None,
    sheet: str | int = 0,
) -> StudentSet:
    """Build a StudentSet with an explicit roster read from a file.

    Raises:
        InvalidRosterError: If the file holds no register numbers
    """
    students = read_roster_file(file_path, column=column, sheet=sheet)
    if not students:
        raise InvalidRosterError(f"no students found in '{Path(file_path).name}'", set_id)
    return StudentSet(id=set_id, label=label, student_count=len(students), students=students)
