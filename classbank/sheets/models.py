# classbank/sheets/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class SheetSchema:
    """Expected layout of a single workbook tab"""

    name: str
    headers: Tuple[str, ...]
    header_color: str

    @property
    def record_bearing(self) -> bool:
        return self.name != SETTINGS_SHEET


STUDENTS_SHEET = "Students"
TRANSACTIONS_SHEET = "Transactions"
ATTENDANCE_SHEET = "Attendance"
HEALTH_SHEET = "Health"
PROFILE_SHEET = "Profile"
SETTINGS_SHEET = "Settings"

EXPECTED_SHEETS: Tuple[SheetSchema, ...] = (
    SheetSchema(
        STUDENTS_SHEET,
        ("Student ID", "Name", "Grade", "No", "Created At"),
        "#4CAF50",
    ),
    SheetSchema(
        TRANSACTIONS_SHEET,
        ("Transaction ID", "Student ID", "Type", "Amount", "Date", "Timestamp", "Note"),
        "#2196F3",
    ),
    SheetSchema(
        ATTENDANCE_SHEET,
        ("Transaction ID", "Student ID", "Status", "Date", "Timestamp"),
        "#FF9800",
    ),
    SheetSchema(
        HEALTH_SHEET,
        ("Transaction ID", "Student ID", "Weight", "Height", "BMI", "Date", "Timestamp"),
        "#E91E63",
    ),
    SheetSchema(
        PROFILE_SHEET,
        ("Transaction ID", "Student ID", "Mood", "Score", "Date", "Timestamp"),
        "#9C27B0",
    ),
    SheetSchema(
        SETTINGS_SHEET,
        ("Key", "Value", "Updated At"),
        "#607D8B",
    ),
)

RECORD_SHEETS: Tuple[SheetSchema, ...] = tuple(s for s in EXPECTED_SHEETS if s.record_bearing)

DEPOSIT = "Deposit"
WITHDRAW = "Withdraw"
CATEGORY_COLUMN = "Type"


def get_schema(name: str) -> SheetSchema:
    for schema in EXPECTED_SHEETS:
        if schema.name == name:
            return schema
    raise KeyError(f"Unknown sheet: {name}")


class SheetStatus(Enum):
    """Outcome of checking one tab against its schema"""

    MISSING = "missing"
    EMPTY = "empty"
    MISMATCH = "mismatch"
    OK = "ok"


@dataclass
class SheetCheck:
    """Result of the structure check for a single tab"""

    name: str
    status: SheetStatus
    expected: List[str]
    found: List[str] = field(default_factory=list)
    data_rows: int = 0


@dataclass
class MixedDataScan:
    """Category tally over the Transactions data rows"""

    deposits: int = 0
    withdrawals: int = 0
    other: int = 0
    other_values: List[str] = field(default_factory=list)
    sheet_missing: bool = False

    @property
    def has_foreign_rows(self) -> bool:
        return self.other > 0


def hex_to_rgb(hex_color: str) -> dict:
    """Convert "#RRGGBB" into the Sheets API color dict (0-1 floats)"""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from e
    return {"red": red / 255, "green": green / 255, "blue": blue / 255}


def data_row_count(last_row: Optional[int]) -> int:
    """Rows below the header, never negative"""
    if not last_row:
        return 0
    return max(last_row - 1, 0)
