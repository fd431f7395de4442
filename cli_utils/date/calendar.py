from __future__ import annotations

from datetime import MAXYEAR, MINYEAR

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday=0, matching date.weekday()
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def month_number(name: str) -> int | None:
    """Map a full or 3-letter English month name (any case) to 1-12."""
    tok = name.strip().lower()
    for i, full in enumerate(MONTH_NAMES, start=1):
        if tok == full.lower() or tok == full[:3].lower():
            return i
    return None


def weekday_number(name: str) -> int | None:
    """Map a full or 3-letter English weekday name (any case) to 0-6."""
    tok = name.strip().lower()
    for i, full in enumerate(WEEKDAY_NAMES):
        if tok == full.lower() or tok == full[:3].lower():
            return i
    return None
