from __future__ import annotations

from datetime import date

from ..errors import ParseError
from .calendar import is_leap_year
from .patterns import compile_pattern
from .types import CalendarDate

DEFAULT_FORMAT = "%Y-%m-%d"
DMY_FORMAT = "%d/%m/%Y"


def parse_date(date_str: str, fmt: str = DEFAULT_FORMAT) -> CalendarDate:
    """Interpret date_str against fmt.

    Raises ParseError when the text does not follow the pattern's layout,
    a numeric field is out of range, or the day does not exist in that
    month/year (2023-02-29).
    """
    if not isinstance(date_str, str):
        raise ParseError(f"Date must be a string, got {type(date_str).__name__}")
    return compile_pattern(fmt).parse(date_str)


def format_date(d: CalendarDate, output_format: str = DEFAULT_FORMAT) -> str:
    return compile_pattern(output_format).render(d)


def convert_format(date_str: str, input_format: str, output_format: str) -> str:
    """Re-render date_str from input_format into output_format.

    >>> convert_format("2023-12-25", "%Y-%m-%d", "%d/%m/%Y")
    '25/12/2023'
    """
    return format_date(parse_date(date_str, input_format), output_format)


def _coerce(value: CalendarDate | str, fmt: str) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    return parse_date(value, fmt)


def difference_in_days(date_a: CalendarDate | str, date_b: CalendarDate | str, fmt: str = DEFAULT_FORMAT) -> int:
    """Signed day count a - b; positive when date_a is later.

    >>> difference_in_days("2023-01-10", "2023-01-05")
    5
    """
    return _coerce(date_a, fmt).ordinal() - _coerce(date_b, fmt).ordinal()


def is_valid_format(date_str: str, fmt: str) -> bool:
    """True iff parse_date(date_str, fmt) would succeed. Never raises."""
    if not isinstance(date_str, str) or not isinstance(fmt, str):
        return False
    try:
        parse_date(date_str, fmt)
    except ParseError:
        return False
    return True


def add_days(date_str: str, days: int, fmt: str = DEFAULT_FORMAT) -> str:
    """Shift date_str by a signed number of days, keeping its format.

    >>> add_days("2023-12-25", 7)
    '2024-01-01'
    """
    return format_date(parse_date(date_str, fmt).plus_days(days), fmt)


def day_of_week(date_str: str, fmt: str = DEFAULT_FORMAT) -> str:
    return parse_date(date_str, fmt).weekday_name()


def current_date(fmt: str = DEFAULT_FORMAT) -> str:
    """Today's local date rendered with fmt."""
    return format_date(CalendarDate.from_date(date.today()), fmt)


def to_dd_mm_yyyy(date_str: str) -> str:
    return convert_format(date_str, DEFAULT_FORMAT, DMY_FORMAT)


def to_yyyy_mm_dd(date_str: str) -> str:
    return convert_format(date_str, DMY_FORMAT, DEFAULT_FORMAT)


__all__ = [
    "DEFAULT_FORMAT",
    "DMY_FORMAT",
    "add_days",
    "convert_format",
    "current_date",
    "day_of_week",
    "difference_in_days",
    "format_date",
    "is_leap_year",
    "is_valid_format",
    "parse_date",
    "to_dd_mm_yyyy",
    "to_yyyy_mm_dd",
]
