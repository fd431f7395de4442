from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..errors import ParseError
from .calendar import MAX_YEAR, MIN_YEAR, WEEKDAY_NAMES, days_in_month


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated (year, month, day) in the proleptic Gregorian calendar.

    Construction fails with ParseError for anything that is not a real date,
    so every instance is valid. Arithmetic returns new instances.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ParseError(f"year must be {MIN_YEAR}-{MAX_YEAR}, got {self.year}")
        if not 1 <= self.month <= 12:
            raise ParseError(f"month must be 1-12, got {self.month}")
        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise ParseError(f"day must be 1-{max_day} for {self.year:04d}-{self.month:02d}, got {self.day}")

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_ordinal(cls, n: int) -> "CalendarDate":
        """Inverse of ordinal(); 0001-01-01 is ordinal 1."""
        try:
            return cls.from_date(date.fromordinal(n))
        except (ValueError, OverflowError) as e:
            raise ParseError(f"ordinal {n} is outside the supported date range") from e

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def ordinal(self) -> int:
        return self.to_date().toordinal()

    def weekday(self) -> int:
        """Monday=0 ... Sunday=6, derived from the ordinal (0001-01-01 was a Monday)."""
        return (self.ordinal() - 1) % 7

    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday()]

    def plus_days(self, n: int) -> "CalendarDate":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"day count must be an int, got {type(n).__name__}")
        return CalendarDate.from_ordinal(self.ordinal() + n)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
