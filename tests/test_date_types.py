from __future__ import annotations

from datetime import date

import pytest

from cli_utils.date.types import CalendarDate
from cli_utils.errors import ParseError


@pytest.mark.parametrize("ymd", [(2023, 2, 29), (2023, 13, 1), (2023, 0, 10), (2023, 4, 31), (2023, 12, 32), (0, 1, 1)])
def test_invalid_dates_are_rejected(ymd: tuple[int, int, int]) -> None:
    with pytest.raises(ParseError):
        CalendarDate(*ymd)


def test_leap_day_is_valid() -> None:
    d = CalendarDate(2024, 2, 29)
    assert str(d) == "2024-02-29"


def test_ordinal_and_weekday() -> None:
    assert CalendarDate(1, 1, 1).ordinal() == 1
    assert CalendarDate(1, 1, 1).weekday_name() == "Monday"
    assert CalendarDate(2023, 12, 25).weekday_name() == "Monday"
    assert CalendarDate(2000, 1, 1).weekday_name() == "Saturday"
    assert CalendarDate(2023, 12, 25).ordinal() == date(2023, 12, 25).toordinal()


def test_plus_days_rolls_over() -> None:
    assert CalendarDate(2024, 2, 28).plus_days(1) == CalendarDate(2024, 2, 29)
    assert CalendarDate(2023, 2, 28).plus_days(1) == CalendarDate(2023, 3, 1)
    assert CalendarDate(2023, 12, 31).plus_days(1) == CalendarDate(2024, 1, 1)
    assert CalendarDate(2024, 1, 1).plus_days(-1) == CalendarDate(2023, 12, 31)


def test_plus_days_out_of_range() -> None:
    with pytest.raises(ParseError):
        CalendarDate(9999, 12, 31).plus_days(1)
    with pytest.raises(ParseError):
        CalendarDate.from_ordinal(0)


def test_ordering_and_immutability() -> None:
    a = CalendarDate(2022, 12, 31)
    b = CalendarDate(2023, 1, 2)
    assert a < b
    with pytest.raises(AttributeError):
        a.day = 1  # type: ignore[misc]


def test_plus_days_rejects_non_integral_counts() -> None:
    with pytest.raises(TypeError):
        CalendarDate(2023, 12, 25).plus_days(1.9)  # type: ignore[arg-type]
