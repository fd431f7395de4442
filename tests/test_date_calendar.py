from __future__ import annotations

import pytest

from cli_utils.date.calendar import days_in_month, is_leap_year, month_number, weekday_number


@pytest.mark.parametrize(
    "year,expected",
    [(2024, True), (2023, False), (2000, True), (1900, False), (2004, True), (2100, False), (1600, True)],
)
def test_is_leap_year(year: int, expected: bool) -> None:
    assert is_leap_year(year) is expected


def test_days_in_month_february() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2000, 2) == 29
    assert days_in_month(1900, 2) == 28


def test_days_in_month_rejects_bad_month() -> None:
    with pytest.raises(ValueError):
        days_in_month(2023, 13)


def test_name_lookups_are_case_insensitive() -> None:
    assert month_number("jan") == 1
    assert month_number("DECEMBER") == 12
    assert month_number("Smarch") is None
    assert weekday_number("sun") == 6
    assert weekday_number("Monday") == 0
