from datetime import date

import pytest

from timecalc.utils_time import day_number, days_in_month, from_day_number, is_leap_year, weekday

EPOCH = date(1970, 1, 1).toordinal()


@pytest.mark.parametrize(
    "year,leap",
    [(2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (2400, True)],
)
def test_leap_years(year, leap):
    assert is_leap_year(year) is leap


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2023, 4) == 30
    assert days_in_month(2023, 12) == 31


def test_day_number_epoch():
    assert day_number(1970, 1, 1) == 0
    assert day_number(1969, 12, 31) == -1
    assert day_number(2000, 3, 1) == 11017


@pytest.mark.parametrize(
    "d",
    [date(1, 1, 1), date(1600, 2, 29), date(1899, 12, 31), date(2024, 2, 29), date(2024, 3, 1), date(9999, 12, 31)],
)
def test_day_number_matches_ordinals(d):
    assert day_number(d.year, d.month, d.day) == d.toordinal() - EPOCH
    assert weekday(day_number(d.year, d.month, d.day)) == d.weekday()


def test_from_day_number_inverts_day_number():
    for number in range(-1_000_000, 1_000_000, 997):
        assert day_number(*from_day_number(number)) == number


def test_from_day_number_before_year_one():
    assert from_day_number(day_number(1, 1, 1) - 1) == (0, 12, 31)
