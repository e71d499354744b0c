from datetime import date

import pytest

from timecalc.models import CalendarDate
from timecalc.services.diff import day_count


def _d(text: str) -> CalendarDate:
    return CalendarDate(*map(int, text.split("-")))


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2024-02-28", "2024-03-01", 2),
        ("2023-02-28", "2023-03-01", 1),
        ("2023-12-31", "2024-01-01", 1),
        ("2024-01-01", "2025-01-01", 366),
        ("2024-03-01", "2024-02-28", -2),
        ("2024-07-15", "2024-07-15", 0),
    ],
)
def test_day_count(start, end, expected):
    assert day_count(_d(start), _d(end)) == expected


def test_day_count_is_antisymmetric_and_matches_stdlib():
    dates = [_d(t) for t in ("1899-12-31", "1900-03-01", "2000-02-29", "2024-07-15", "2101-01-01")]
    for a in dates:
        assert day_count(a, a) == 0
        for b in dates:
            assert day_count(a, b) == -day_count(b, a)
            expected = (date(b.year, b.month, b.day) - date(a.year, a.month, a.day)).days
            assert day_count(a, b) == expected
