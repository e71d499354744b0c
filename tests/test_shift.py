import pytest

from timecalc.models import CalendarDate, Duration, Operation
from timecalc.services.shift import add, shift, subtract


def test_zero_duration_is_noop():
    start = CalendarDate(2024, 7, 15)
    assert shift(start, Duration()) is start
    assert shift(start, Duration(), Operation.SUBTRACT) is start


def test_month_overflow_is_clamped():
    assert add(CalendarDate(2024, 1, 31), Duration(months=1)) == CalendarDate(2024, 2, 29)
    assert add(CalendarDate(2023, 1, 31), Duration(months=1)) == CalendarDate(2023, 2, 28)
    assert add(CalendarDate(2024, 2, 29), Duration(years=1)) == CalendarDate(2025, 2, 28)
    assert subtract(CalendarDate(2024, 3, 31), Duration(months=1)) == CalendarDate(2024, 2, 29)


def test_days_added_after_clamping():
    assert add(CalendarDate(2024, 1, 31), Duration(months=1, days=1)) == CalendarDate(2024, 3, 1)


def test_weeks_and_days_cross_boundaries():
    assert add(CalendarDate(2024, 12, 15), Duration(weeks=2)) == CalendarDate(2024, 12, 29)
    assert add(CalendarDate(2024, 12, 15), Duration(weeks=3)) == CalendarDate(2025, 1, 5)
    assert add(CalendarDate(2024, 2, 28), Duration(days=1)) == CalendarDate(2024, 2, 29)
    assert subtract(CalendarDate(2024, 3, 1), Duration(days=1)) == CalendarDate(2024, 2, 29)


def test_all_fields():
    duration = Duration(years=1, months=2, weeks=3, days=4)
    assert add(CalendarDate(2024, 7, 15), duration) == CalendarDate(2025, 10, 10)
    assert subtract(CalendarDate(2024, 7, 15), duration) == CalendarDate(2023, 4, 20)


def test_months_wrap_years():
    assert add(CalendarDate(2024, 11, 30), Duration(months=3)) == CalendarDate(2025, 2, 28)
    assert subtract(CalendarDate(2024, 1, 15), Duration(months=13)) == CalendarDate(2022, 12, 15)


@pytest.mark.parametrize(
    "duration",
    [Duration(days=400), Duration(weeks=10), Duration(months=7), Duration(years=3, months=5, weeks=1, days=2)],
)
def test_subtract_undoes_add_without_clamping(duration):
    for start in (CalendarDate(2024, 1, 1), CalendarDate(2023, 6, 28), CalendarDate(1999, 12, 15)):
        assert subtract(add(start, duration), duration) == start


def test_clamping_is_lossy():
    start = CalendarDate(2024, 1, 31)
    assert subtract(add(start, Duration(months=1)), Duration(months=1)) == CalendarDate(2024, 1, 29)


def test_negative_magnitude_rejected():
    with pytest.raises(ValueError):
        Duration(days=-1)
