from __future__ import annotations

import logging

from ..models import CalendarDate, Duration, Operation
from ..utils_time import days_in_month

logger = logging.getLogger(__name__)


def _shift_months(start: CalendarDate, months: int) -> CalendarDate:
    month_index = start.year * 12 + (start.month - 1) + months
    year, month0 = divmod(month_index, 12)
    last_day = days_in_month(year, month0 + 1)
    if start.day > last_day:
        logger.debug("Clamping %s to day %d of %04d-%02d", start, last_day, year, month0 + 1)
    return CalendarDate(year, month0 + 1, min(start.day, last_day))


def shift(start: CalendarDate, duration: Duration, operation: Operation = Operation.ADD) -> CalendarDate:
    """Move ``start`` by ``duration`` in the direction of ``operation``.

    Years and months move together as ``12 * years + months`` calendar months,
    clamping the day to the end of a shorter month (Jan 31 + 1 month is the
    last day of February). Weeks and days are then added as a flat day count.
    Clamping loses information, so subtracting a duration does not always
    undo adding it.
    """
    if duration.is_zero():
        return start
    years, months, weeks, days = duration.signed(operation.sign)
    moved = start
    if years or months:
        moved = _shift_months(moved, 12 * years + months)
    if weeks or days:
        moved = CalendarDate.from_day_number(moved.day_number + 7 * weeks + days)
    return moved


def add(start: CalendarDate, duration: Duration) -> CalendarDate:
    return shift(start, duration, Operation.ADD)


def subtract(start: CalendarDate, duration: Duration) -> CalendarDate:
    return shift(start, duration, Operation.SUBTRACT)
