from __future__ import annotations

from ..models import CalendarDate


def day_count(start: CalendarDate, end: CalendarDate) -> int:
    """Signed whole days from ``start`` to ``end``; positive when ``end`` is later."""
    return end.day_number - start.day_number
