from __future__ import annotations

import calendar
from fractions import Fraction

from .models import CalendarDate, ClockTime, ConversionResult
from .utils_time import WEEKDAY_NAMES


def diff_label(days: int) -> str:
    if days == 0:
        return "Same day"
    count = abs(days)
    unit = "day" if count == 1 else "days"
    return f"{count} {unit} {'after' if days > 0 else 'before'}"


def long_date_label(date: CalendarDate) -> str:
    """E.g. ``Monday, July 15, 2024``."""
    return f"{WEEKDAY_NAMES[date.weekday]}, {calendar.month_name[date.month]} {date.day}, {date.year}"


def time_24h(time: ClockTime) -> str:
    return f"{time.hour:02d}:{time.minute:02d}"


def time_12h(time: ClockTime) -> str:
    hour = time.hour % 12 or 12
    return f"{hour}:{time.minute:02d} {'AM' if time.hour < 12 else 'PM'}"


def format_hours(hours: Fraction) -> str:
    if hours.denominator == 1:
        return str(hours.numerator)
    return str(float(hours))


def offset_label(hours: Fraction) -> str:
    if hours == 0:
        return "Same time"
    unit = "hour" if abs(hours) == 1 else "hours"
    sign = "+" if hours > 0 else "-"
    qualifier = "ahead" if hours > 0 else "behind"
    return f"{sign}{format_hours(abs(hours))} {unit} {qualifier}"


def day_boundary_label(result: ConversionResult) -> str:
    if result.same_day:
        return "Same day"
    return long_date_label(result.target_date)
