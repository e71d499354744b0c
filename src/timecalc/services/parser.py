from __future__ import annotations

import re
from functools import lru_cache

from ..errors import ParseError
from ..models import CalendarDate, ClockTime, ErrorKind
from ..utils_time import is_valid_date

DEFAULT_DATE_LAYOUT = "YYYY-MM-DD"

_TOKENS = {
    "YYYY": r"(?P<year>[0-9]{4})",
    "MM": r"(?P<month>[0-9]{2})",
    "DD": r"(?P<day>[0-9]{2})",
}

_TIME_RE = re.compile(r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?")


@lru_cache(maxsize=16)
def _layout_pattern(layout: str) -> re.Pattern[str]:
    parts: list[str] = []
    seen: set[str] = set()
    i = 0
    while i < len(layout):
        for token, group in _TOKENS.items():
            if layout.startswith(token, i):
                if token in seen:
                    raise ValueError(f"Date layout {layout!r} repeats {token}")
                seen.add(token)
                parts.append(group)
                i += len(token)
                break
        else:
            parts.append(re.escape(layout[i]))
            i += 1
    if seen != set(_TOKENS):
        raise ValueError(f"Date layout {layout!r} must contain YYYY, MM and DD")
    return re.compile("".join(parts))


def parse_date(text: str, layout: str = DEFAULT_DATE_LAYOUT) -> CalendarDate:
    """Parse ``text`` laid out exactly as ``layout`` into a CalendarDate.

    Raises ParseError with INVALID_FORMAT when the text does not match the
    layout, or INVALID_CALENDAR_DATE when it matches but names a day that
    does not exist (month 13, Feb 30, Feb 29 outside leap years).
    """
    match = _layout_pattern(layout).fullmatch(text or "")
    if match is None:
        raise ParseError(ErrorKind.INVALID_FORMAT, f"Expected a date as {layout}, got {text!r}")
    year, month, day = (int(match.group(name)) for name in ("year", "month", "day"))
    if not is_valid_date(year, month, day):
        raise ParseError(ErrorKind.INVALID_CALENDAR_DATE, f"{text!r} is not a calendar date")
    return CalendarDate(year, month, day)


def parse_time(text: str) -> ClockTime:
    """Parse a 24-hour ``HH:MM`` or ``HH:MM:SS`` reading."""
    match = _TIME_RE.fullmatch(text or "")
    if match is None:
        raise ParseError(ErrorKind.INVALID_FORMAT, f"Expected a time as HH:MM, got {text!r}")
    hour, minute = int(match.group("hour")), int(match.group("minute"))
    second = int(match.group("second") or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise ParseError(ErrorKind.INVALID_FORMAT, f"{text!r} is not a clock time")
    return ClockTime(hour, minute, second)
