from __future__ import annotations

import logging

from ..errors import ConversionError, ParseError, UnknownZoneError
from ..models import CalendarDate, ClockTime, ConversionResult, ErrorKind
from ..tzdb import TimezoneDatabase, zoneinfo_database
from ..utils_time import SECONDS_PER_DAY, split_seconds
from .parser import DEFAULT_DATE_LAYOUT, parse_date, parse_time

logger = logging.getLogger(__name__)


def resolve_instant(db: TimezoneDatabase, zone_id: str, local_seconds: int) -> tuple[int, int]:
    """Map a wall-clock reading (seconds since 1970-01-01 local) to (instant, offset minutes).

    A reading repeated by a fall-back transition resolves to its first
    occurrence. A reading skipped by a spring-forward transition is read with
    the offset in force before the gap, which lands the same distance past it.
    """
    before = db.offset_minutes(zone_id, local_seconds - SECONDS_PER_DAY)
    after = db.offset_minutes(zone_id, local_seconds + SECONDS_PER_DAY)
    candidates = []
    for offset in {before, after}:
        instant = local_seconds - offset * 60
        if db.offset_minutes(zone_id, instant) == offset:
            candidates.append((instant, offset))
    if len(candidates) > 1:
        logger.info("Ambiguous reading in %s, using first occurrence", zone_id)
        return min(candidates)
    if candidates:
        return candidates[0]
    logger.info("Reading falls in a %s transition gap, moving past it", zone_id)
    instant = local_seconds - before * 60
    return instant, db.offset_minutes(zone_id, instant)


def _require_zone(db: TimezoneDatabase, zone_id: str) -> None:
    if not zone_id or not db.is_valid_zone(zone_id):
        raise UnknownZoneError(zone_id)


def convert(
    date: CalendarDate,
    time: ClockTime,
    source_zone: str,
    target_zone: str,
    db: TimezoneDatabase | None = None,
) -> ConversionResult:
    """Render the instant read as ``date time`` in ``source_zone`` as a reading in ``target_zone``.

    Both offsets are sampled at that same instant, so the delta reflects the
    daylight-saving state of each zone on that date.
    """
    db = db or zoneinfo_database
    _require_zone(db, source_zone)
    _require_zone(db, target_zone)

    local_seconds = date.day_number * SECONDS_PER_DAY + time.seconds_of_day
    instant, source_offset = resolve_instant(db, source_zone, local_seconds)
    target_offset = db.offset_minutes(target_zone, instant)

    day, seconds = split_seconds(instant + target_offset * 60)
    try:
        target_date = CalendarDate.from_day_number(day)
    except ValueError as exc:
        raise ConversionError(ErrorKind.INVALID_INSTANT, "Converted date is out of range") from exc

    result = ConversionResult(
        source_zone=source_zone,
        target_zone=target_zone,
        source_date=date,
        source_time=time,
        target_date=target_date,
        target_time=ClockTime.from_seconds(seconds),
        instant=instant,
        source_offset_minutes=source_offset,
        target_offset_minutes=target_offset,
    )
    logger.debug(
        "Converted %s %s %s -> %s %s %s",
        date, time, source_zone, result.target_date, result.target_time, target_zone,
    )
    return result


def convert_text(
    date_text: str,
    time_text: str,
    source_zone: str,
    target_zone: str,
    db: TimezoneDatabase | None = None,
    layout: str = DEFAULT_DATE_LAYOUT,
) -> ConversionResult:
    """Like convert, for raw strings; a malformed date or time is an INVALID_INSTANT."""
    try:
        date = parse_date(date_text, layout)
        time = parse_time(time_text)
    except ParseError as exc:
        raise ConversionError(ErrorKind.INVALID_INSTANT, str(exc)) from exc
    return convert(date, time, source_zone, target_zone, db)
