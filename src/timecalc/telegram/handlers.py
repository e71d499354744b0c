from __future__ import annotations

import html
import logging
import re

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from ..config import settings
from ..errors import CalcError, ParseError
from ..models import Duration, ErrorKind, Operation
from ..presentation import (
    day_boundary_label,
    diff_label,
    long_date_label,
    offset_label,
    time_12h,
    time_24h,
)
from ..services.converter import convert_text
from ..services.diff import day_count
from ..services.parser import parse_date
from ..services.shift import shift
from ..tzdb import TimezoneDatabase
from ..zones import SUPPORTED_ZONES, database_for

logger = logging.getLogger(__name__)

router = Router()

_DURATION_PART = re.compile(r"([0-9]+)([ymwd])")
_DURATION_FIELDS = {"y": "years", "m": "months", "w": "weeks", "d": "days"}

HELP_TEXT = (
    "Date & time calculator.\n"
    "/diff 2024-01-01 2024-03-01 - days between two dates\n"
    "/shift 2024-01-31 add 1y 2m 3w 4d - add or subtract a duration\n"
    "/convert 2024-07-15 09:00 America/Toronto Asia/Kolkata - convert a time between zones\n"
    "/zones - supported timezones"
)


def _args(text: str | None) -> list[str]:
    parts = (text or "").split(maxsplit=1)
    return parts[1].split() if len(parts) > 1 else []


def parse_duration(tokens: list[str]) -> Duration:
    """Read tokens like ``1y 2m 3w 4d``; each unit at most once."""
    values: dict[str, int] = {}
    for token in tokens:
        match = _DURATION_PART.fullmatch(token.lower())
        if match is None or _DURATION_FIELDS[match.group(2)] in values:
            raise ParseError(ErrorKind.INVALID_FORMAT, f"Bad duration part: {token!r}")
        values[_DURATION_FIELDS[match.group(2)]] = int(match.group(1))
    return Duration(**values)


def diff_reply(args: list[str]) -> str:
    if len(args) != 2:
        return "Format: /diff 2024-01-01 2024-03-01"
    start = parse_date(args[0], settings.date_layout)
    end = parse_date(args[1], settings.date_layout)
    return diff_label(day_count(start, end))


def shift_reply(args: list[str]) -> str:
    if len(args) < 2 or args[1] not in {op.value for op in Operation}:
        return "Format: /shift 2024-01-31 add 1y 2m 3w 4d"
    start = parse_date(args[0], settings.date_layout)
    duration = parse_duration(args[2:])
    return long_date_label(shift(start, duration, Operation(args[1])))


def convert_reply(args: list[str], db: TimezoneDatabase | None = None) -> str:
    if len(args) == 2:
        args = args + [settings.default_source_zone, settings.default_target_zone]
    if len(args) != 4:
        return "Format: /convert 2024-07-15 09:00 America/Toronto Asia/Kolkata"
    if db is None:
        db = database_for(settings.restrict_to_catalog)
    result = convert_text(*args, db=db, layout=settings.date_layout)
    return (
        f"{result.target_zone}: {result.target_date} {time_24h(result.target_time)}"
        f" ({time_12h(result.target_time)})\n"
        f"{day_boundary_label(result)}\n"
        f"{offset_label(result.offset_delta_hours)}"
    )


def zones_reply() -> str:
    return "\n".join(f"{entry.zone_id} - {entry.label}" for entry in SUPPORTED_ZONES)


async def _answer(message: Message, build, *args) -> None:
    try:
        text = build(*args)
    except CalcError as exc:
        logger.info("Rejected %s input: %s", exc.kind.value, exc)
        text = html.escape(str(exc))
    await message.answer(text)


@router.message(Command("start", "help"))
async def start_cmd(message: Message):
    await message.answer(HELP_TEXT)


@router.message(Command("diff"))
async def diff_cmd(message: Message):
    await _answer(message, diff_reply, _args(message.text))


@router.message(Command("shift"))
async def shift_cmd(message: Message):
    await _answer(message, shift_reply, _args(message.text))


@router.message(Command("convert"))
async def convert_cmd(message: Message):
    await _answer(message, convert_reply, _args(message.text))


@router.message(Command("zones"))
async def zones_cmd(message: Message):
    await message.answer(zones_reply())
