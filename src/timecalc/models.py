from __future__ import annotations

import enum
from dataclasses import dataclass
from fractions import Fraction

from .utils_time import day_number, from_day_number, is_valid_date, weekday


class ErrorKind(str, enum.Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CALENDAR_DATE = "INVALID_CALENDAR_DATE"
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    INVALID_INSTANT = "INVALID_INSTANT"


class Operation(str, enum.Enum):
    ADD = "add"
    SUBTRACT = "subtract"

    @property
    def sign(self) -> int:
        return 1 if self is Operation.ADD else -1


@dataclass(frozen=True, order=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def __post_init__(self):
        if not is_valid_date(self.year, self.month, self.day):
            raise ValueError(f"Not a calendar date: {self.year}-{self.month}-{self.day}")

    @classmethod
    def from_day_number(cls, number: int) -> CalendarDate:
        return cls(*from_day_number(number))

    @property
    def day_number(self) -> int:
        return day_number(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        return weekday(self.day_number)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True, order=True)
class ClockTime:
    hour: int
    minute: int
    second: int = 0

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0 <= self.second <= 59):
            raise ValueError(f"Not a clock time: {self.hour}:{self.minute}:{self.second}")

    @classmethod
    def from_seconds(cls, seconds_of_day: int) -> ClockTime:
        hour, rest = divmod(seconds_of_day, 3600)
        minute, second = divmod(rest, 60)
        return cls(hour, minute, second)

    @property
    def seconds_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def isoformat(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}"
        if self.second:
            text += f":{self.second:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class Duration:
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0

    def __post_init__(self):
        for name in ("years", "months", "weeks", "days"):
            if getattr(self, name) < 0:
                raise ValueError(f"Duration {name} must be non-negative")

    def is_zero(self) -> bool:
        return not (self.years or self.months or self.weeks or self.days)

    def signed(self, sign: int) -> tuple[int, int, int, int]:
        return (sign * self.years, sign * self.months, sign * self.weeks, sign * self.days)


@dataclass(frozen=True)
class ZoneEntry:
    zone_id: str
    label: str
    country: str


@dataclass(frozen=True)
class ConversionResult:
    source_zone: str
    target_zone: str
    source_date: CalendarDate
    source_time: ClockTime
    target_date: CalendarDate
    target_time: ClockTime
    instant: int
    source_offset_minutes: int
    target_offset_minutes: int

    @property
    def offset_delta_hours(self) -> Fraction:
        return Fraction(self.target_offset_minutes - self.source_offset_minutes, 60)

    @property
    def same_day(self) -> bool:
        return self.target_date == self.source_date
