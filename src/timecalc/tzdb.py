from __future__ import annotations

import bisect
from datetime import datetime, timezone
from typing import Iterable, Mapping, Protocol, Sequence, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConversionError, UnknownZoneError
from .models import ErrorKind


class TimezoneDatabase(Protocol):
    """Read-only oracle answering UTC offsets per zone and instant.

    ``instant`` is whole seconds since 1970-01-01T00:00:00Z.
    """

    def offset_minutes(self, zone_id: str, instant: int) -> int: ...

    def is_valid_zone(self, zone_id: str) -> bool: ...


class ZoneInfoDatabase:
    """IANA rules through ``zoneinfo`` (system tz files or the ``tzdata`` package)."""

    def _zone(self, zone_id: str) -> ZoneInfo:
        try:
            return ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise UnknownZoneError(zone_id) from exc

    def is_valid_zone(self, zone_id: str) -> bool:
        try:
            self._zone(zone_id)
        except UnknownZoneError:
            return False
        return True

    def offset_minutes(self, zone_id: str, instant: int) -> int:
        tz = self._zone(zone_id)
        try:
            local = datetime.fromtimestamp(instant, tz=timezone.utc).astimezone(tz)
        except (OverflowError, ValueError, OSError) as exc:
            raise ConversionError(
                ErrorKind.INVALID_INSTANT, f"Instant {instant} is out of range for {zone_id}"
            ) from exc
        return int(local.utcoffset().total_seconds() / 60)


Rule = Union[int, Sequence[tuple[int, int]]]


class RuleTableDatabase:
    """Bundled offset table.

    Each zone maps either to a fixed offset in minutes or to a list of
    ``(since_instant, offset_minutes)`` transitions sorted by instant; the
    first transition's offset also applies before its start.
    """

    def __init__(self, table: Mapping[str, Rule]):
        self._table: dict[str, tuple[list[int], list[int]]] = {}
        for zone_id, rule in table.items():
            if isinstance(rule, int):
                rule = [(0, rule)]
            rule = sorted(rule)
            if not rule:
                raise ValueError(f"Empty rule for zone {zone_id}")
            self._table[zone_id] = ([since for since, _ in rule], [offset for _, offset in rule])

    def is_valid_zone(self, zone_id: str) -> bool:
        return zone_id in self._table

    def offset_minutes(self, zone_id: str, instant: int) -> int:
        try:
            starts, offsets = self._table[zone_id]
        except KeyError:
            raise UnknownZoneError(zone_id) from None
        index = bisect.bisect_right(starts, instant) - 1
        return offsets[max(index, 0)]


class CatalogDatabase:
    """Restricts another database to an allow-list of zone ids."""

    def __init__(self, inner: TimezoneDatabase, zone_ids: Iterable[str]):
        self.inner = inner
        self.zone_ids = frozenset(zone_ids)

    def is_valid_zone(self, zone_id: str) -> bool:
        return zone_id in self.zone_ids and self.inner.is_valid_zone(zone_id)

    def offset_minutes(self, zone_id: str, instant: int) -> int:
        if zone_id not in self.zone_ids:
            raise UnknownZoneError(zone_id)
        return self.inner.offset_minutes(zone_id, instant)


zoneinfo_database = ZoneInfoDatabase()
