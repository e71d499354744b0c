from __future__ import annotations

from .models import ErrorKind


class CalcError(ValueError):
    """Base for every input-driven failure of the calculators.

    ``kind`` tells the failures apart; ``str(exc)`` is a human-readable message.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ParseError(CalcError):
    pass


class ConversionError(CalcError):
    pass


class UnknownZoneError(ConversionError):
    def __init__(self, zone_id: str):
        super().__init__(ErrorKind.UNKNOWN_ZONE, f"Unknown timezone: {zone_id!r}")
        self.zone_id = zone_id
