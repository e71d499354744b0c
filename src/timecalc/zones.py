from __future__ import annotations

from .models import ZoneEntry
from .tzdb import CatalogDatabase, TimezoneDatabase, zoneinfo_database

SUPPORTED_ZONES: tuple[ZoneEntry, ...] = (
    ZoneEntry("America/New_York", "New York (EST/EDT)", "US"),
    ZoneEntry("America/Chicago", "Chicago (CST/CDT)", "US"),
    ZoneEntry("America/Denver", "Denver (MST/MDT)", "US"),
    ZoneEntry("America/Los_Angeles", "Los Angeles (PST/PDT)", "US"),
    ZoneEntry("America/Toronto", "Toronto (EST/EDT)", "CA"),
    ZoneEntry("Europe/London", "London (GMT/BST)", "GB"),
    ZoneEntry("Europe/Paris", "Paris (CET/CEST)", "FR"),
    ZoneEntry("Europe/Berlin", "Berlin (CET/CEST)", "DE"),
    ZoneEntry("Asia/Tokyo", "Tokyo (JST)", "JP"),
    ZoneEntry("Asia/Shanghai", "Shanghai (CST)", "CN"),
    ZoneEntry("Asia/Kolkata", "India (IST)", "IN"),
    ZoneEntry("Asia/Kathmandu", "Kathmandu (NPT)", "NP"),
    ZoneEntry("Australia/Sydney", "Sydney (AEST/AEDT)", "AU"),
    ZoneEntry("Pacific/Auckland", "Auckland (NZST/NZDT)", "NZ"),
    ZoneEntry("UTC", "Coordinated Universal Time", ""),
)


def supported_zone_ids() -> list[str]:
    return [entry.zone_id for entry in SUPPORTED_ZONES]


catalog_database = CatalogDatabase(zoneinfo_database, supported_zone_ids())


def database_for(restrict_to_catalog: bool) -> TimezoneDatabase:
    return catalog_database if restrict_to_catalog else zoneinfo_database
