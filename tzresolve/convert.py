"""
Helpers converting stdlib datetimes between timezones.

Naive datetimes are wall-clock values; aware datetimes are instants.
"""

from datetime import datetime, timezone

from .instants import as_utc
from .interface import TimeZone
from .offset_result import OffsetResult
from .timezones import get_by_name
from .zoned import ZonedDateTime


def to_timezone(dt: datetime, tz: TimeZone | str) -> datetime | None:
    """
    The instant `dt` (naive means UTC) with the offset `tz` has at that
    instant, or None when `tz` is an unknown name.
    """
    if isinstance(tz, str):
        found = get_by_name(tz)
        if found is None:
            return None
        tz = found
    instant = as_utc(dt)
    return instant.astimezone(tz.get_offset_utc(instant).to_utc())


def to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is timezone.utc:
        return dt
    return as_utc(dt)


def assume_timezone(dt: datetime, tz: TimeZone) -> OffsetResult[datetime]:
    """
    Attach to the wall-clock time `dt` the offset(s) `tz` has at that time.
    """
    wall = dt.replace(tzinfo=None)
    return tz.get_offset_local(wall).map(
        lambda offset: wall.replace(tzinfo=offset.to_utc())
    )


def assume_timezone_utc(dt: datetime, tz: TimeZone) -> datetime:
    """
    Read the naive `dt` as UTC and express it with the offset of `tz`.
    """
    instant = dt.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz.get_offset_utc(instant).to_utc())


def with_timezone(
    dt: datetime, tz: TimeZone
) -> OffsetResult[ZonedDateTime] | ZonedDateTime:
    """
    Wrap `dt` in a ZonedDateTime of `tz`. Naive values are resolved as wall
    time and may be ambiguous or undefined; aware values are instants.
    """
    if dt.tzinfo is None:
        return ZonedDateTime.from_local(dt, tz)
    return ZonedDateTime.from_utc(dt, tz)
