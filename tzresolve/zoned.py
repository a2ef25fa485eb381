from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from functools import total_ordering

from .instants import as_utc
from .interface import TimeZone
from .offset_result import OffsetResult


class DurationKind(Enum):
    DATE = "date"  # weeks and days: moves the wall clock
    TIME = "time"  # hours, minutes and seconds: moves the instant


@dataclass(frozen=True)
class Duration:
    kind: DurationKind
    delta: timedelta

    @classmethod
    def weeks(cls, weeks: int) -> "Duration":
        return cls(DurationKind.DATE, timedelta(weeks=weeks))

    @classmethod
    def days(cls, days: int) -> "Duration":
        return cls(DurationKind.DATE, timedelta(days=days))

    @classmethod
    def hours(cls, hours: int) -> "Duration":
        return cls(DurationKind.TIME, timedelta(hours=hours))

    @classmethod
    def minutes(cls, minutes: int) -> "Duration":
        return cls(DurationKind.TIME, timedelta(minutes=minutes))

    @classmethod
    def seconds(cls, seconds: int) -> "Duration":
        return cls(DurationKind.TIME, timedelta(seconds=seconds))

    def __neg__(self) -> "Duration":
        return Duration(self.kind, -self.delta)


@total_ordering
class ZonedDateTime:
    """
    An instant together with the timezone it is viewed in.

    The wrapped datetime always carries the fixed offset the timezone resolves
    for that instant; every replacement or arithmetic resolves it again.
    Instances compare by instant, whatever their timezone.
    """

    __slots__ = ("_date_time", "_timezone")

    def __init__(self, date_time: datetime, timezone: TimeZone) -> None:
        self._date_time = date_time
        self._timezone = timezone

    @classmethod
    def from_local(
        cls, date_time: datetime, timezone: TimeZone
    ) -> OffsetResult["ZonedDateTime"]:
        """Resolve the wall-clock `date_time` (any tzinfo ignored) in `timezone`."""
        wall = date_time.replace(tzinfo=None)
        return timezone.get_offset_local(wall).map(
            lambda offset: cls(wall.replace(tzinfo=offset.to_utc()), timezone)
        )

    @classmethod
    def from_utc(cls, date_time: datetime, timezone: TimeZone) -> "ZonedDateTime":
        """View the instant `date_time` (naive means UTC) in `timezone`."""
        instant = as_utc(date_time)
        offset = timezone.get_offset_utc(instant)
        return cls(instant.astimezone(offset.to_utc()), timezone)

    def date(self) -> date:
        return self._date_time.date()

    def time(self) -> time:
        return self._date_time.time()

    def replace_date(self, new_date: date) -> OffsetResult["ZonedDateTime"]:
        wall = datetime.combine(new_date, self.time())
        return ZonedDateTime.from_local(wall, self._timezone)

    def replace_time(self, new_time: time) -> OffsetResult["ZonedDateTime"]:
        wall = datetime.combine(self.date(), new_time)
        return ZonedDateTime.from_local(wall, self._timezone)

    def offset(self) -> timedelta:
        return self._date_time.utcoffset()  # type: ignore[return-value]

    def offset_date_time(self) -> datetime:
        return self._date_time

    def timezone(self) -> TimeZone:
        return self._timezone

    def replace_timezone(self, timezone: TimeZone) -> "ZonedDateTime":
        return ZonedDateTime.from_utc(self._date_time, timezone)

    def _shift(self, duration: "Duration | timedelta") -> "ZonedDateTime":
        if isinstance(duration, timedelta):
            duration = Duration(DurationKind.TIME, duration)
        if duration.kind is DurationKind.DATE:
            wall = self._date_time.replace(tzinfo=None) + duration.delta
            return ZonedDateTime.from_local(wall, self._timezone).unwrap_first()
        return ZonedDateTime.from_utc(self._date_time + duration.delta, self._timezone)

    def __add__(self, other: "Duration | timedelta") -> "ZonedDateTime":
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        return self._shift(other)

    def __sub__(self, other):
        if isinstance(other, ZonedDateTime):
            return self._date_time - other._date_time
        if isinstance(other, (Duration, timedelta)):
            return self._shift(-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._date_time == other._date_time

    def __lt__(self, other: "ZonedDateTime") -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._date_time < other._date_time

    def __hash__(self) -> int:
        return hash(self._date_time)

    def __repr__(self) -> str:
        name = self._timezone.name()
        return f"ZonedDateTime({self._date_time.isoformat()}, {name!r})"
