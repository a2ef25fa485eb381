from dataclasses import dataclass
from datetime import datetime

from .errors import PosixTzConversionError
from .instants import from_timestamp, local_timestamp, utc_timestamp
from .interface import Offset, TimeZone
from .offset_result import OffsetResult
from .posix import PosixTzExpanded, PosixTzRule

_HOUR = 3600


@dataclass(frozen=True)
class ExpandedMode:
    name: str
    utc_offset_secs: int  # east of UTC is positive, unlike in the TZ string


@dataclass(frozen=True)
class PosixTzOffset(Offset):
    mode: ExpandedMode
    dst: bool

    @property
    def utc_offset_secs(self) -> int:
        return self.mode.utc_offset_secs

    @property
    def name(self) -> str:
        return self.mode.name

    @property
    def is_dst(self) -> bool:
        return self.dst


class ExpandedTz(TimeZone):
    """
    A timezone computed from the standard/DST modes and yearly rule of an
    expanded POSIX TZ string.

    Without a rule, DST follows the DST state of `dst_reference`.
    """

    def __init__(
        self,
        std: ExpandedMode,
        dst: ExpandedMode | None = None,
        rule: PosixTzRule | None = None,
        dst_reference: TimeZone | None = None,
    ) -> None:
        if dst is not None and rule is None and dst_reference is None:
            raise ValueError(
                "A DST reference timezone is required when no rule is given"
            )
        self.std = std
        self.dst = dst
        self.rule = rule if dst is not None else None
        self.dst_reference = dst_reference

    @classmethod
    def from_spec(
        cls, spec: PosixTzExpanded, dst_reference: TimeZone | None = None
    ) -> "ExpandedTz":
        # POSIX offsets are the amount to add to local time to get UTC.
        std_offset = -spec.std.offset.to_seconds()
        std = ExpandedMode(spec.std.name, std_offset)
        if spec.dst is None:
            return cls(std)
        if spec.dst.offset is not None:
            dst_offset = -spec.dst.offset.to_seconds()
        else:
            dst_offset = std_offset + _HOUR
        dst = ExpandedMode(spec.dst.name, dst_offset)
        return cls(std, dst, spec.dst.rule, dst_reference)

    def name(self) -> str:
        return self.std.name

    def get_offset_primary(self) -> PosixTzOffset:
        return PosixTzOffset(self.std, False)

    def dst_interval(self, year: int) -> tuple[int, int]:
        """
        UTC timestamps of the DST start (read in standard time) and DST end
        (read in daylight time) of `year`.
        """
        if self.dst is None or self.rule is None:
            raise ValueError(f"{self.std.name} has no DST rule")
        start = self.rule.start.to_datetime(year)
        end = self.rule.end.to_datetime(year)
        return (
            local_timestamp(start) - self.std.utc_offset_secs,
            local_timestamp(end) - self.dst.utc_offset_secs,
        )

    def transitions(self, year: int) -> list[tuple[int, PosixTzOffset]]:
        """The UTC transition instants of `year` with the offset each one starts."""
        if self.dst is None or self.rule is None:
            return []
        start, end = self.dst_interval(year)
        return sorted(
            [
                (start, PosixTzOffset(self.dst, True)),
                (end, PosixTzOffset(self.std, False)),
            ],
            key=lambda transition: transition[0],
        )

    def get_offset_utc(self, dt: datetime) -> PosixTzOffset:
        return self.get_offset_utc_timestamp(utc_timestamp(dt))

    def get_offset_utc_timestamp(self, timestamp: int) -> PosixTzOffset:
        if self.dst is None:
            return PosixTzOffset(self.std, False)
        try:
            if self.rule is None:
                instant = from_timestamp(timestamp)
                assert self.dst_reference is not None
                in_dst = self.dst_reference.get_offset_utc(instant).is_dst
            else:
                year = from_timestamp(timestamp + self.std.utc_offset_secs).year
                start, end = self.dst_interval(year)
                if start <= end:
                    in_dst = start <= timestamp < end
                else:
                    # DST spans the end of the year (southern hemisphere)
                    in_dst = timestamp >= start or timestamp < end
        except OverflowError as exc:
            raise PosixTzConversionError(
                f"Timestamp {timestamp} is out of the supported date range"
            ) from exc
        if in_dst:
            return PosixTzOffset(self.dst, True)
        return PosixTzOffset(self.std, False)

    def get_offset_local(self, dt: datetime) -> OffsetResult[PosixTzOffset]:
        wall = local_timestamp(dt)
        if self.dst is None:
            return OffsetResult.unambiguous(PosixTzOffset(self.std, False))
        candidates = []
        for mode in (self.std, self.dst):
            utc = wall - mode.utc_offset_secs
            offset = self.get_offset_utc_timestamp(utc)
            if offset.mode == mode and (utc, offset) not in candidates:
                candidates.append((utc, offset))
        candidates.sort(key=lambda candidate: candidate[0])
        if not candidates:
            return OffsetResult.undefined()
        if len(candidates) == 1:
            return OffsetResult.unambiguous(candidates[0][1])
        return OffsetResult.ambiguous(candidates[0][1], candidates[1][1])

    def __repr__(self) -> str:
        return f"ExpandedTz(std={self.std!r}, dst={self.dst!r}, rule={self.rule!r})"
