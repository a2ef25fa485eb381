import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .binary_search import binary_search
from .errors import TimespanInvariantError
from .instants import local_timestamp, utc_timestamp
from .interface import Offset, TimeZone
from .models import FixedTimespan, FixedTimespanSet
from .offset_result import OffsetResult


@dataclass(frozen=True)
class TzOffset(Offset):
    timespan: FixedTimespan

    @property
    def utc_offset_secs(self) -> int:
        return self.timespan.total_offset

    @property
    def name(self) -> str:
        return self.timespan.name

    @property
    def is_dst(self) -> bool:
        return self.timespan.dst_offset > 0


class Tz(TimeZone):
    """
    A timezone backed by a table of fixed timespans.

    The table is either given directly or produced by `loader` on first use.
    """

    def __init__(
        self,
        timespans: FixedTimespanSet | None = None,
        *,
        name: str | None = None,
        loader: Callable[[], FixedTimespanSet] | None = None,
    ) -> None:
        if timespans is None and (loader is None or name is None):
            raise ValueError("Either timespans or both name and loader are required")
        self._name = timespans.name if timespans is not None else name
        self._timespans = timespans
        self._loader = loader
        self._lock = threading.Lock()

    @property
    def timespans(self) -> FixedTimespanSet:
        if self._timespans is None:
            with self._lock:
                if self._timespans is None:
                    self._timespans = self._loader()  # type: ignore[misc]
        return self._timespans

    def name(self) -> str:
        return self._name  # type: ignore[return-value]

    def get_offset_utc(self, dt: datetime) -> TzOffset:
        return self.get_offset_utc_timestamp(utc_timestamp(dt))

    def get_offset_utc_timestamp(self, timestamp: int) -> TzOffset:
        spans = self.timespans
        index = binary_search(0, len(spans), lambda i: spans.span_utc(i).cmp(timestamp))
        if index is None:
            raise TimespanInvariantError(
                f"No timespan of {self._name!r} contains timestamp {timestamp}"
            )
        return TzOffset(spans[index])

    def get_offset_local(self, dt: datetime) -> OffsetResult[TzOffset]:
        return self.get_offset_local_timestamp(local_timestamp(dt))

    def get_offset_local_timestamp(self, timestamp: int) -> OffsetResult[TzOffset]:
        spans = self.timespans
        count = len(spans)
        i = binary_search(0, count, lambda i: spans.span_local(i).cmp(timestamp))
        if i is None:
            return OffsetResult.undefined()
        if count == 1:
            return OffsetResult.unambiguous(TzOffset(spans[i]))
        if i == 0:
            if spans.span_local(1).contains(timestamp):
                return OffsetResult.ambiguous(TzOffset(spans[0]), TzOffset(spans[1]))
            return OffsetResult.unambiguous(TzOffset(spans[0]))
        if spans.span_local(i - 1).contains(timestamp):
            return OffsetResult.ambiguous(TzOffset(spans[i - 1]), TzOffset(spans[i]))
        if i == count - 1:
            return OffsetResult.unambiguous(TzOffset(spans[i]))
        if spans.span_local(i + 1).contains(timestamp):
            return OffsetResult.ambiguous(TzOffset(spans[i]), TzOffset(spans[i + 1]))
        return OffsetResult.unambiguous(TzOffset(spans[i]))

    def get_offset_primary(self) -> TzOffset:
        return TzOffset(self.timespans.first)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, Tz):
            return self._name == other._name and self.timespans == other.timespans
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Tz({self._name!r})"
