from dataclasses import dataclass


@dataclass(frozen=True)
class FixedTimespan:
    """
    One contiguous offset regime of a timezone.
    """

    utc_offset: int  # seconds, standard time
    dst_offset: int  # seconds added on top of utc_offset while DST is in effect
    name: str

    @property
    def total_offset(self) -> int:
        return self.utc_offset + self.dst_offset


@dataclass(frozen=True)
class FixedTimespanSet:
    """
    The ordered offset transitions of one timezone.

    `first` applies from the beginning of time until the first transition,
    `others` holds (UTC timestamp, timespan) pairs in strictly increasing order.
    """

    name: str
    first: FixedTimespan
    others: tuple[tuple[int, FixedTimespan], ...] = ()

    def __post_init__(self) -> None:
        for (prev, _), (cur, _) in zip(self.others, self.others[1:]):
            if cur <= prev:
                raise ValueError(
                    f"Transitions of {self.name!r} are not strictly increasing: "
                    f"{prev} >= {cur}"
                )

    def __len__(self) -> int:
        return 1 + len(self.others)

    def __getitem__(self, index: int) -> FixedTimespan:
        if index == 0:
            return self.first
        return self.others[index - 1][1]

    def span_utc(self, index: int) -> "Span":
        start = None if index == 0 else self.others[index - 1][0]
        end = self.others[index][0] if index < len(self.others) else None
        return Span(start, end)

    def span_local(self, index: int) -> "Span":
        # Both ends are shifted by the offset of the span itself.
        offset = self[index].total_offset
        start = None if index == 0 else self.others[index - 1][0] + offset
        end = self.others[index][0] + offset if index < len(self.others) else None
        return Span(start, end)


@dataclass(frozen=True)
class Span:
    """
    A half-open [start, end) range of timestamps; None means unbounded.
    """

    start: int | None
    end: int | None

    def contains(self, timestamp: int) -> bool:
        return self.cmp(timestamp) == 0

    def cmp(self, timestamp: int) -> int:
        """
        Position of this span relative to `timestamp`: -1 before, 0 containing,
        1 after.
        """
        if self.end is not None and self.end <= timestamp:
            return -1
        if self.start is not None and self.start > timestamp:
            return 1
        return 0
