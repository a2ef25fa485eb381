import struct
from dataclasses import dataclass, replace
from typing import IO

from .instants import from_timestamp
from .models import FixedTimespan, FixedTimespanSet
from .posix import PosixTzExpanded, parse_posix_tz
from .posix_rule import ExpandedTz

# Yearly transitions from the footer rule are materialized up to this year.
DEFAULT_HORIZON_YEAR = 2100

_DEFAULT_DST_SECS = 3600

_HEADER = struct.Struct(">4sc15x6I")
_TTINFO = struct.Struct(">i?B")  # utoff, isdst, desigidx


@dataclass
class TZifHeader:
    version: int
    isut_count: int
    isstd_count: int
    leap_count: int
    time_count: int
    type_count: int
    char_count: int

    @classmethod
    def read(cls, file: IO[bytes]) -> "TZifHeader":
        magic, version, *counts = _HEADER.unpack(_read_exact(file, _HEADER.size))
        if magic != b"TZif":
            raise ValueError("Invalid TZif file: Magic sequence not found.")
        return cls(1 if version == b"\x00" else int(version), *counts)

    def time_size(self) -> int:
        return 8 if self.version >= 2 else 4

    def data_size(self) -> int:
        """Size of the data block following this header, without footer."""
        return (
            self.time_count * (self.time_size() + 1)
            + self.type_count * _TTINFO.size
            + self.char_count
            + self.leap_count * (self.time_size() + 4)
            + self.isstd_count
            + self.isut_count
        )


@dataclass
class TimeTypeInfo:
    """
    A local time type ("ttinfo") of TZif data.
    """

    utc_offset_secs: int
    is_dst: bool
    abbrev_index: int


def read_timespan_set(
    file: IO[bytes], name: str, extend_until_year: int = DEFAULT_HORIZON_YEAR
) -> FixedTimespanSet:
    """
    Read TZif data into the timespan table of the zone `name`.

    Time type 0 becomes the span before the first transition. For version 2+
    data, the footer rule is used to add yearly transitions after the last
    explicit one, up to `extend_until_year`.
    """
    header = TZifHeader.read(file)
    if header.version >= 2:
        # The version 1 block is followed by a header and block with 64-bit times.
        _read_exact(file, replace(header, version=1).data_size())
        header = TZifHeader.read(file)

    transition_times, time_type_indices, time_type_infos, abbrevs = _read_data(
        file, header
    )
    spans = _timespans(time_type_infos, [0, *time_type_indices], abbrevs)
    first = spans[0]
    others = list(zip(transition_times, spans[1:]))

    if header.version >= 2:
        footer = _read_footer(file)
        if footer:
            others = _extend_with_footer(first, others, footer, extend_until_year)

    return FixedTimespanSet(name, first, tuple(others))


def _read_exact(file: IO[bytes], size: int) -> bytes:
    data = file.read(size)
    if len(data) != size:
        raise ValueError("Invalid TZif file: unexpected end of data.")
    return data


def _read_data(
    file: IO[bytes], header: TZifHeader
) -> tuple[tuple[int, ...], bytes, list[TimeTypeInfo], str]:
    if header.type_count == 0:
        raise ValueError("Invalid TZif file: no local time types.")

    time_format = "q" if header.version >= 2 else "i"
    count = header.time_count
    transition_times = struct.unpack(
        f">{count}{time_format}", _read_exact(file, count * header.time_size())
    )
    time_type_indices = _read_exact(file, count)
    time_type_infos = [
        TimeTypeInfo(*_TTINFO.unpack(_read_exact(file, _TTINFO.size)))
        for _ in range(header.type_count)
    ]
    if any(index >= header.type_count for index in time_type_indices):
        raise ValueError("Invalid TZif file: local time type index out of range.")
    abbrevs = _read_exact(file, header.char_count).decode("ascii")

    # Leap second records and the standard/wall and UT/local indicators are unused.
    leap_size = header.leap_count * (header.time_size() + 4)
    _read_exact(file, leap_size + header.isstd_count + header.isut_count)
    return transition_times, time_type_indices, time_type_infos, abbrevs


def _read_footer(file: IO[bytes]) -> str | None:
    data = file.read()
    if not data.startswith(b"\n"):
        return None
    footer, _, _ = data[1:].partition(b"\n")
    return footer.decode("ascii") or None


def _timespans(
    time_type_infos: list[TimeTypeInfo], sequence: list[int], abbrevs: str
) -> list[FixedTimespan]:
    """
    Timespans for a sequence of time type indices.

    TZif only flags DST time types, so the DST amount is taken from the
    closest standard time type before, then after, the DST one.
    """
    spans = []
    for position, index in enumerate(sequence):
        ttinfo = time_type_infos[index]
        abbrev = abbrevs[ttinfo.abbrev_index :].partition("\x00")[0]
        dst_offset = 0
        if ttinfo.is_dst:
            dst_offset = _dst_difference(time_type_infos, sequence, position)
        spans.append(
            FixedTimespan(ttinfo.utc_offset_secs - dst_offset, dst_offset, abbrev)
        )
    return spans


def _dst_difference(
    time_type_infos: list[TimeTypeInfo], sequence: list[int], position: int
) -> int:
    """
    Signed DST amount of a DST time type: negative when the zone's "DST" is
    behind its standard time, as in Europe/Dublin winters.
    """
    utc_offset = time_type_infos[sequence[position]].utc_offset_secs
    for neighbours in (reversed(sequence[:position]), sequence[position + 1 :]):
        standard = next(
            (time_type_infos[i] for i in neighbours if not time_type_infos[i].is_dst),
            None,
        )
        if standard is not None and utc_offset != standard.utc_offset_secs:
            return utc_offset - standard.utc_offset_secs
    return _DEFAULT_DST_SECS


def _extend_with_footer(
    first: FixedTimespan,
    others: list[tuple[int, FixedTimespan]],
    footer: str,
    extend_until_year: int,
) -> list[tuple[int, FixedTimespan]]:
    spec = parse_posix_tz(footer, extended=True)
    if (
        not isinstance(spec, PosixTzExpanded)
        or spec.dst is None
        or spec.dst.rule is None
    ):
        return others

    rule = ExpandedTz.from_spec(spec)
    std_offset = rule.std.utc_offset_secs
    explicit_count = len(others)
    last_time = others[-1][0] if others else None
    start_year = from_timestamp(last_time).year if last_time is not None else 1970

    extended = list(others)
    for year in range(start_year, extend_until_year + 1):
        for timestamp, offset in rule.transitions(year):
            if last_time is not None and timestamp < last_time:
                continue
            span = FixedTimespan(
                std_offset, offset.utc_offset_secs - std_offset, offset.name
            )
            if timestamp == last_time:
                # A rule ending where the next one starts, as in permanent DST
                # "EST5EDT,0/0,J365/25": the later transition wins.
                if len(extended) == explicit_count:
                    continue
                extended.pop()
            current = extended[-1][1] if extended else first
            if span == current:
                continue
            extended.append((timestamp, span))
            last_time = timestamp
    return extended
