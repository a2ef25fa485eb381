from datetime import datetime, timezone

from .errors import UnknownNameError
from .interface import Offset, TimeZone
from .offset_result import OffsetResult
from .posix import PosixTzExpanded, PosixTzShort, parse_posix_tz
from .posix_rule import ExpandedTz
from .timezone import Tz
from .timezones import find_by_name, get_by_name

# Expanded TZ strings with a DST name but no rule follow this zone's DST.
DEFAULT_DST_REFERENCE = "America/New_York"


class PosixTz(TimeZone):
    """
    A timezone described by a POSIX TZ string, such as the value of the `TZ`
    environment variable.

    `:name` strings refer to a zone of the registry, every other string is
    evaluated from its own rule.
    """

    def __init__(self, text: str, inner: Tz | ExpandedTz) -> None:
        self.text = text
        self._inner = inner

    @classmethod
    def parse(
        cls, text: str, *, dst_reference: TimeZone | str | None = None
    ) -> "PosixTz":
        """
        Parse `text` and resolve it to a registry zone or an evaluated rule.

        Rule dates are only range-checked here. A zero-based day `n` is
        resolved per year, so a rule such as `EST5EDT,0,365` parses but makes
        every lookup in a non-leap year raise `PosixTzConversionError`.
        """
        spec = parse_posix_tz(text)
        if isinstance(spec, PosixTzShort):
            return cls(text, _resolve_name(spec.name))
        return cls(text, _expanded(spec, dst_reference))

    def as_iana(self) -> Tz | None:
        """The registry zone this string refers to, if it is a `:name` string."""
        if isinstance(self._inner, Tz):
            return self._inner
        return None

    def name(self) -> str:
        return self._inner.name()

    def get_offset_utc(self, dt: datetime) -> Offset:
        """
        Raises `PosixTzConversionError` when a rule date does not exist in the
        year of `dt`, such as day 365 of a non-leap year.
        """
        return self._inner.get_offset_utc(dt)

    def get_offset_local(self, dt: datetime) -> OffsetResult:
        return self._inner.get_offset_local(dt)

    def get_offset_primary(self) -> Offset:
        return self._inner.get_offset_primary()

    def convert(self, dt: datetime) -> datetime:
        """
        Move the instant `dt` (naive means UTC) to this timezone's fixed offset.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(self.get_offset_utc(dt).to_utc())

    def now(self) -> datetime:
        return self.convert(datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"PosixTz({self.text!r})"


def _resolve_name(name: str) -> Tz:
    tz = get_by_name(name)
    if tz is not None:
        return tz
    matches = find_by_name(name)
    if matches:
        return matches[0]
    raise UnknownNameError(name)


def _expanded(
    spec: PosixTzExpanded, dst_reference: TimeZone | str | None
) -> ExpandedTz:
    reference = None
    if spec.dst is not None and spec.dst.rule is None:
        if dst_reference is None:
            dst_reference = DEFAULT_DST_REFERENCE
        if isinstance(dst_reference, str):
            reference = _resolve_name(dst_reference)
        else:
            reference = dst_reference
    return ExpandedTz.from_spec(spec, reference)
