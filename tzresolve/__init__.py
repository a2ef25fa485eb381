from .convert import (
    assume_timezone,
    assume_timezone_utc,
    to_timezone,
    to_utc,
    with_timezone,
)
from .errors import (
    AmbiguousOffsetError,
    GrammarRule,
    ParseError,
    PosixTzConversionError,
    PosixTzError,
    RangeError,
    RangeErrorKind,
    TimespanInvariantError,
    TzResolveError,
    UndefinedOffsetError,
    UndeterminedTimezoneError,
    UnknownNameError,
)
from .interface import Offset, TimeZone
from .models import FixedTimespan, FixedTimespanSet
from .offset_result import OffsetResult, OffsetResultKind
from .posix import parse_posix_tz
from .posix_tz import PosixTz
from .system import get_timezone
from .timezone import Tz, TzOffset
from .timezones import available_names, find_by_name, get_by_name, iter_timezones
from .zoned import Duration, DurationKind, ZonedDateTime
