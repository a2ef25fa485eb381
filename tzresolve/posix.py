"""
Parser for POSIX TZ strings.

    tz       := short | expanded
    short    := ':' name
    expanded := std dst?
    std      := name offset
    dst      := name offset? rule?
    rule     := ',' date ('/' time)? ',' date ('/' time)?
    name     := '<' [^<>]+ '>' | 3 to 16 alphabetic characters
    offset   := ('+' | '-')? time
    time     := hh (':' mm (':' ss)?)?
    date     := 'J' n | 'M' m '.' w '.' d | n

Parsing only checks the grammar; field ranges are checked afterwards so a
well-formed string with an out-of-range field raises RangeError, not
ParseError.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import (
    GrammarRule,
    ParseError,
    PosixTzConversionError,
    RangeError,
    RangeErrorKind,
)

TZNAME_MAX = 16
DEFAULT_TRANSITION_TIME = timedelta(hours=2)

# 2021 is not a leap year, so its ordinal days are the Jn days of every year.
_JULIAN_REFERENCE_YEAR = 2021

_DIGITS = re.compile(r"\d+", re.ASCII)
_UNQUOTED_NAME = re.compile(r"[^\W\d_]{3,%d}" % TZNAME_MAX)
_QUOTED_NAME = re.compile(r"<([^<>]+)>")
_ZONE_PATH = re.compile(r"[\w/+-]+", re.ASCII)


@dataclass(frozen=True)
class PosixTzTime:
    hours: int
    minutes: int | None = None
    seconds: int | None = None
    negative: bool = False

    def to_seconds(self) -> int:
        total = self.hours * 3600 + (self.minutes or 0) * 60 + (self.seconds or 0)
        return -total if self.negative else total

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.to_seconds())

    def is_valid_range(self, max_hours: int = 24) -> bool:
        return (
            self.hours <= max_hours
            and (self.minutes or 0) <= 59
            and (self.seconds or 0) <= 59
        )


@dataclass(frozen=True)
class PosixTzSignedOffset:
    positive: bool
    time: PosixTzTime

    def to_seconds(self) -> int:
        """Seconds in POSIX convention: positive means west of UTC."""
        seconds = self.time.to_seconds()
        return seconds if self.positive else -seconds


@dataclass(frozen=True)
class PosixTzJulianDate:
    """Jn: day 1..365, February 29 is never counted."""

    day: int

    def is_valid_range(self) -> bool:
        return 1 <= self.day <= 365

    def to_date(self, year: int) -> date:
        reference = date(_JULIAN_REFERENCE_YEAR, 1, 1) + timedelta(days=self.day - 1)
        try:
            return date(year, reference.month, reference.day)
        except ValueError as exc:
            raise PosixTzConversionError(f"J{self.day} is not valid in {year}") from exc


@dataclass(frozen=True)
class PosixTzOrdinalDate:
    """n: zero-based day of the year, February 29 counted."""

    day: int

    def is_valid_range(self) -> bool:
        return self.day <= 365

    def to_date(self, year: int) -> date:
        try:
            result = date(year, 1, 1) + timedelta(days=self.day)
        except (ValueError, OverflowError) as exc:
            raise PosixTzConversionError(f"{self.day} is not valid in {year}") from exc
        if result.year != year:
            raise PosixTzConversionError(f"Year {year} has no day {self.day}")
        return result


@dataclass(frozen=True)
class PosixTzMonthWeekDate:
    """Mm.w.d: weekday d (Sunday=0) of week w (5 = last) of month m."""

    month: int
    week: int
    weekday: int

    def is_valid_range(self) -> bool:
        return 1 <= self.month <= 12 and 1 <= self.week <= 5 and 0 <= self.weekday <= 6

    def to_date(self, year: int) -> date:
        assert self.is_valid_range(), f"Unchecked POSIX date {self!r}"
        # POSIX counts weekdays from Sunday, Python from Monday
        py_weekday = (self.weekday - 1) % 7
        try:
            first_of_month = date(year, self.month, 1)
            delta = (py_weekday - first_of_month.weekday()) % 7
            target = first_of_month + timedelta(days=delta + 7 * (self.week - 1))
        except (ValueError, OverflowError) as exc:
            raise PosixTzConversionError(f"{self!r} is not valid in {year}") from exc
        if self.week == 5 and target.month != self.month:
            target -= timedelta(days=7)
        return target


PosixTzDate = PosixTzJulianDate | PosixTzOrdinalDate | PosixTzMonthWeekDate


@dataclass(frozen=True)
class PosixTzTransition:
    date: PosixTzDate
    time: PosixTzTime | None = None

    def to_datetime(self, year: int) -> datetime:
        """Naive local wall time of this transition in `year`."""
        moment = (
            self.time.to_timedelta()
            if self.time is not None
            else DEFAULT_TRANSITION_TIME
        )
        try:
            midnight = datetime.combine(self.date.to_date(year), datetime.min.time())
            return midnight + moment
        except OverflowError as exc:
            raise PosixTzConversionError(f"{self!r} is not valid in {year}") from exc


@dataclass(frozen=True)
class PosixTzRule:
    start: PosixTzTransition
    end: PosixTzTransition


@dataclass(frozen=True)
class PosixTzStd:
    name: str
    offset: PosixTzSignedOffset


@dataclass(frozen=True)
class PosixTzDst:
    name: str
    offset: PosixTzSignedOffset | None = None
    rule: PosixTzRule | None = None


@dataclass(frozen=True)
class PosixTzShort:
    """`:name`, a reference to a zone of the registry."""

    name: str


@dataclass(frozen=True)
class PosixTzExpanded:
    std: PosixTzStd
    dst: PosixTzDst | None = None


PosixTzSpec = PosixTzShort | PosixTzExpanded


class _Mismatch(Exception):
    pass


class _PosixTzParser:
    def __init__(self, text: str, extended: bool) -> None:
        self._text = text
        self._extended = extended
        self._pos = 0
        self._furthest = (GrammarRule.END, 0)

    def parse(self) -> PosixTzSpec:
        try:
            spec = self._short() if self._peek(":") else self._expanded()
            if self._pos != len(self._text):
                self._fail(GrammarRule.END)
        except _Mismatch:
            rule, position = self._furthest
            raise ParseError(self._text, rule, position) from None
        return spec

    # helpers

    def _fail(self, rule: GrammarRule):
        if self._pos >= self._furthest[1]:
            self._furthest = (rule, self._pos)
        raise _Mismatch()

    def _peek(self, char: str) -> bool:
        return self._text.startswith(char, self._pos)

    def _accept(self, char: str) -> bool:
        if self._peek(char):
            self._pos += 1
            return True
        return False

    def _expect(self, char: str, rule: GrammarRule) -> None:
        if not self._accept(char):
            self._fail(rule)

    def _match(self, pattern: re.Pattern, rule: GrammarRule) -> re.Match:
        match = pattern.match(self._text, self._pos)
        if match is None:
            self._fail(rule)
        self._pos = match.end()  # type: ignore[union-attr]
        return match  # type: ignore[return-value]

    def _optional(self, production):
        start = self._pos
        try:
            return production()
        except _Mismatch:
            self._pos = start
            return None

    def _number(self, rule: GrammarRule, limit: int) -> int:
        start = self._pos
        value = int(self._match(_DIGITS, rule).group())
        if value > limit:
            self._pos = start
            self._fail(rule)
        return value

    # productions

    def _short(self) -> PosixTzShort:
        self._expect(":", GrammarRule.NAME)
        if self._peek("<"):
            return PosixTzShort(self._name())
        return PosixTzShort(self._match(_ZONE_PATH, GrammarRule.NAME).group())

    def _expanded(self) -> PosixTzExpanded:
        std = PosixTzStd(self._name(), self._offset())
        dst = self._optional(self._dst)
        return PosixTzExpanded(std, dst)

    def _dst(self) -> PosixTzDst:
        name = self._name()
        offset = self._optional(self._offset)
        rule = self._optional(self._rule)
        return PosixTzDst(name, offset, rule)

    def _name(self) -> str:
        if self._peek("<"):
            return self._match(_QUOTED_NAME, GrammarRule.NAME).group(1)
        return self._match(_UNQUOTED_NAME, GrammarRule.NAME).group()

    def _offset(self) -> PosixTzSignedOffset:
        positive = not self._accept("-")
        if positive:
            self._accept("+")
        return PosixTzSignedOffset(positive, self._time(GrammarRule.OFFSET))

    def _time(
        self, rule: GrammarRule = GrammarRule.TIME, hour_limit: int = 255
    ) -> PosixTzTime:
        hours = self._number(rule, hour_limit)
        minutes = self._optional(self._time_component)
        seconds = self._optional(self._time_component) if minutes is not None else None
        return PosixTzTime(hours, minutes, seconds)

    def _time_component(self) -> int:
        self._expect(":", GrammarRule.TIME)
        return self._number(GrammarRule.TIME, 255)

    def _rule_time(self) -> PosixTzTime:
        self._expect("/", GrammarRule.TIME)
        if not self._extended:
            return self._time()
        negative = self._accept("-")
        if not negative:
            self._accept("+")
        time = self._time(hour_limit=999)
        return PosixTzTime(time.hours, time.minutes, time.seconds, negative)

    def _date(self) -> PosixTzDate:
        if self._accept("J"):
            return PosixTzJulianDate(self._number(GrammarRule.DATE, 0xFFFF))
        if self._accept("M"):
            month = self._number(GrammarRule.DATE, 255)
            self._expect(".", GrammarRule.DATE)
            week = self._number(GrammarRule.DATE, 255)
            self._expect(".", GrammarRule.DATE)
            weekday = self._number(GrammarRule.DATE, 255)
            return PosixTzMonthWeekDate(month, week, weekday)
        return PosixTzOrdinalDate(self._number(GrammarRule.DATE, 0xFFFF))

    def _transition(self) -> PosixTzTransition:
        self._expect(",", GrammarRule.RULE)
        date_ = self._date()
        return PosixTzTransition(date_, self._optional(self._rule_time))

    def _rule(self) -> PosixTzRule:
        return PosixTzRule(self._transition(), self._transition())


def _ensure_valid_range(text: str, spec: PosixTzSpec, extended: bool) -> None:
    if isinstance(spec, PosixTzShort):
        return
    if not spec.std.offset.time.is_valid_range():
        raise RangeError(text, RangeErrorKind.TIME)
    dst = spec.dst
    if dst is None:
        return
    if dst.offset is not None and not dst.offset.time.is_valid_range():
        raise RangeError(text, RangeErrorKind.TIME)
    if dst.rule is None:
        return
    # RFC 8536 allows rule times from -167 to 167 hours in TZif footers.
    max_hours = 167 if extended else 24
    for transition in (dst.rule.start, dst.rule.end):
        if not transition.date.is_valid_range():
            raise RangeError(text, RangeErrorKind.DATE)
    for transition in (dst.rule.start, dst.rule.end):
        time = transition.time
        if time is not None and not time.is_valid_range(max_hours):
            raise RangeError(text, RangeErrorKind.TIME)


def parse_posix_tz(text: str, extended: bool = False) -> PosixTzSpec:
    """
    Parse and range-check a POSIX TZ string.

    With `extended`, rule times may carry a sign and exceed 24 hours, as in the
    footer of TZif files.
    """
    spec = _PosixTzParser(text, extended).parse()
    _ensure_valid_range(text, spec, extended)
    return spec
