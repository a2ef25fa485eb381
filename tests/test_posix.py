from datetime import date, datetime

import pytest

from tzresolve import (
    GrammarRule,
    ParseError,
    PosixTzConversionError,
    RangeError,
    RangeErrorKind,
)
from tzresolve.posix import (
    PosixTzDst,
    PosixTzExpanded,
    PosixTzJulianDate,
    PosixTzMonthWeekDate,
    PosixTzOrdinalDate,
    PosixTzRule,
    PosixTzShort,
    PosixTzSignedOffset,
    PosixTzStd,
    PosixTzTime,
    PosixTzTransition,
    parse_posix_tz,
)


def test_parse_full_string():
    assert parse_posix_tz("ABC+1:00DEF,M1.2.3/4,56") == PosixTzExpanded(
        std=PosixTzStd("ABC", PosixTzSignedOffset(True, PosixTzTime(1, 0))),
        dst=PosixTzDst(
            "DEF",
            None,
            PosixTzRule(
                PosixTzTransition(PosixTzMonthWeekDate(1, 2, 3), PosixTzTime(4)),
                PosixTzTransition(PosixTzOrdinalDate(56)),
            ),
        ),
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "UTC0",
            PosixTzExpanded(
                PosixTzStd("UTC", PosixTzSignedOffset(True, PosixTzTime(0)))
            ),
        ),
        (
            "<+0330>-3:30",
            PosixTzExpanded(
                PosixTzStd("+0330", PosixTzSignedOffset(False, PosixTzTime(3, 30)))
            ),
        ),
        (
            "<UTC+05,30>-5:30",
            PosixTzExpanded(
                PosixTzStd("UTC+05,30", PosixTzSignedOffset(False, PosixTzTime(5, 30)))
            ),
        ),
        (
            "EST5EDT",
            PosixTzExpanded(
                PosixTzStd("EST", PosixTzSignedOffset(True, PosixTzTime(5))),
                PosixTzDst("EDT"),
            ),
        ),
        (
            "NZST-12NZDT-13:00:00,J300/2:30:15,J60",
            PosixTzExpanded(
                PosixTzStd("NZST", PosixTzSignedOffset(False, PosixTzTime(12))),
                PosixTzDst(
                    "NZDT",
                    PosixTzSignedOffset(False, PosixTzTime(13, 0, 0)),
                    PosixTzRule(
                        PosixTzTransition(
                            PosixTzJulianDate(300), PosixTzTime(2, 30, 15)
                        ),
                        PosixTzTransition(PosixTzJulianDate(60)),
                    ),
                ),
            ),
        ),
        (":Europe/London", PosixTzShort("Europe/London")),
        (":EST", PosixTzShort("EST")),
        (":<Etc/GMT+5>", PosixTzShort("Etc/GMT+5")),
    ],
)
def test_parse(text, expected):
    assert parse_posix_tz(text) == expected


@pytest.mark.parametrize(
    "offset_str, seconds",
    [
        ("5", 5 * 3600),  # POSIX: no sign means west of UTC
        ("+5", 5 * 3600),
        ("-02:30", -(2 * 3600 + 30 * 60)),
        ("14", 14 * 3600),
        ("00:45:30", 45 * 60 + 30),
    ],
)
def test_offset_sign(offset_str, seconds):
    spec = parse_posix_tz(f"ABC{offset_str}")
    assert spec.std.offset.to_seconds() == seconds


@pytest.mark.parametrize(
    "text, rule, position",
    [
        ("AB5", GrammarRule.NAME, 0),
        ("EST", GrammarRule.OFFSET, 3),
        ("EST5EDT,M3.2.0", GrammarRule.RULE, 14),
        ("EST5 ", GrammarRule.END, 4),
        ("<EST5", GrammarRule.NAME, 0),
        ("EST5EDT,M3.2,M11.1.0", GrammarRule.DATE, 12),
        ("", GrammarRule.NAME, 0),
    ],
)
def test_parse_errors(text, rule, position):
    with pytest.raises(ParseError) as excinfo:
        parse_posix_tz(text)
    assert excinfo.value.rule is rule
    assert excinfo.value.position == position
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("EST25", RangeErrorKind.TIME),
        ("EST5:60", RangeErrorKind.TIME),
        ("EST5:00:60", RangeErrorKind.TIME),
        ("EST5EDT99", RangeErrorKind.TIME),
        ("EST5EDT,M3.2.0/25,M11.1.0", RangeErrorKind.TIME),
        ("EST5EDT,M13.1.0,M11.1.0", RangeErrorKind.DATE),
        ("EST5EDT,M0.1.0,M11.1.0", RangeErrorKind.DATE),
        ("EST5EDT,M5.6.0,M11.1.0", RangeErrorKind.DATE),
        ("EST5EDT,M5.1.7,M11.1.0", RangeErrorKind.DATE),
        ("EST5EDT,J0,J365", RangeErrorKind.DATE),
        ("EST5EDT,J1,J366", RangeErrorKind.DATE),
        ("EST5EDT,0,366", RangeErrorKind.DATE),
    ],
)
def test_range_errors(text, kind):
    with pytest.raises(RangeError) as excinfo:
        parse_posix_tz(text)
    assert excinfo.value.kind is kind


def test_numbers_beyond_field_width_are_grammar_errors():
    with pytest.raises(ParseError) as excinfo:
        parse_posix_tz("EST256")
    assert excinfo.value.rule is GrammarRule.OFFSET


@pytest.mark.parametrize(
    "text, start_time",
    [
        ("<-03>3<-02>,M3.5.0/-2,M10.5.0/-1", PosixTzTime(2, negative=True)),
        ("IST-2IDT,M3.4.4/26,M10.5.0", PosixTzTime(26)),
        ("XXX3EDT4,0/0,J365/25", PosixTzTime(0)),
        ("ABC1DEF,M3.2.0/167,M11.1.0", PosixTzTime(167)),
    ],
)
def test_extended_rule_times(text, start_time):
    spec = parse_posix_tz(text, extended=True)
    assert spec.dst.rule.start.time == start_time


def test_extended_rule_times_are_bounded():
    with pytest.raises(RangeError):
        parse_posix_tz("ABC1DEF,M3.2.0/168,M11.1.0", extended=True)
    with pytest.raises(RangeError):
        parse_posix_tz("IST-2IDT,M3.4.4/26,M10.5.0")
    with pytest.raises(ParseError):
        parse_posix_tz("<-03>3<-02>,M3.5.0/-2,M10.5.0/-1")


@pytest.mark.parametrize(
    "posix_date, year, expected",
    [
        (PosixTzMonthWeekDate(6, 1, 1), 2025, date(2025, 6, 2)),
        (PosixTzMonthWeekDate(1, 1, 0), 2025, date(2025, 1, 5)),
        (PosixTzMonthWeekDate(3, 2, 0), 2025, date(2025, 3, 9)),
        (PosixTzMonthWeekDate(11, 1, 0), 2025, date(2025, 11, 2)),
        (PosixTzMonthWeekDate(3, 2, 0), 2026, date(2026, 3, 8)),
        (PosixTzMonthWeekDate(11, 1, 0), 2026, date(2026, 11, 1)),
        # First Monday of Feb 2025
        (PosixTzMonthWeekDate(2, 1, 1), 2025, date(2025, 2, 3)),
        # w=5 means "last"
        (PosixTzMonthWeekDate(10, 5, 0), 2025, date(2025, 10, 26)),
        (PosixTzMonthWeekDate(5, 5, 1), 2025, date(2025, 5, 26)),
        (PosixTzMonthWeekDate(3, 5, 0), 2024, date(2024, 3, 31)),
        # 2nd Wednesday of January
        (PosixTzMonthWeekDate(1, 2, 3), 2024, date(2024, 1, 10)),
    ],
)
def test_month_week_date(posix_date, year, expected):
    assert posix_date.to_date(year) == expected


@pytest.mark.parametrize(
    "posix_date, year, expected",
    [
        # J excludes Feb 29: J60 is March 1 in every year
        (PosixTzJulianDate(60), 2024, date(2024, 3, 1)),
        (PosixTzJulianDate(60), 2023, date(2023, 3, 1)),
        (PosixTzJulianDate(59), 2024, date(2024, 2, 28)),
        (PosixTzJulianDate(365), 2024, date(2024, 12, 31)),
        (PosixTzJulianDate(1), 2023, date(2023, 1, 1)),
        # Plain n is zero-based and counts Feb 29
        (PosixTzOrdinalDate(59), 2024, date(2024, 2, 29)),
        (PosixTzOrdinalDate(59), 2023, date(2023, 3, 1)),
        (PosixTzOrdinalDate(0), 2025, date(2025, 1, 1)),
        (PosixTzOrdinalDate(365), 2024, date(2024, 12, 31)),
        (PosixTzOrdinalDate(56), 2024, date(2024, 2, 26)),
    ],
)
def test_day_of_year_dates(posix_date, year, expected):
    assert posix_date.to_date(year) == expected


def test_ordinal_date_past_year_end():
    with pytest.raises(PosixTzConversionError):
        PosixTzOrdinalDate(365).to_date(2023)


@pytest.mark.parametrize(
    "transition, year, expected",
    [
        (
            PosixTzTransition(PosixTzMonthWeekDate(3, 2, 0)),
            2025,
            datetime(2025, 3, 9, 2),
        ),
        (
            PosixTzTransition(PosixTzMonthWeekDate(7, 1, 2), PosixTzTime(6, 30, 15)),
            2025,
            datetime(2025, 7, 1, 6, 30, 15),
        ),
        (
            PosixTzTransition(PosixTzJulianDate(365), PosixTzTime(23, 59, 59)),
            2024,
            datetime(2024, 12, 31, 23, 59, 59),
        ),
        (
            PosixTzTransition(PosixTzMonthWeekDate(3, 2, 0), PosixTzTime(26)),
            2024,
            datetime(2024, 3, 11, 2),
        ),
        (
            PosixTzTransition(
                PosixTzMonthWeekDate(3, 2, 0), PosixTzTime(2, 30, negative=True)
            ),
            2024,
            datetime(2024, 3, 9, 21, 30),
        ),
    ],
)
def test_transition_to_datetime(transition, year, expected):
    assert transition.to_datetime(year) == expected
