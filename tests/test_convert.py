from datetime import datetime, timedelta, timezone

from tzresolve import (
    OffsetResult,
    PosixTz,
    ZonedDateTime,
    assume_timezone,
    assume_timezone_utc,
    get_by_name,
    to_timezone,
    to_utc,
    with_timezone,
)


def test_london_to_berlin():
    london = get_by_name("Europe/London")
    berlin = get_by_name("Europe/Berlin")

    in_london = assume_timezone(datetime(2016, 10, 8, 17), london).unwrap()
    assert in_london.utcoffset() == timedelta(hours=1)

    in_berlin = to_timezone(in_london, berlin)
    assert in_berlin.replace(tzinfo=None) == datetime(2016, 10, 8, 18)
    assert in_berlin.utcoffset() == timedelta(hours=2)
    assert to_timezone(in_london, "Europe/Berlin") == in_berlin


def test_to_timezone_by_name():
    converted = to_timezone(datetime(2024, 1, 1, 12), "Asia/Tokyo")
    assert converted.replace(tzinfo=None) == datetime(2024, 1, 1, 21)
    assert converted.utcoffset() == timedelta(hours=9)
    converted = to_timezone(datetime(2024, 1, 1), "China Standard Time")
    assert converted.utcoffset() == timedelta(hours=8)
    assert to_timezone(datetime(2024, 1, 1), "Nowhere/Zone") is None


def test_to_utc():
    aware = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert to_utc(aware) is aware

    shifted = to_utc(datetime(2024, 1, 1, 21, tzinfo=timezone(timedelta(hours=9))))
    assert shifted == aware
    assert shifted.tzinfo is timezone.utc
    assert to_utc(datetime(2024, 1, 1, 12)) == aware


def test_assume_timezone_gap_and_fold():
    budapest = get_by_name("Europe/Budapest")

    in_gap = datetime(2024, 3, 31, 2, 30)
    assert assume_timezone(in_gap, budapest) == OffsetResult.undefined()

    fold = assume_timezone(datetime(2024, 10, 27, 2, 30), budapest)
    assert fold.is_ambiguous()
    assert fold.unwrap_first().utcoffset() == timedelta(hours=2)
    assert fold.unwrap_second().utcoffset() == timedelta(hours=1)
    assert fold.unwrap_first().replace(tzinfo=None) == datetime(2024, 10, 27, 2, 30)


def test_assume_timezone_utc():
    new_york = get_by_name("America/New_York")
    converted = assume_timezone_utc(datetime(2024, 7, 1, 12), new_york)
    assert converted.replace(tzinfo=None) == datetime(2024, 7, 1, 8)
    assert converted.utcoffset() == timedelta(hours=-4)


def test_with_timezone():
    tz = PosixTz.parse("CET-1CEST,M3.5.0,M10.5.0/3")

    from_wall = with_timezone(datetime(2024, 7, 1, 12), tz)
    assert isinstance(from_wall, OffsetResult)
    assert from_wall.unwrap().offset() == timedelta(hours=2)

    from_instant = with_timezone(datetime(2024, 7, 1, 12, tzinfo=timezone.utc), tz)
    assert isinstance(from_instant, ZonedDateTime)
    assert from_instant.time().hour == 14


def test_round_trip():
    instant = datetime(2024, 11, 3, 6, 30, tzinfo=timezone.utc)
    for name in (
        "America/New_York",
        "Australia/Lord_Howe",
        "Asia/Kathmandu",
        "Pacific/Chatham",
    ):
        assert to_utc(to_timezone(instant, name)) == instant
