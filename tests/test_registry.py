import struct
from datetime import datetime, timedelta

import pytest

from tzresolve import (
    Tz,
    available_names,
    find_by_name,
    get_by_name,
    iter_timezones,
    to_timezone,
    to_utc,
)
from tzresolve.timezones import TimezoneRegistry, load_timespan_set


def test_get_by_name_iana():
    tz = get_by_name("Europe/London")
    assert isinstance(tz, Tz)
    assert tz.name() == "Europe/London"
    assert get_by_name("Europe/London") is tz


def test_get_by_name_link():
    tz = get_by_name("US/Eastern")
    assert tz is not None
    assert tz.name() == "US/Eastern"
    instant = datetime(2024, 7, 1)
    new_york = get_by_name("America/New_York")
    assert tz.get_offset_utc(instant) == new_york.get_offset_utc(instant)


def test_windows_name_matches_iana_entry():
    assert get_by_name("Asia/Shanghai") is get_by_name("China Standard Time")
    assert get_by_name("W. Europe Standard Time").name() == "Europe/Berlin"


def test_get_by_name_unknown():
    assert get_by_name("Nowhere/Zone") is None
    assert get_by_name("") is None


def test_find_by_name_windows_name_returns_all_zones():
    names = [tz.name() for tz in find_by_name("Eastern Standard Time/US")]
    assert names[0] == "America/New_York"
    assert "America/Detroit" in names
    assert len(names) > 1


def test_find_by_name_substring():
    names = [tz.name() for tz in find_by_name("Berlin")]
    assert "Europe/Berlin" in names
    assert all("Berlin" in name for name in names)
    assert find_by_name("berlin") == []
    assert find_by_name("No Such Zone At All") == []


def test_iter_timezones_is_restartable():
    first = [tz.name() for tz in iter_timezones()]
    second = [tz.name() for tz in iter_timezones()]
    assert first == second
    assert first == list(available_names())
    assert "Europe/Budapest" in first
    assert "posixrules" not in first


@pytest.mark.parametrize(
    "key", ["/etc/passwd", "../etc/passwd", "Europe/../../etc/passwd", ""]
)
def test_invalid_keys_are_rejected(key):
    with pytest.raises(ValueError):
        load_timespan_set(key)


def test_missing_zone_file():
    with pytest.raises(FileNotFoundError):
        load_timespan_set("Invalid/Timezone")


def test_registry_reads_tzdir(monkeypatch, tmp_path):
    header = struct.pack(">4s1c15x6I", b"TZif", b"\x00", 0, 0, 0, 0, 1, 4)
    data = header + struct.pack(">i?B", 4 * 3600, False, 0) + b"ABC\x00"
    (tmp_path / "Test").mkdir()
    (tmp_path / "Test" / "Zone").write_bytes(data)
    (tmp_path / "Test" / "README").write_text("not a zone")
    monkeypatch.setenv("TZDIR", str(tmp_path))

    registry = TimezoneRegistry()

    assert "Test/Zone" in registry.names()
    assert "Test/README" not in registry.names()
    tz = registry.get_by_name("Test/Zone")
    assert tz.get_offset_utc(datetime(2024, 1, 1)).utc_offset_secs == 4 * 3600
    assert tz.get_offset_utc(datetime(2024, 1, 1)).name == "ABC"


def test_every_zone_resolves_and_round_trips():
    instants = [
        datetime(1900, 1, 1),
        datetime(1970, 1, 1),
        datetime(2016, 10, 8, 17),
        datetime(2024, 3, 31, 1, 30),
        datetime(2099, 12, 31, 23),
    ]
    for tz in iter_timezones():
        for instant in instants:
            offset = tz.get_offset_utc(instant)
            assert offset is not None, tz.name()
            converted = to_timezone(instant, tz)
            assert converted.utcoffset() == timedelta(seconds=offset.utc_offset_secs)
            assert to_utc(converted).replace(tzinfo=None) == instant, tz.name()
            assert tz.get_offset_utc(instant) == offset


def test_fixed_offset_zone_is_never_ambiguous():
    tz = get_by_name("Etc/GMT+5")
    spans = tz.timespans
    assert {spans[i].total_offset for i in range(len(spans))} == {-5 * 3600}
    for month in range(1, 13):
        assert tz.get_offset_local(datetime(2024, month, 1)).is_some()


@pytest.mark.parametrize(
    "key, expected",
    [
        ("W. Europe Standard Time/IT", ["Europe/Rome"]),
        ("GMT Standard Time/IE", ["Europe/Dublin"]),
        ("SE Asia Standard Time/TH", ["Asia/Bangkok"]),
        ("Tokyo Standard Time/ZZ", ["Etc/GMT-9"]),
    ],
)
def test_find_by_name_windows_territory(key, expected):
    assert [tz.name() for tz in find_by_name(key)] == expected
    assert get_by_name(key).name() == expected[0]


def test_windows_territory_lists_every_zone():
    names = [tz.name() for tz in find_by_name("GMT Standard Time/PT")]
    assert names == ["Europe/Lisbon", "Atlantic/Madeira"]
