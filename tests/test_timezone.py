from datetime import datetime, timedelta, timezone

import pytest

from tzresolve import FixedTimespan, FixedTimespanSet, TimespanInvariantError, Tz
from tzresolve.instants import from_timestamp
from tzresolve.models import Span

STD = FixedTimespan(3600, 0, "STD")
DST = FixedTimespan(3600, 3600, "DST")

# DST from 100000 to 200000 (UTC timestamps)
SPANS = FixedTimespanSet("Test/Zone", STD, ((100_000, DST), (200_000, STD)))


def _zone() -> Tz:
    return Tz(SPANS)


@pytest.mark.parametrize(
    "timestamp, expected",
    [
        (-10**10, STD),
        (99_999, STD),
        (100_000, DST),
        (199_999, DST),
        (200_000, STD),
        (10**10, STD),
    ],
)
def test_get_offset_utc_half_open_spans(timestamp, expected):
    offset = _zone().get_offset_utc_timestamp(timestamp)
    assert offset.timespan == expected


def test_get_offset_utc_accepts_datetimes():
    tz = _zone()
    naive = from_timestamp(150_000)
    aware = naive.replace(tzinfo=timezone.utc).astimezone(timezone(timedelta(hours=-7)))

    assert tz.get_offset_utc(naive).name == "DST"
    assert tz.get_offset_utc(aware).name == "DST"
    assert tz.get_offset_utc(naive).utc_offset_secs == 7200
    assert tz.get_offset_utc(naive).is_dst
    assert tz.get_offset_utc(naive).to_utc() == timezone(timedelta(hours=2))


@pytest.mark.parametrize(
    "wall, expected",
    [
        (103_599, ("STD",)),
        (103_600, ()),  # gap start
        (105_000, ()),
        (107_199, ()),
        (107_200, ("DST",)),
        (203_599, ("DST",)),
        (203_600, ("DST", "STD")),  # fold start
        (205_000, ("DST", "STD")),
        (207_199, ("DST", "STD")),
        (207_200, ("STD",)),
    ],
)
def test_get_offset_local_gap_and_fold(wall, expected):
    result = _zone().get_offset_local_timestamp(wall)
    if not expected:
        assert result.is_none()
    elif len(expected) == 1:
        assert result.is_some()
        assert result.unwrap().name == expected[0]
    else:
        assert result.is_ambiguous()
        assert (result.unwrap_first().name, result.unwrap_second().name) == expected


def test_get_offset_local_ignores_tzinfo():
    tz = _zone()
    wall = from_timestamp(205_000)
    aware = wall.replace(tzinfo=timezone.utc)
    assert tz.get_offset_local(wall) == tz.get_offset_local(aware)


def test_single_span_zone_is_never_ambiguous():
    tz = Tz(FixedTimespanSet("Test/Fixed", FixedTimespan(-18000, 0, "EST")))
    for year in (1, 1901, 1970, 2024, 9999):
        result = tz.get_offset_local(datetime(year, 6, 1))
        assert result.is_some()
        assert result.unwrap().utc_offset_secs == -18000
    assert tz.get_offset_utc(datetime(2024, 1, 1)).name == "EST"
    assert tz.get_offset_primary().name == "EST"


def test_primary_offset_is_first_span():
    assert _zone().get_offset_primary().timespan == STD


def test_lazy_loader_runs_once():
    calls = []

    def loader():
        calls.append(1)
        return SPANS

    tz = Tz(name="Test/Zone", loader=loader)
    assert tz.name() == "Test/Zone"
    assert calls == []

    tz.get_offset_utc_timestamp(0)
    tz.get_offset_local_timestamp(0)
    assert calls == [1]
    assert tz == _zone()


def test_tz_requires_data_or_loader():
    with pytest.raises(ValueError):
        Tz()
    with pytest.raises(ValueError):
        Tz(loader=lambda: SPANS)


def test_timespan_set_rejects_unordered_transitions():
    with pytest.raises(ValueError):
        FixedTimespanSet("Test/Bad", STD, ((200_000, DST), (100_000, STD)))
    with pytest.raises(ValueError):
        FixedTimespanSet("Test/Bad", STD, ((100_000, DST), (100_000, STD)))


def test_missing_span_is_an_invariant_error():
    class BrokenSet(FixedTimespanSet):
        def span_utc(self, index):
            return Span(0, 0)

    tz = Tz(BrokenSet("Test/Broken", STD, ((100_000, DST),)))
    with pytest.raises(TimespanInvariantError):
        tz.get_offset_utc_timestamp(50)
