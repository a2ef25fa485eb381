import logging
import statistics as stats
import time
from datetime import datetime, timedelta

from tzresolve import PosixTz, get_by_name

ZONES = [
    "America/New_York",
    "America/Chicago",
    "Europe/London",
    "Asia/Tokyo",
    "Asia/Kolkata",
    "Australia/Sydney",
    "Africa/Abidjan",  # UTC
    "Pacific/Auckland",
]


def _percentile(values, pct):
    """
    pct in [0,100]. Uses nearest-rank after sorting.
    """
    if not values:
        return float("nan")
    if pct <= 0:
        return values[0]
    if pct >= 100:
        return values[-1]
    k = int(round((pct / 100.0) * (len(values) - 1)))
    return values[k]


def _report(title, timings, total_calls, total_time):
    timings.sort()
    ops_per_sec = total_calls / total_time if total_time > 0 else float("inf")
    us = lambda s: f"{s * 1e6:,.1f} μs"

    logging.debug(f"\n=== {title} ===")
    logging.debug(f"Total calls     : {total_calls:,}")
    logging.debug(f"Total wall time : {total_time:,.3f} s")
    logging.debug(f"Throughput      : {ops_per_sec:,.1f} ops/s")
    logging.debug(f"Mean            : {us(stats.fmean(timings))}")
    logging.debug(f"Median          : {us(timings[len(timings) // 2])}")
    logging.debug(f"p90             : {us(_percentile(timings, 90))}")
    logging.debug(f"p99             : {us(_percentile(timings, 99))}")
    logging.debug(f"Min / Max       : {us(timings[0])} / {us(timings[-1])}")


def test_get_offset_utc_performance():
    # A spread of UTC instants (naive means UTC)
    dates = [
        datetime(1900, 1, 1, 0, 0, 0),
        datetime(1950, 6, 1, 12, 0, 0),
        datetime(2000, 3, 26, 1, 59, 59),
        datetime(2024, 11, 3, 6, 59, 59),
        datetime(2025, 3, 9, 6, 59, 59),
        datetime(2039, 6, 2, 0, 0, 0),
        datetime(2060, 1, 1, 0, 0, 0),
    ]
    total_calls = 5000
    tz_objs = {z: get_by_name(z) for z in ZONES}

    timings = []
    start_wall = time.perf_counter()
    for idx in range(total_calls):
        tz = tz_objs[ZONES[idx % len(ZONES)]]
        d = dates[(idx // len(ZONES)) % len(dates)]

        t0 = time.perf_counter()
        offset = tz.get_offset_utc(d)
        _ = offset.utc_offset_secs, offset.is_dst, offset.name
        timings.append(time.perf_counter() - t0)

    wall_time = time.perf_counter() - start_wall
    _report("Tz.get_offset_utc() performance", timings, total_calls, wall_time)


def test_get_offset_local_performance():
    base_dt = datetime(2024, 1, 15, 0, 0, 0)
    steps_per_zone = 1000
    tz_objs = {z: get_by_name(z) for z in ZONES}

    timings = []
    start_wall = time.perf_counter()
    for z in ZONES:
        tz = tz_objs[z]
        for i in range(steps_per_zone):
            d = base_dt + timedelta(minutes=5 * i)
            t0 = time.perf_counter()
            result = tz.get_offset_local(d)
            _ = result.take_first()
            timings.append(time.perf_counter() - t0)

    total_calls = steps_per_zone * len(ZONES)
    wall_time = time.perf_counter() - start_wall
    _report("Tz.get_offset_local() performance", timings, total_calls, wall_time)


def test_posix_rule_performance():
    tz = PosixTz.parse("EST5EDT,M3.2.0,M11.1.0")
    base_dt = datetime(2024, 1, 1)
    total_calls = 5000

    timings = []
    start_wall = time.perf_counter()
    for i in range(total_calls):
        d = base_dt + timedelta(hours=7 * i)
        t0 = time.perf_counter()
        tz.get_offset_utc(d)
        timings.append(time.perf_counter() - t0)

    wall_time = time.perf_counter() - start_wall
    _report("PosixTz.get_offset_utc() performance", timings, total_calls, wall_time)
