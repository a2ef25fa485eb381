from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)
_SECOND = timedelta(seconds=1)


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are read as UTC, aware ones are converted."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_timestamp(dt: datetime) -> int:
    """Whole seconds since the epoch of the instant `dt`."""
    return (as_utc(dt) - _EPOCH) // _SECOND


def local_timestamp(dt: datetime) -> int:
    """Whole seconds since the epoch of the wall-clock fields of `dt`, read as UTC."""
    return (dt.replace(tzinfo=None) - _EPOCH_NAIVE) // _SECOND


def from_timestamp(timestamp: int) -> datetime:
    """Naive UTC datetime for a timestamp; avoids platform limits of fromtimestamp."""
    return _EPOCH_NAIVE + timedelta(seconds=timestamp)
