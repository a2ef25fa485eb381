from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from .offset_result import OffsetResult


class Offset(ABC):
    """
    A resolved offset of a timezone at some instant.
    """

    @property
    @abstractmethod
    def utc_offset_secs(self) -> int: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_dst(self) -> bool: ...

    def to_utc(self) -> timezone:
        """The offset as a fixed-offset tzinfo."""
        return timezone(timedelta(seconds=self.utc_offset_secs))


class TimeZone(ABC):
    @abstractmethod
    def get_offset_utc(self, dt: datetime) -> Offset:
        """
        Offset in effect at the instant `dt`. Naive datetimes are read as UTC.
        """

    @abstractmethod
    def get_offset_local(self, dt: datetime) -> OffsetResult:
        """
        Offset(s) matching the wall-clock time `dt`. Any tzinfo is ignored.
        """

    @abstractmethod
    def get_offset_primary(self) -> Offset:
        """The default offset of this timezone."""

    @abstractmethod
    def name(self) -> str: ...
