"""
Registry of the known timezones.

Zone data is read from compiled TZif files, found on the same search path the
standard library `zoneinfo` module uses, with the `tzdata` package as final
fallback. Each zone is loaded once, on first use, and shared afterwards.
"""

import logging
import os
import sysconfig
import threading
from importlib import resources
from typing import IO, Iterator

from ._windows_zones import WINDOWS_ZONES
from .models import FixedTimespanSet
from .timezone import Tz
from .tzif import read_timespan_set

logger = logging.getLogger(__name__)

_SKIPPED_DIRS = ("posix", "right")
_SKIPPED_FILES = ("posixrules", "localtime", "Factory")


class TimezoneRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._names: tuple[str, ...] | None = None
        self._name_set: frozenset[str] = frozenset()
        self._zones: dict[str, Tz] = {}

    def names(self) -> tuple[str, ...]:
        if self._names is None:
            with self._lock:
                if self._names is None:
                    names = _discover_names()
                    logger.debug("Discovered %d timezone names", len(names))
                    self._name_set = frozenset(names)
                    self._names = names
        return self._names

    def get_by_name(self, name: str) -> Tz | None:
        self.names()
        if name in self._name_set:
            return self._zone(name)
        zones = WINDOWS_ZONES.get(name)
        if zones:
            return self.get_by_name(zones[0])
        return None

    def find_by_name(self, name: str) -> list[Tz]:
        zones = WINDOWS_ZONES.get(name)
        if zones is not None:
            return [tz for tz in map(self.get_by_name, zones) if tz is not None]
        return [self._zone(key) for key in self.names() if name in key]

    def __iter__(self) -> Iterator[Tz]:
        return (self._zone(key) for key in self.names())

    def _zone(self, name: str) -> Tz:
        tz = self._zones.get(name)
        if tz is None:
            with self._lock:
                tz = self._zones.get(name)
                if tz is None:
                    tz = Tz(name=name, loader=lambda: load_timespan_set(name))
                    self._zones[name] = tz
        return tz


def load_timespan_set(name: str) -> FixedTimespanSet:
    """
    Read the timespan table of `name` from the first zoneinfo directory that has
    it, else from the tzdata package.
    """
    key = _validate_timezone_key(name)
    for tz_root in _search_paths():
        candidate = os.path.join(tz_root, key)
        if os.path.isfile(candidate):
            real = os.path.realpath(candidate)
            logger.debug("Loading timezone %s from %s", name, real)
            with open(real, "rb") as file:
                return read_timespan_set(file, name)

    logger.debug("Loading timezone %s from the tzdata package", name)
    with _load_tzdata_from_package(key) as file:
        return read_timespan_set(file, name)


_CPYTHON_TZPATH = ("/usr/share/zoneinfo", "/usr/share/lib/zoneinfo", "/etc/zoneinfo")


def _search_paths() -> list[str]:
    """TZDIR first, then the TZPATH `zoneinfo` would search."""
    paths = []
    tzdir = os.environ.get("TZDIR")
    if tzdir:
        paths.append(os.path.realpath(tzdir))
    tzpath = os.environ.get("PYTHONTZPATH") or sysconfig.get_config_var("TZPATH")
    if tzpath:
        paths.extend(path for path in tzpath.split(os.pathsep) if path)
    else:
        paths.extend(_CPYTHON_TZPATH)
    return paths


def _validate_timezone_key(name: str) -> str:
    if os.path.isabs(name):
        raise ValueError(f"Timezone name {name!r} is an absolute path")

    # normpath only shortens a key that has "." or ".." parts
    key = os.path.normpath(name)
    if len(key) != len(name) or key in (os.curdir, os.pardir, ""):
        raise ValueError(f"Invalid timezone name: {name!r}")

    sentinel = os.path.join("_", "")
    if not os.path.normpath(os.path.join(sentinel, key)).startswith(sentinel):
        raise ValueError(f"Timezone name {name!r} leaves the zoneinfo directory")
    return key


def _load_tzdata_from_package(key: str) -> IO[bytes]:
    *parents, leaf = key.split("/")
    package = ".".join(["tzdata", "zoneinfo", *parents])
    try:
        return resources.files(package).joinpath(leaf).open("rb")
    except (ImportError, FileNotFoundError, UnicodeEncodeError) as exc:
        raise FileNotFoundError(f"Unknown timezone {key!r}") from exc


def _discover_names() -> tuple[str, ...]:
    names: set[str] = set()
    try:
        listing = resources.files("tzdata").joinpath("zones").read_text("utf-8")
    except (ImportError, FileNotFoundError):
        logger.debug("tzdata package not available")
    else:
        names.update(line.strip() for line in listing.splitlines() if line.strip())

    for tz_root in _search_paths():
        if not os.path.isdir(tz_root):
            continue
        for root, dirs, files in os.walk(tz_root):
            if root == tz_root:
                dirs[:] = [d for d in dirs if d not in _SKIPPED_DIRS]
            for file in files:
                if file in _SKIPPED_FILES:
                    continue
                path = os.path.join(root, file)
                key = os.path.relpath(path, tz_root).replace(os.sep, "/")
                if key not in names and _is_tzif(path):
                    names.add(key)

    names.difference_update(_SKIPPED_FILES)
    return tuple(sorted(names))


def _is_tzif(path: str) -> bool:
    try:
        with open(path, "rb") as file:
            return file.read(4) == b"TZif"
    except OSError:
        return False


_REGISTRY = TimezoneRegistry()


def get_by_name(name: str) -> Tz | None:
    """
    Look up a zone by its exact IANA name (or link), then by its Windows name.
    """
    return _REGISTRY.get_by_name(name)


def find_by_name(name: str) -> list[Tz]:
    """
    All zones of a Windows name, or else all zones whose IANA name contains
    `name`.
    """
    return _REGISTRY.find_by_name(name)


def iter_timezones() -> Iterator[Tz]:
    return iter(_REGISTRY)


def available_names() -> tuple[str, ...]:
    return _REGISTRY.names()
