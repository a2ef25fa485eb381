import logging
import os
import sys

from .errors import UndeterminedTimezoneError, UnknownNameError
from .timezone import Tz
from .timezones import get_by_name

logger = logging.getLogger(__name__)

LOCALTIME_PATH = "/etc/localtime"


def get_timezone(localtime: str = LOCALTIME_PATH) -> Tz:
    """
    The timezone the operating system is configured with, read from the target
    of the `localtime` symlink.
    """
    if sys.platform == "win32":
        raise UndeterminedTimezoneError(
            "The system timezone can only be read on POSIX systems"
        )

    target = os.readlink(localtime)
    _, sep, name = target.rpartition("/zoneinfo/")
    if not sep or not name:
        raise UndeterminedTimezoneError(
            f"{localtime} does not point into a zoneinfo directory"
        )

    logger.debug("System timezone is %s (from %s)", name, target)
    tz = get_by_name(name)
    if tz is None:
        raise UnknownNameError(name)
    return tz
