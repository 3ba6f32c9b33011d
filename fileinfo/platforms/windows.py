"""Stat strategy for Windows."""

import logging
import os
import stat
from datetime import datetime

from fileinfo.constants import PLATFORM_WINDOWS
from fileinfo.platforms.base import PlatformStatStrategy, timespec_to_datetime

logger = logging.getLogger(__name__)


class WindowsStatStrategy(PlatformStatStrategy):
    """
    Creation time comes from the dedicated creation field. Windows reports
    zero for directory sizes, so a directory's size is the sum of the
    regular files below it.
    """

    name = PLATFORM_WINDOWS

    def creation_time(self, st: os.stat_result) -> datetime:
        # st_birthtime appeared in Python 3.12; before that st_ctime held creation time on Windows
        field = 'st_birthtime' if getattr(st, 'st_birthtime', None) is not None else 'st_ctime'
        return timespec_to_datetime(*self._timespec(st, field))

    def size(self, st: os.stat_result, path: str) -> int:
        st = self._require_stat(st)
        if not stat.S_ISDIR(st.st_mode):
            return st.st_size
        return directory_size(path)


def directory_size(path: str) -> int:
    """
    Sum the sizes of all regular files below a directory.

    Entries that cannot be listed or statted count as zero. Symbolic links
    are neither followed nor counted.

    Args:
        path: Directory to measure

    Returns:
        Total size in bytes
    """
    total = 0
    for dirpath, _dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        for filename in filenames:
            entry_path = os.path.join(dirpath, filename)
            try:
                entry_stat = os.lstat(entry_path)
            except OSError as e:
                logger.debug(f"Skipping {entry_path} while summing directory size: {e}")
                continue
            if stat.S_ISREG(entry_stat.st_mode):
                total += entry_stat.st_size
    return total


def _log_walk_error(error: OSError) -> None:
    logger.debug(f"Skipping {error.filename} while summing directory size: {error}")
