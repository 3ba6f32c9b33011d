"""Stat strategy for macOS and the BSDs, which record a file birth time."""

import os
from datetime import datetime

from fileinfo.constants import PLATFORM_DARWIN
from fileinfo.platforms.base import PlatformStatStrategy, timespec_to_datetime


class DarwinStatStrategy(PlatformStatStrategy):
    """
    Creation time is read from st_birthtime.

    Directory sizes are reported as the filesystem returns them.
    """

    name = PLATFORM_DARWIN

    def creation_time(self, st: os.stat_result) -> datetime:
        return timespec_to_datetime(*self._timespec(st, 'st_birthtime'))
