"""Stat strategies for Linux and generic Unix systems."""

import os
from datetime import datetime

from fileinfo.constants import EPOCH, PLATFORM_LINUX, PLATFORM_UNIX
from fileinfo.platforms.base import PlatformStatStrategy, timespec_to_datetime


class UnixStatStrategy(PlatformStatStrategy):
    """
    Fallback for Unix systems without a more specific strategy.

    Creation time is not available and is reported as the epoch.
    """

    name = PLATFORM_UNIX

    def creation_time(self, st: os.stat_result) -> datetime:
        self._require_stat(st)
        return EPOCH


class LinuxStatStrategy(PlatformStatStrategy):
    """
    Linux and similar systems, which expose no birth time through stat.

    Creation time is the last status change time (st_ctime). It moves on
    chmod, chown, rename and link count changes, so it is only a proxy
    for the real creation time.
    """

    name = PLATFORM_LINUX

    def creation_time(self, st: os.stat_result) -> datetime:
        return timespec_to_datetime(*self._timespec(st, 'st_ctime'))
