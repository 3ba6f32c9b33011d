"""Common interface for platform-specific stat strategies."""

import math
import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Tuple

from fileinfo.constants import EPOCH, NANOSECONDS_PER_MICROSECOND, NANOSECONDS_PER_SECOND
from fileinfo.exceptions import PlatformAssertionError


def timespec_to_datetime(seconds: int, nanoseconds: int) -> datetime:
    """
    Convert a (seconds, nanoseconds) pair since the epoch to an aware UTC datetime.

    Precision is truncated to microseconds, the finest a datetime holds.
    """
    return EPOCH + timedelta(seconds=seconds, microseconds=nanoseconds // NANOSECONDS_PER_MICROSECOND)


def float_to_timespec(value: float) -> Tuple[int, int]:
    """
    Split float seconds since the epoch into a (seconds, nanoseconds) pair.

    Seconds are floored, so times before the epoch keep a non-negative
    nanosecond part: -0.5 becomes (-1, 500000000).
    """
    seconds = math.floor(value)
    nanoseconds = min(int((value - seconds) * NANOSECONDS_PER_SECOND), NANOSECONDS_PER_SECOND - 1)
    return int(seconds), nanoseconds


class PlatformStatStrategy(ABC):
    """
    Reads timestamps and sizes out of a native os.stat_result.

    One subclass exists per platform family. Access and write times come
    from the same fields everywhere; creation time and directory size are
    where the families differ.
    """

    name: str = ''

    @abstractmethod
    def creation_time(self, st: os.stat_result) -> datetime:
        """Return the creation time, or the epoch when the platform keeps none."""

    def last_access_time(self, st: os.stat_result) -> datetime:
        """Return the last access time."""
        return timespec_to_datetime(*self._timespec(st, 'st_atime'))

    def last_write_time(self, st: os.stat_result) -> datetime:
        """Return the last modification time."""
        return timespec_to_datetime(*self._timespec(st, 'st_mtime'))

    def size(self, st: os.stat_result, path: str) -> int:
        """
        Return the size in bytes of the file described by st.

        Args:
            st: Stat record of the file
            path: Location of the file, for strategies that must inspect
                directory contents

        Returns:
            Size in bytes
        """
        return self._require_stat(st).st_size

    def _require_stat(self, st) -> os.stat_result:
        if not isinstance(st, os.stat_result):
            raise PlatformAssertionError(
                f"{type(self).__name__} expects os.stat_result, got {type(st).__name__}"
            )
        return st

    def _timespec(self, st, field: str) -> Tuple[int, int]:
        """
        Read a timestamp field as a (seconds, nanoseconds) pair.

        The integer ``<field>_ns`` variant is preferred; the float field is
        split when that is all the platform offers.

        Raises:
            PlatformAssertionError: If the record carries neither variant
        """
        st = self._require_stat(st)

        ns = getattr(st, f'{field}_ns', None)
        if ns is not None:
            return divmod(ns, NANOSECONDS_PER_SECOND)

        value = getattr(st, field, None)
        if value is None:
            raise PlatformAssertionError(
                f"{type(self).__name__} reads {field}, which stat records on "
                f"{sys.platform!r} do not have; wrong strategy for this platform"
            )

        return float_to_timespec(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
