"""
Platform stat strategies.

The strategy matching the running system is chosen once, when this package
is imported, and exposed as STRATEGY. FILEINFO_PLATFORM overrides the choice.
"""

import logging
import sys
from typing import Optional

from fileinfo import config
from fileinfo.constants import (
    BSD_PLATFORM_PREFIXES,
    CTIME_PLATFORM_PREFIXES,
    PLATFORM_DARWIN,
    PLATFORM_LINUX,
    PLATFORM_NAMES,
    PLATFORM_UNIX,
    PLATFORM_WINDOWS,
)
from fileinfo.exceptions import UnsupportedPlatformError
from fileinfo.platforms.base import PlatformStatStrategy, timespec_to_datetime
from fileinfo.platforms.darwin import DarwinStatStrategy
from fileinfo.platforms.unix import LinuxStatStrategy, UnixStatStrategy
from fileinfo.platforms.windows import WindowsStatStrategy

logger = logging.getLogger(__name__)

_STRATEGIES = {
    PLATFORM_DARWIN: DarwinStatStrategy,
    PLATFORM_LINUX: LinuxStatStrategy,
    PLATFORM_UNIX: UnixStatStrategy,
    PLATFORM_WINDOWS: WindowsStatStrategy,
}


def platform_family(system: Optional[str] = None) -> str:
    """
    Map a sys.platform value to the name of its stat strategy.

    Args:
        system: Value in the format of sys.platform. Defaults to the running system

    Returns:
        One of 'darwin', 'linux', 'unix', 'windows'
    """
    if system is None:
        system = sys.platform

    if system == 'win32':
        return PLATFORM_WINDOWS
    if system.startswith(BSD_PLATFORM_PREFIXES):
        return PLATFORM_DARWIN
    if system.startswith(CTIME_PLATFORM_PREFIXES):
        return PLATFORM_LINUX
    return PLATFORM_UNIX


def select_strategy(platform: Optional[str] = None) -> PlatformStatStrategy:
    """
    Build the stat strategy for a platform family.

    Args:
        platform: Strategy name ('darwin', 'linux', 'unix', 'windows').
            Defaults to the family of the running system

    Returns:
        Strategy instance

    Raises:
        UnsupportedPlatformError: If the name is not a known strategy
    """
    if platform is None:
        platform = platform_family()

    strategy_cls = _STRATEGIES.get(platform.lower())
    if strategy_cls is None:
        raise UnsupportedPlatformError(
            f"Unknown platform {platform!r}; expected one of {', '.join(PLATFORM_NAMES)}"
        )
    return strategy_cls()


STRATEGY: PlatformStatStrategy = select_strategy(config.PLATFORM_OVERRIDE)
logger.debug(f"Using {STRATEGY!r} for {sys.platform}")

__all__ = [
    "PlatformStatStrategy",
    "DarwinStatStrategy",
    "LinuxStatStrategy",
    "UnixStatStrategy",
    "WindowsStatStrategy",
    "STRATEGY",
    "platform_family",
    "select_strategy",
    "timespec_to_datetime",
]
