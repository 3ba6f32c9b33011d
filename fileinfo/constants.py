"""Project-wide constants (epoch sentinel, time units, platform family names)."""

from datetime import datetime, timezone

NANOSECONDS_PER_SECOND: int = 1_000_000_000
NANOSECONDS_PER_MICROSECOND: int = 1_000

# Returned as creation time where the platform keeps no birth time
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

PLATFORM_DARWIN = "darwin"
PLATFORM_LINUX = "linux"
PLATFORM_UNIX = "unix"
PLATFORM_WINDOWS = "windows"

PLATFORM_NAMES = (PLATFORM_DARWIN, PLATFORM_LINUX, PLATFORM_UNIX, PLATFORM_WINDOWS)

BSD_PLATFORM_PREFIXES = ("darwin", "freebsd", "openbsd", "netbsd", "dragonfly")
CTIME_PLATFORM_PREFIXES = ("linux", "cygwin", "aix", "sunos")
