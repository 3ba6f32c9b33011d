"""Cross-platform file metadata: path resolution and normalized stat records."""

from fileinfo.exceptions import (
    FileInfoError,
    HomeDirectoryError,
    NotFoundError,
    PlatformAssertionError,
    UnsupportedPlatformError,
)
from fileinfo.metadata import build_metadata, build_metadata_from_stat
from fileinfo.platforms import (
    STRATEGY,
    DarwinStatStrategy,
    LinuxStatStrategy,
    PlatformStatStrategy,
    UnixStatStrategy,
    WindowsStatStrategy,
    select_strategy,
)
from fileinfo.predicates import is_dir, is_empty, is_file
from fileinfo.resolver import resolve
from fileinfo.schemas import FileMetadataResponse
from fileinfo.types import FileMetadata, RawStat

__version__ = "0.1.0"

__all__ = [
    "FileInfoError",
    "HomeDirectoryError",
    "NotFoundError",
    "PlatformAssertionError",
    "UnsupportedPlatformError",
    "build_metadata",
    "build_metadata_from_stat",
    "STRATEGY",
    "DarwinStatStrategy",
    "LinuxStatStrategy",
    "PlatformStatStrategy",
    "UnixStatStrategy",
    "WindowsStatStrategy",
    "select_strategy",
    "is_dir",
    "is_empty",
    "is_file",
    "resolve",
    "FileMetadataResponse",
    "FileMetadata",
    "RawStat",
]
