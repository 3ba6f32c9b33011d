"""
Builds normalized FileMetadata records from raw stat data.

Timestamps and directory sizes are read through the platform stat strategy
selected at import time (see fileinfo.platforms).
"""

import logging
import os
import stat
from typing import Optional, Tuple, Union

from fileinfo import platforms
from fileinfo.exceptions import FileInfoError
from fileinfo.platforms.base import PlatformStatStrategy
from fileinfo.resolver import resolve
from fileinfo.types import FileMetadata, RawStat

logger = logging.getLogger(__name__)


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a file name into title and extension at the last dot.

    The extension keeps its leading dot; a name without a dot has an empty
    extension. Dotfiles such as '.bashrc' are all extension.

    Returns:
        (title, extension) with title + extension == name
    """
    index = name.rfind('.')
    if index < 0:
        return name, ''
    return name[:index], name[index:]


def is_directory_mode(mode: int) -> bool:
    """Return True for directories and for symbolic links of any kind."""
    return stat.S_ISDIR(mode) or stat.S_ISLNK(mode)


def clean_path(path: str) -> str:
    """Normalize separators and '.' / '..' segments; empty becomes '.'."""
    return os.path.normpath(path) if path else '.'


def build_metadata(
    path: Union[str, os.PathLike],
    strategy: Optional[PlatformStatStrategy] = None
) -> FileMetadata:
    """
    Stat a path and build its metadata.

    Symbolic links are followed, so a link is described by its target.

    Args:
        path: File or directory
        strategy: Stat strategy override; defaults to the platform's

    Returns:
        FileMetadata for the path

    Raises:
        FileNotFoundError: If the path does not exist
        OSError: If the stat call fails
    """
    path = os.fspath(path)
    raw = RawStat.from_path(path)
    return build_metadata_from_stat(raw, os.path.dirname(os.path.normpath(path)), strategy)


def build_metadata_from_stat(
    raw: Union[RawStat, os.DirEntry],
    containing_dir: Union[str, os.PathLike],
    strategy: Optional[PlatformStatStrategy] = None
) -> FileMetadata:
    """
    Build metadata from a stat record the caller already holds.

    Lets directory listings reuse the stat data of os.scandir entries
    instead of statting each file again.

    Args:
        raw: RawStat, or an os.DirEntry (read without following links)
        containing_dir: Directory that holds the file
        strategy: Stat strategy override; defaults to the platform's

    Returns:
        FileMetadata for the file

    Raises:
        PlatformAssertionError: If the stat record does not match the strategy
    """
    if strategy is None:
        strategy = platforms.STRATEGY
    if isinstance(raw, os.DirEntry):
        raw = RawStat.from_dir_entry(raw)

    st = raw.stat
    path = clean_path(os.fspath(containing_dir))

    try:
        absolute_path = resolve(path)
    except (OSError, FileInfoError) as e:
        logger.debug(f"Could not resolve {path}, keeping unresolved absolute path: {e}")
        absolute_path = os.path.abspath(path)

    title, extension = split_name(raw.name)

    return FileMetadata(
        name=raw.name,
        path=path,
        absolute_path=absolute_path,
        title=title,
        extension=extension,
        size=strategy.size(st, os.path.join(path, raw.name)),
        is_directory=is_directory_mode(st.st_mode),
        mode=st.st_mode,
        creation_time=strategy.creation_time(st),
        last_access_time=strategy.last_access_time(st),
        last_write_time=strategy.last_write_time(st),
    )
