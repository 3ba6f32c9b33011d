"""Shared data type definitions (FileMetadata, RawStat)."""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class RawStat:
    """
    Raw file status as returned by the operating system.

    Attributes:
        name: Base name of the file the record describes
        stat: Native stat record; its platform-specific fields are read
            by the active stat strategy
    """
    name: str
    stat: os.stat_result

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike], follow_symlinks: bool = True) -> 'RawStat':
        """
        Stat a path.

        Args:
            path: File or directory to stat
            follow_symlinks: Stat the link target instead of the link itself

        Returns:
            RawStat named after the last path component

        Raises:
            FileNotFoundError: If the path does not exist
            OSError: If the stat call fails
        """
        path = os.fspath(path)
        st = os.stat(path, follow_symlinks=follow_symlinks)
        cleaned = os.path.normpath(path)
        # The root has no last component; it is named after itself
        return cls(name=os.path.basename(cleaned) or cleaned, stat=st)

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> 'RawStat':
        """
        Wrap an entry obtained from os.scandir without statting twice.

        Links are not followed, matching what a directory listing reports.
        """
        return cls(name=entry.name, stat=entry.stat(follow_symlinks=False))


@dataclass(frozen=True)
class FileMetadata:
    """
    Normalized metadata for a single file or directory.

    Attributes:
        name: Base file name
        path: Cleaned path of the containing directory
        absolute_path: Resolved containing directory; best effort, may be unresolved
        title: Name without its extension
        extension: Suffix from the last dot, including the dot, or ''
        size: Length in bytes; platform-dependent for directories
        is_directory: True for directories and symbolic links
        mode: Raw st_mode bits
        creation_time: Creation time, or the epoch when unavailable
        last_access_time: Last access time
        last_write_time: Last modification time
    """
    name: str
    path: str
    absolute_path: str
    title: str
    extension: str
    size: int
    is_directory: bool
    mode: int
    creation_time: datetime
    last_access_time: datetime
    last_write_time: datetime
