"""Existence predicates built on the same directory rule as FileMetadata."""

import os
from typing import Optional, Union

from fileinfo.metadata import is_directory_mode


def _stat(path: Union[str, os.PathLike]) -> Optional[os.stat_result]:
    path = os.fspath(path)
    if not path:
        return None
    try:
        return os.stat(path)
    except OSError:
        return None


def is_file(path: Union[str, os.PathLike]) -> bool:
    """
    Check that a path exists and is not directory-like.

    Returns:
        True for existing files, False for directories, links and missing paths
    """
    st = _stat(path)
    return st is not None and not is_directory_mode(st.st_mode)


def is_dir(path: Union[str, os.PathLike]) -> bool:
    """
    Check that a path exists and is directory-like.

    Returns:
        True for existing directories, False otherwise
    """
    st = _stat(path)
    return st is not None and is_directory_mode(st.st_mode)


def is_empty(path: Union[str, os.PathLike]) -> bool:
    """
    Check whether a file has zero length or a directory has no entries.

    Returns:
        False for missing paths and for anything that cannot be read
    """
    st = _stat(path)
    if st is None:
        return False
    if not is_directory_mode(st.st_mode):
        return st.st_size == 0

    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return False
