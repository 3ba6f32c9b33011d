"""Canonicalizes user-supplied paths: tilde expansion, absolute path, symlinks."""

import logging
import os
from typing import Union

from fileinfo.exceptions import HomeDirectoryError, NotFoundError

logger = logging.getLogger(__name__)


def home_directory() -> str:
    """
    Get the current user's home directory.

    Returns:
        Home directory path

    Raises:
        HomeDirectoryError: If neither the environment nor the password
            database names a home directory
    """
    home = os.path.expanduser('~')
    if not home or home == '~':
        raise HomeDirectoryError("Cannot determine the current user's home directory")
    return home


def expand_tilde(path: str) -> str:
    """
    Replace a leading '~' with the home directory.

    Whatever follows the '~' is joined onto the home directory, so '~/x'
    and '~x' both land inside it.
    """
    if not path.startswith('~'):
        return path

    rest = path[1:].lstrip('/' + os.sep)
    home = home_directory()
    return os.path.join(home, rest) if rest else home


def resolve(path: Union[str, os.PathLike]) -> str:
    """
    Resolve a path to the absolute, symlink-free path of an existing file.

    Args:
        path: Path to resolve; may start with '~' and contain symbolic links

    Returns:
        Absolute physical path

    Raises:
        NotFoundError: If path is empty
        HomeDirectoryError: If '~' cannot be expanded
        FileNotFoundError: If the path or a link target does not exist
        OSError: If a path component cannot be statted
    """
    path = os.fspath(path)
    if not path:
        raise NotFoundError(path)

    expanded = expand_tilde(path)
    absolute = os.path.abspath(expanded)
    resolved = os.path.realpath(absolute, strict=True)

    os.stat(resolved)

    logger.debug(f"Resolved {path} -> {resolved}")
    return resolved
