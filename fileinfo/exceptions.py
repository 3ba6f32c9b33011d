"""Custom exception classes for fileinfo."""

import errno
import os


class FileInfoError(Exception):
    """
    Base exception class for all recoverable fileinfo errors.
    """
    pass


class NotFoundError(FileInfoError, FileNotFoundError):
    """
    Raised when a path is empty and therefore cannot name any file.

    Missing paths surface as the built-in FileNotFoundError raised by the
    OS call itself, so ``except FileNotFoundError`` catches both.
    """

    def __init__(self, path: str = ""):
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), path)


class HomeDirectoryError(FileInfoError):
    """
    Raised when a leading '~' cannot be expanded to the user's home directory.
    """
    pass


class UnsupportedPlatformError(FileInfoError, ValueError):
    """
    Raised when FILEINFO_PLATFORM names no known stat strategy.
    """
    pass


class PlatformAssertionError(AssertionError):
    """
    Raised when a raw stat record does not have the shape the active
    platform strategy reads.

    Never expected at runtime: it means the strategy does not match the
    platform that produced the record.
    """
    pass
