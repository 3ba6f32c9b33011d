import logging
import os
import re
import sys
from typing import Optional

from fileinfo import config


class HomeDirectoryFilter(logging.Filter):
    """Filter to shorten the user's home directory to '~' in log records."""

    def __init__(self, home: Optional[str] = None):
        super().__init__()
        if home is None:
            home = os.path.expanduser('~')
        home = home.rstrip('/\\') if home else ''
        self.home = home if home not in ('', '~') else None
        # Whole paths only: '/home/alex' matches neither '/home/alexandra' nor '/srv/home/alex'
        self._pattern = re.compile(
            r'(?<![^\s\'"(\[=:])' + re.escape(home) + r'(?=$|[\\/\s\'"),\]])'
        ) if self.home else None

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace the home directory prefix in the message and its arguments."""
        if self.home is None:
            return True

        if isinstance(record.msg, str):
            record.msg = self._shorten(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._shorten(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._shorten(arg) for arg in record.args)

        return True

    def _shorten(self, value):
        """Shorten string and path-like values; leave everything else alone."""
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if isinstance(value, str):
            return self._pattern.sub('~', value)
        return value


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the logger to configure (e.g., 'fileinfo')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to FILEINFO_LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = config.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler.setFormatter(formatter)
    handler.addFilter(HomeDirectoryFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
