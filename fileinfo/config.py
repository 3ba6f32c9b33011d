"""Configuration settings read from the environment."""

import os


PLATFORM_OVERRIDE = os.environ.get("FILEINFO_PLATFORM", "").strip().lower() or None

LOG_LEVEL = os.environ.get("FILEINFO_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper()
