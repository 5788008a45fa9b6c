"""Configuration utilities for the infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


def load_env(env_file: Optional[str] = None) -> bool:
    """
    Load a .env file into the process environment.

    Existing environment variables win over values from the file.

    Args:
        env_file: Explicit path; defaults to ``.env`` in the working directory

    Returns:
        True if a file was found and loaded
    """
    path = Path(env_file) if env_file else Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def get_log_level() -> str:
    """
    Get log level.

    Returns:
        Upper-cased level from VOICELOG_LOG_LEVEL, defaults to "WARNING"
        (also used for unrecognized values)
    """
    level = os.getenv("VOICELOG_LOG_LEVEL", "WARNING").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


def get_log_format() -> str:
    """
    Get log renderer.

    Returns:
        "console" or "json" from VOICELOG_LOG_FORMAT, defaults to "console"
    """
    fmt = os.getenv("VOICELOG_LOG_FORMAT", "console").strip().lower()
    return fmt if fmt in LOG_FORMATS else "console"
