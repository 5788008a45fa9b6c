"""
structlog setup for hosts.

The library logs through stdlib loggers and never configures them, so an
unconfigured host gets stdlib defaults (warnings on stderr, nothing on
stdout). A host (the CLI, a web service) calls ``configure_logging`` once
at startup to render structlog events on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from voicelog.infrastructure.config import LOG_LEVELS, get_log_format, get_log_level

HANDLER_NAME = "voicelog"


def _install_handler(level: int) -> None:
    """Attach a single stderr handler to the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog to render to stderr.

    Args:
        level: Log level name; defaults to VOICELOG_LOG_LEVEL
        fmt: "console" or "json"; defaults to VOICELOG_LOG_FORMAT
    """
    level_name = (level or get_log_level()).upper()
    if level_name not in LOG_LEVELS:
        level_name = "WARNING"
    numeric_level = logging.getLevelName(level_name)
    renderer_name = fmt or get_log_format()

    renderer: structlog.typing.Processor
    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    _install_handler(numeric_level)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
