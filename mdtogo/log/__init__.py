"""
Logging layer for mdtogo.

Extends Python's standard logging with:
- A custom TRACE level for per-tag diagnostics
- Structured logging with extra fields rendered as [key:value]
- Colored console output with ANSI escape sequences
- Derived "view" loggers sharing the root's handlers
- Complete logging disable functionality (level=False or level="false")
"""

import logging

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .logger import Logger

logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]


def create_root_lg(level: str | int | bool = "warning", colors: bool | None = None) -> Logger:
    """
    Create a root logger writing to stderr.

    Args:
        level: Log level name, numeric value, or False to disable logging
        colors: Force colors on/off (None to auto-detect)
    """
    return LoggerFactory.create_root(LogConfig.from_params(level, colors=colors))


__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "Logger",
    "LoggerFactory",
    "create_root_lg",
]
