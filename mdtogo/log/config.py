"""
Configuration for the logging layer.

LogConfig is immutable; a new instance is built whenever settings change.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def _should_use_color() -> bool:
    """Determine if colored log output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return sys.stderr.isatty()


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for root loggers.

    Attributes:
        level: Numeric log level, or False to disable logging entirely
        colors: Whether ANSI colors are emitted
    """

    level: int | bool = logging.WARNING
    colors: bool = False

    @staticmethod
    def resolve_level(level: str | int | bool) -> int | bool:
        """
        Resolve a level given as name, number or boolean.

        Raises:
            InvalidLogLevelError: If the name is not a known level
        """
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, int):
            return level
        if level.isnumeric():
            return int(level)
        name = level.lower()
        if name in LogConstants.LEVEL_NAMES:
            return LogConstants.LEVEL_NAMES[name]
        raise InvalidLogLevelError(level)

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        colors: bool | None = None,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output (None to auto-detect)

        Returns:
            LogConfig instance
        """
        return cls(
            level=cls.resolve_level(level),
            colors=_should_use_color() if colors is None else colors,
        )
