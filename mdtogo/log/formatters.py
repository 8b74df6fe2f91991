"""
Log formatters for the logging layer.

Records are rendered as:

    [12:34:56,789] [I] wrote generated file        [path:out/docs.go] [/generator]

with structured ``extra`` fields shown as ``[key:value]`` and, when colors
are enabled, ANSI styling per level.
"""

import collections
import logging
import time
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants


def _get_extra(record: logging.LogRecord) -> dict[str, Any]:
    extra = getattr(record, "__mdtogo__extra", None)
    if not extra:
        return {}
    if isinstance(extra, collections.OrderedDict):
        return extra
    return {k: extra[k] for k in sorted(extra)}


def _quote(value: Any) -> str:
    """Escape % characters so values can be embedded in a format string."""
    return str(value).replace("%", "%%")


class PreFormatter(logging.Formatter):
    """
    Formatter that renders short HH:MM:SS,mmm timestamps.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        s = time.strftime("%H:%M:%S", self.converter(record.created))
        return s + f",{int(record.msecs):03d}"


class LogFormatter(logging.Formatter):
    """
    Log formatter with optional colors and structured field formatting.
    """

    def __init__(self, config: LogConfig):
        """
        Initialize the log formatter.

        Args:
            config: Logger configuration
        """
        super().__init__()
        self._config = config
        self._pre_formatter = PreFormatter(LogConstants.DEFAULT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log message
        """
        width = self._calculate_width(record)
        if self._config.colors:
            fmt = self._format_colored(record, width)
        else:
            fmt = self._format_plain(record, width)

        self._pre_formatter._fmt = fmt
        self._pre_formatter._style._fmt = fmt
        return self._pre_formatter.format(record)

    def _calculate_width(self, record: logging.LogRecord) -> int:
        """Calculate display width of "[time] [L] message"."""
        return 1 + 12 + 4 + 1 + 2 + len(record.getMessage())

    def _padding(self, width: int) -> str:
        return " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - width)

    def _format_plain(self, record: logging.LogRecord, width: int) -> str:
        fmt = LogConstants.DEFAULT_FORMAT + self._padding(width)
        fields = [f"[{k}:{_quote(v)}]" for k, v in _get_extra(record).items()]
        if fields:
            fmt += " ".join(fields) + " "
        return fmt + "[%(name)s]"

    def _format_colored(self, record: logging.LogRecord, width: int) -> str:
        col = ColorManager.get_color_for_level(record.levelno)
        bold = ColorManager.create_bold_color(col)
        col += "m"
        reset = ColorManager.RESET

        fmt = f"{col}[%(asctime)s] [{bold}%(levelname).1s{reset}{col}] "
        fmt += f"{bold}%(message)s{reset}{col}" + self._padding(width)
        for k, v in _get_extra(record).items():
            fmt += f"{k}[{bold}{_quote(v)}{reset}{col}] "

        gray = ColorManager.create_gray_level(9) + "m"
        fmt += f"{reset}{gray}[%(name)s]{reset}"
        return fmt
