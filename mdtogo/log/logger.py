"""
Logger class for the logging layer.
"""

import collections
import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]


class Logger(logging.Logger):
    """
    Logger with structured extra fields and a TRACE level.

    Extends the standard Python logger with:
    - Pre-populated extra fields merged into every record
    - A trace() method below DEBUG
    - "View" loggers that delegate to the root logger's handlers
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | collections.OrderedDict | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration (default LogConfig if None)
            extra: Pre-populated extra fields to include in all log records
        """
        if config is None:
            config = LogConfig()

        # level False disables logging entirely
        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = extra or {}
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record, attaching merged extra fields for the formatter."""
        merged: dict[str, Any] = dict(self._extra)
        if extra:
            merged.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        setattr(record, "__mdtogo__extra", merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log below DEBUG, e.g. the fields found in each parsed file."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        if self._logging_disabled:
            return False
        return super().isEnabledFor(level)

    def callHandlers(self, record: logging.LogRecord) -> None:
        """View loggers hand records to the root logger's handlers."""
        root = self._root_logger
        if root is None:
            super().callHandlers(record)
            return
        for handler in root.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
