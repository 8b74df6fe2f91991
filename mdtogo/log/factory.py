"""
Factory for creating and configuring loggers.

Loggers built here are not registered with the stdlib logging manager, so a
run never leaks handlers or levels into the next one.
"""

import collections
import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create a root logger with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("collected files", extra={"count": 3})
            [12:34:56,789] [I] collected files              [count:3] [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | collections.OrderedDict | None = None,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create a logger with its own console handler.

        Args:
            name: Logger name
            config: Logger configuration
            extra: Pre-populated extra fields to include in all log records
            stream: Output stream (defaults to sys.stderr)

        Returns:
            Configured logger instance
        """
        lg = Logger(name, config, extra)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        if config.level is not False:
            handler.setLevel(config.level)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to root's handlers.

        Examples:
            >>> derived = LoggerFactory.derive(root, "generator")
            >>> derived.name
            '/generator'
            >>> LoggerFactory.derive(root, ["generator", "parse"]).name
            '/generator/parse'

        Args:
            parent: Parent logger instance
            tags: Single tag string OR list of tag strings to form hierarchy

        Returns:
            Derived logger sharing the parent's configuration and handlers
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        lg = Logger(prefix + "/".join(tags), parent.config, dict(parent._extra))
        lg._root_logger = parent._root_logger or parent
        lg.parent = parent
        lg.propagate = False
        return lg
