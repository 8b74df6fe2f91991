"""
Exception hierarchy for mdtogo.

Every error the generator can report derives from MdtogoError, so callers
(the CLI in particular) can catch them with a single except clause. All of
them are fatal: the run stops before the output file is written.
"""

from typing import Any


class MdtogoError(Exception):
    """
    Base exception for all mdtogo errors.

    Example:
        try:
            DocsGenerator(config).run()
        except MdtogoError as e:
            lg.error(f"generation failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UsageError(MdtogoError):
    """
    Command-line usage errors.

    Examples:
        - Missing SOURCE_DIR or DEST_DIR
        - Invalid boolean value for --recursive
    """

    pass


class SourceReadError(MdtogoError):
    """
    Raised when the source directory or one of its files cannot be read.
    """

    pass


class LicenseReadError(SourceReadError):
    """Raised when the license header file cannot be read."""

    pass


class DestWriteError(MdtogoError):
    """Raised when the generated file cannot be written."""

    pass
