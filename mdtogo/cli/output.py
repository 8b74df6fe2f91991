"""
Output abstraction for the mdtogo command.

Errors go to stderr through a rich console so they are highlighted on a
terminal and plain text everywhere else. Tests can swap in BufferedOutput
to inspect messages without capturing streams.
"""

from typing import Protocol, TextIO

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

MDTOGO_THEME = {
    "error": "red bold",
    "muted": "dim",
}


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def error(self, message: str) -> None:
        """Report an error message."""
        ...

    def hint(self, message: str) -> None:
        """Print a secondary, unstyled line (usage hints and such)."""
        ...


class ConsoleOutput:
    """
    Writer backed by a rich console on stderr.

    Example:
        out = ConsoleOutput()
        out.error("cannot read directory")

        # Custom stream for testing
        buffer = io.StringIO()
        out = ConsoleOutput(buffer)
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize with optional output stream.

        Args:
            stream: Output stream (defaults to sys.stderr, looked up at write time)
        """
        self._console = Console(
            file=stream,
            stderr=stream is None,
            theme=Theme(MDTOGO_THEME),
            highlight=False,
        )

    def error(self, message: str) -> None:
        self._console.print(f"[error]Error:[/error] {escape(message)}", soft_wrap=True)

    def hint(self, message: str) -> None:
        self._console.print(f"[muted]{escape(message)}[/muted]", soft_wrap=True)


class BufferedOutput:
    """
    Output writer that captures messages to a list.

    Example:
        out = BufferedOutput()
        out.error("boom")
        assert out.lines == ["Error: boom"]
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def error(self, message: str) -> None:
        self._lines.append(f"Error: {message}")

    def hint(self, message: str) -> None:
        self._lines.append(message)

    @property
    def lines(self) -> list[str]:
        """Get all output lines."""
        return self._lines.copy()

    @property
    def text(self) -> str:
        """Get all output as a single string with newlines."""
        return "\n".join(self._lines) + ("\n" if self._lines else "")
