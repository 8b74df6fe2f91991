#!/usr/bin/env python3
"""
mdtogo - generate Go help-text variables from Markdown.

Usage:
    mdtogo docs/commands/ internal/docs/generated/ --recursive=true
    mdtogo docs/ pkg/help/ --license=none
    mdtogo --help
"""

from mdtogo.cli.output import ConsoleOutput, OutputWriter
from mdtogo.cli.parser import USAGE, parse_args
from mdtogo.docs import DocsGenerator
from mdtogo.exceptions import MdtogoError, UsageError
from mdtogo.log import LogConfig, LoggerFactory


def main(argv: list[str] | None = None, out: OutputWriter | None = None) -> int:
    """
    Entry point for the mdtogo command.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        out: Where error messages go (defaults to stderr)

    Returns:
        Exit status: 0 on success, 1 on any error
    """
    out = out if out is not None else ConsoleOutput()
    try:
        options = parse_args(argv)
        lg = LoggerFactory.create_root(LogConfig.from_params(options.log_level))
        DocsGenerator(options.config, lg).run()
    except UsageError as e:
        out.error(str(e))
        out.hint(f"Usage: {USAGE}")
        return 1
    except MdtogoError as e:
        out.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
