"""
Argument parsing for the mdtogo command.

Turns argv into a GeneratorConfig plus logging settings. Usage problems are
raised as UsageError instead of argparse's default exit status 2, so every
failure of the command exits with status 1.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from .. import __version__
from ..docs import GeneratorConfig, License
from ..exceptions import UsageError
from ..log import LogConstants

USAGE = "mdtogo SOURCE_MD_DIR/ DEST_GO_DIR/ [--recursive=true] [--license=license.txt|none]"

DESCRIPTION = """\
Generate a docs.go file under DEST_GO_DIR containing string variables read
from the *.md files in SOURCE_MD_DIR. Variables are named after the
directory holding each file and filled from <!--mdtogo:Short-->,
<!--mdtogo:Long--> and <!--mdtogo:Examples--> comment regions."""

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def parse_bool(value: str) -> bool:
    """Parse a boolean option value."""
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


class DefaultsHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter that appends default values to option help."""

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default is not argparse.SUPPRESS and action.default is not None:
            return help_text + f" (default: {action.default})"
        return help_text


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser raising UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


@dataclass(frozen=True)
class CLIOptions:
    """Parsed command line."""

    config: GeneratorConfig
    log_level: str


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="mdtogo",
        usage=USAGE,
        description=DESCRIPTION,
        formatter_class=DefaultsHelpFormatter,
    )
    parser.add_argument("source", metavar="SOURCE_MD_DIR", help="directory of .md files")
    parser.add_argument("dest", metavar="DEST_GO_DIR", help="directory for docs.go")
    parser.add_argument(
        "--recursive",
        type=parse_bool,
        default=False,
        metavar="BOOL",
        help="scan SOURCE_MD_DIR recursively for .md files",
    )
    parser.add_argument(
        "--license",
        default=None,
        metavar="PATH|none",
        help='license header file, or "none" to omit the header '
        "(a built-in header is used when unset)",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=list(LogConstants.LEVEL_NAMES),
        help="log verbosity",
    )
    parser.add_argument(
        "--version", action="version", version=f"mdtogo {__version__}"
    )
    return parser


def parse_args(argv: list[str] | None = None) -> CLIOptions:
    """
    Parse command-line arguments.

    Raises:
        UsageError: On missing or invalid arguments
    """
    args = create_parser().parse_args(argv)
    config = GeneratorConfig(
        source=Path(args.source),
        dest=Path(args.dest),
        recursive=args.recursive,
        license=License.parse(args.license),
    )
    return CLIOptions(config=config, log_level=args.log_level)
