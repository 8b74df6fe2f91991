"""
Normalization of Long and Examples content.

The generated Go file stores help text in raw string literals, which cannot
contain a backtick. Backticks are therefore spliced in as string
concatenations, and fenced code blocks are turned into indented blocks.
"""

FENCE = "```"
CODE_INDENT = "  "
BACKTICK_ESCAPE = '` + "`" + `'


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing carriage return per line."""
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def escape_backticks(line: str) -> str:
    """Replace every backtick with a raw-string-safe concatenation."""
    return line.replace("`", BACKTICK_ESCAPE)


def clean_up_content(text: str) -> str:
    """
    Make extracted region text ready to embed in a Go raw string.

    Leading and trailing newlines are stripped, fence lines (lines starting
    with three backticks) toggle indentation of the lines between them and
    are dropped, and backticks are escaped. An unmatched fence leaves the
    remaining lines indented.

    Returns:
        The processed lines wrapped in a single leading and trailing newline.
    """
    lines = []
    indent = False
    for line in _split_lines(text.strip("\n")):
        if line.startswith(FENCE):
            indent = not indent
            continue

        if indent:
            line = CODE_INDENT + line

        lines.append(escape_backticks(line))

    return "\n" + "\n".join(lines) + "\n"
