"""
Extraction of tagged help text from Markdown files.

Two comment forms are recognized, both keyed by Short, Long or Examples:

    <!--mdtogo:Long-->
    Content that also shows up in the rendered Markdown.
    <!--mdtogo-->

    <!--mdtogo:Long
    Content hidden from the rendered Markdown.
    -->

All visible-form regions are applied first, then all hidden-form regions;
for a field set more than once the last applied region wins.
"""

import re
from pathlib import Path

from ..exceptions import SourceReadError
from .model import DocField, ExtractedDoc
from .normalizer import clean_up_content

_FIELDS = "|".join(f.value for f in DocField)

# Whitespace as understood by the tag syntax: ASCII only, no vertical tab
_WS = r"[\t\n\f\r ]"

VISIBLE_TAG = re.compile(rf"<!--mdtogo:({_FIELDS})-->(.*?)<!--mdtogo-->", re.DOTALL)
HIDDEN_TAG = re.compile(rf"<!--mdtogo:({_FIELDS}){_WS}+?(.*?)-->", re.DOTALL)

# Characters trimmed from Short: Unicode white space, without the
# information separators U+001C..U+001F
SPACE_CHARS = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def find_regions(text: str) -> list[tuple[DocField, str]]:
    """Return (field, raw content) for every tagged region, in apply order."""
    matches = list(VISIBLE_TAG.finditer(text)) + list(HIDDEN_TAG.finditer(text))
    return [(DocField(m.group(1)), m.group(2)) for m in matches]


def extract(text: str) -> ExtractedDoc:
    """
    Build an ExtractedDoc from the tagged regions in ``text``.

    Short content is only trimmed; Long and Examples go through
    clean_up_content(). The record's name is left empty.
    """
    values = {}
    for field, content in find_regions(text):
        if field is DocField.SHORT:
            values[field.attr] = content.strip(SPACE_CHARS)
        else:
            values[field.attr] = clean_up_content(content)
    return ExtractedDoc(**values)


def _is_separator(ch: str) -> bool:
    """Word boundary rule: ASCII punctuation splits words, other symbols only if spaces."""
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdecimal():
        return False
    return ch in SPACE_CHARS


def _title(name: str) -> str:
    """Title-case the first letter of each word, leaving other letters alone."""
    out = []
    prev_sep = True
    for ch in name:
        titled = ch.title()
        # characters with no single-character title form (e.g. "ß") stay as they are
        out.append(titled if prev_sep and len(titled) == 1 else ch)
        prev_sep = _is_separator(ch)
    return "".join(out)


def doc_name(path: Path) -> str:
    """
    Derive a Go identifier prefix from the file's parent directory.

    Examples:
        >>> doc_name(Path("docs/my-command/README.md"))
        'MyCommand'
        >>> doc_name(Path("docs/foo_bar/README.md"))
        'Foo_bar'
    """
    parent = path.parent
    dirname = parent.name or parent.absolute().name
    return _title(dirname).replace("-", "")


def read_text(path: Path) -> str:
    """Read a file without newline translation, keeping undecodable bytes."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def parse_file(path: Path) -> ExtractedDoc:
    """
    Read and parse one Markdown file.

    Raises:
        SourceReadError: If the file cannot be read
    """
    try:
        text = read_text(path)
    except OSError as e:
        raise SourceReadError(f"cannot read file: {e.strerror or e}", path=path) from e

    return extract(text).with_name(doc_name(path), path)
