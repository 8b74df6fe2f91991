"""
Record types produced by the tag parser.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DocField(str, Enum):
    """Field identifiers recognized in mdtogo tags."""

    SHORT = "Short"
    LONG = "Long"
    EXAMPLES = "Examples"

    @property
    def attr(self) -> str:
        """Attribute name on ExtractedDoc."""
        return self.value.lower()


@dataclass(frozen=True)
class ExtractedDoc:
    """
    Help text extracted from one Markdown file.

    Empty strings mean the corresponding tag was not present in the source.
    """

    name: str = ""
    short: str = ""
    long: str = ""
    examples: str = ""
    path: Path | None = None

    def get(self, field: DocField) -> str:
        return getattr(self, field.attr)

    def with_name(self, name: str, path: Path | None = None) -> ExtractedDoc:
        """Copy of this record attributed to a variable prefix and source file."""
        return dataclasses.replace(self, name=name, path=path)

    @property
    def is_empty(self) -> bool:
        return not (self.short or self.long or self.examples)
