"""
Fixtures for building Markdown source trees.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

SETUP_MD = """\
<!--mdtogo:Short-->
One-line summary
<!--mdtogo-->
<!--mdtogo:Long
Detailed text with a `code` word
-->
"""


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """
    Create files under tmp_path from a {relative path: content} mapping.

    Returns:
        Function returning the tree root (tmp_path)

    Example:
        root = write_tree({"guides/setup.md": "..."})
    """

    def _write(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _write


@pytest.fixture
def guides_tree(write_tree: Callable[[dict[str, str]], Path]) -> Path:
    """Source tree with guides/setup.md holding a Short and a hidden Long."""
    root = write_tree({"guides/setup.md": SETUP_MD})
    return root / "guides"
