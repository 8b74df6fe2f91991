"""
Collection of Markdown files from the source directory.
"""

from collections.abc import Iterator
from pathlib import Path

from ..exceptions import SourceReadError

DEFAULT_EXTENSION = ".md"


def _sorted_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceReadError(
            f"cannot read directory: {e.strerror or e}", path=directory
        ) from e


def _walk(directory: Path) -> Iterator[Path]:
    """Yield files depth-first, visiting each directory's entries by name."""
    for entry in _sorted_entries(directory):
        if entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry)
        else:
            yield entry


def collect_files(
    source: Path, recursive: bool = False, extension: str = DEFAULT_EXTENSION
) -> list[Path]:
    """
    List the files under ``source`` whose suffix is ``extension``.

    Args:
        source: Directory to scan
        recursive: Descend into subdirectories
        extension: File suffix to match, including the dot

    Returns:
        Matching file paths in traversal order

    Raises:
        SourceReadError: If a directory cannot be listed
    """
    source = Path(source)
    if recursive:
        entries: Iterator[Path] | list[Path] = _walk(source)
    else:
        entries = _sorted_entries(source)

    # broken links are kept and fail when read
    return [p for p in entries if p.suffix == extension and not p.is_dir()]
