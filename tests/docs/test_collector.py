"""Tests for docs/collector.py."""

import pytest

from mdtogo.docs.collector import collect_files
from mdtogo.exceptions import SourceReadError


@pytest.fixture
def nested_tree(write_tree):
    return write_tree(
        {
            "src/b.md": "",
            "src/a.md": "",
            "src/notes.txt": "",
            "src/a/z.md": "",
            "src/c/d.md": "",
            "src/c/deeper/e.md": "",
        }
    ) / "src"


@pytest.mark.integration
class TestCollectFiles:
    """Test file collection."""

    def test_top_level_sorted(self, nested_tree):
        result = collect_files(nested_tree)
        assert result == [nested_tree / "a.md", nested_tree / "b.md"]

    def test_recursive_walk_order(self, nested_tree):
        result = collect_files(nested_tree, recursive=True)
        rel = [p.relative_to(nested_tree).as_posix() for p in result]
        assert rel == ["a/z.md", "a.md", "b.md", "c/d.md", "c/deeper/e.md"]

    def test_other_extension(self, nested_tree):
        assert collect_files(nested_tree, extension=".txt") == [
            nested_tree / "notes.txt"
        ]

    def test_directory_with_extension_skipped(self, write_tree):
        root = write_tree({"src/dir.md/inner.md": "", "src/x.md": ""}) / "src"
        assert collect_files(root) == [root / "x.md"]
        assert collect_files(root, recursive=True) == [
            root / "dir.md" / "inner.md",
            root / "x.md",
        ]

    def test_empty_directory(self, tmp_path):
        assert collect_files(tmp_path) == []

    @pytest.mark.parametrize("recursive", [False, True])
    def test_missing_source_raises(self, tmp_path, recursive):
        with pytest.raises(SourceReadError, match="cannot read directory"):
            collect_files(tmp_path / "nope", recursive=recursive)

    def test_source_is_a_file_raises(self, write_tree):
        root = write_tree({"file.md": ""})
        with pytest.raises(SourceReadError):
            collect_files(root / "file.md")

    def test_broken_link_collected(self, write_tree):
        root = write_tree({"src/a.md": ""}) / "src"
        (root / "b.md").symlink_to(root / "missing.md")

        assert collect_files(root) == [root / "a.md", root / "b.md"]
        assert collect_files(root, recursive=True) == [root / "a.md", root / "b.md"]
