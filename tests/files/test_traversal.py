"""Tests for depth-first traversal, get_all_files and find."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from treeops.core.errors import ErrorCode, FileOpsError
from treeops.files.traversal import Traversal, find, find_by_name, get_all_files, walk_pre_order


def _rel(root: Path, paths: list[Path]) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


class TestWalkPreOrder:
    """walk_pre_order ordering."""

    def test_pre_order_sorted_siblings(self, sample_tree: Path) -> None:
        assert _rel(sample_tree, list(walk_pre_order(sample_tree))) == [
            ".",
            "a.txt",
            "other",
            "other/a.txt",
            "sub",
            "sub/b.txt",
            "sub/deep",
            "sub/deep/c.bin",
        ]

    def test_file_root_yields_itself(self, sample_tree: Path) -> None:
        assert list(walk_pre_order(sample_tree / "a.txt")) == [sample_tree / "a.txt"]

    def test_symlinked_directory_not_descended(self, sample_tree: Path) -> None:
        loop = sample_tree / "sub" / "loop"
        try:
            loop.symlink_to(sample_tree, target_is_directory=True)
        except OSError:
            pytest.skip("Cannot create symlinks on this system")

        walked = list(walk_pre_order(sample_tree))

        assert loop in walked
        assert not any(loop in p.parents for p in walked)


class TestSymlinkedBase:
    """A base directory reached through a symlink is walked like the real one."""

    @pytest.fixture
    def link(self, sample_tree: Path, tmp_path: Path) -> Path:
        link = tmp_path / "tree-link"
        try:
            link.symlink_to(sample_tree, target_is_directory=True)
        except OSError:
            pytest.skip("Cannot create symlinks on this system")
        return link

    def test_walk_descends_root(self, link: Path) -> None:
        assert _rel(link, list(walk_pre_order(link)))[:3] == [".", "a.txt", "other"]

    def test_get_all_files(self, link: Path) -> None:
        assert _rel(link, list(get_all_files(link))) == [
            "a.txt",
            "other/a.txt",
            "sub/b.txt",
            "sub/deep/c.bin",
        ]

    def test_find(self, link: Path) -> None:
        assert _rel(link, find(link, r"\.txt$")) == ["a.txt", "other/a.txt", "sub/b.txt"]

    def test_find_by_name(self, link: Path) -> None:
        assert find_by_name(link, "b.txt") == link / "sub" / "b.txt"


class TestGetAllFiles:
    """get_all_files is a restartable file-only traversal."""

    def test_only_regular_files(self, sample_tree: Path) -> None:
        assert _rel(sample_tree, list(get_all_files(sample_tree))) == [
            "a.txt",
            "other/a.txt",
            "sub/b.txt",
            "sub/deep/c.bin",
        ]

    def test_returns_traversal(self, sample_tree: Path) -> None:
        files = get_all_files(sample_tree)
        assert isinstance(files, Traversal)
        assert files.root == sample_tree

    def test_restartable_and_sees_changes(self, sample_tree: Path) -> None:
        files = get_all_files(sample_tree)
        first = list(files)
        (sample_tree / "z.txt").write_text("late")
        second = list(files)

        assert len(second) == len(first) + 1
        assert second[-1] == sample_tree / "z.txt"

    def test_is_lazy(self, sample_tree: Path) -> None:
        iterator = iter(get_all_files(sample_tree))
        assert next(iterator) == sample_tree / "a.txt"

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(get_all_files(tmp_path)) == []


class TestFind:
    """find by pattern and by name."""

    def test_pattern_matches_independent_form(self, sample_tree: Path) -> None:
        found = find(sample_tree, re.compile(r"\.txt$"))
        assert _rel(sample_tree, found) == ["a.txt", "other/a.txt", "sub/b.txt"]

    def test_pattern_uses_forward_slashes(self, sample_tree: Path) -> None:
        found = find(sample_tree, re.compile(r"sub/deep"))
        assert _rel(sample_tree, found) == ["sub/deep", "sub/deep/c.bin"]

    def test_string_pattern_compiled(self, sample_tree: Path) -> None:
        assert _rel(sample_tree, find(sample_tree, r"c\.bin$")) == ["sub/deep/c.bin"]

    def test_pattern_no_match(self, sample_tree: Path) -> None:
        assert find(sample_tree, re.compile(r"\.class$")) == []

    def test_pattern_base_not_directory(self, sample_tree: Path) -> None:
        with pytest.raises(FileOpsError) as exc_info:
            find(sample_tree / "a.txt", re.compile("."))
        assert exc_info.value.code == ErrorCode.FILE_INVALID_ARGUMENT
        assert "must be a directory" in exc_info.value.message

    def test_name_returns_last_in_pre_order(self, sample_tree: Path) -> None:
        assert find_by_name(sample_tree, "a.txt") == sample_tree / "other" / "a.txt"

    def test_name_unique(self, sample_tree: Path) -> None:
        assert find_by_name(sample_tree, "c.bin") == sample_tree / "sub" / "deep" / "c.bin"

    def test_name_missing(self, sample_tree: Path) -> None:
        assert find_by_name(sample_tree, "nope.txt") is None

    def test_name_matches_directories(self, sample_tree: Path) -> None:
        assert find_by_name(sample_tree, "deep") == sample_tree / "sub" / "deep"

    def test_name_base_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileOpsError):
            find_by_name(tmp_path / "missing", "x")
