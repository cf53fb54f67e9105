"""Lazy depth-first traversal of directory trees."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from pathlib import Path

import structlog

from treeops.core.errors import FileOpsError
from treeops.files.paths import StrPath, to_system_independent_path

log = structlog.get_logger(__name__)


def _children(directory: Path) -> list[Path]:
    try:
        with os.scandir(directory) as it:
            names = sorted(entry.name for entry in it)
    except OSError as e:
        # Unreadable directories contribute no children
        log.debug("traversal.unreadable_directory", path=str(directory), error=str(e))
        return []
    return [directory / name for name in names]


def walk_pre_order(root: StrPath) -> Iterator[Path]:
    """Yield ``root`` then every entry below it, depth-first pre-order.

    Siblings are visited in name order. The root is descended even when it
    is a symlink to a directory; symlinked directories below it are yielded
    but not descended, which keeps the walk finite.
    """
    root = Path(root)
    yield root
    if not root.is_dir():
        return
    stack = list(reversed(_children(root)))
    while stack:
        current = stack.pop()
        yield current
        if current.is_dir() and not current.is_symlink():
            stack.extend(reversed(_children(current)))


class Traversal:
    """Restartable view over a tree walk.

    Every ``iter()`` walks the filesystem again, so changes made between
    iterations are visible and nothing is held in memory.
    """

    def __init__(self, root: StrPath, predicate: Callable[[Path], bool] | None = None) -> None:
        self._root = Path(root)
        self._predicate = predicate

    @property
    def root(self) -> Path:
        return self._root

    def __iter__(self) -> Iterator[Path]:
        for path in walk_pre_order(self._root):
            if self._predicate is None or self._predicate(path):
                yield path

    def __repr__(self) -> str:
        return f"Traversal({str(self._root)!r})"


def get_all_files(directory: StrPath) -> Traversal:
    """All regular files under ``directory``, depth-first pre-order."""
    return Traversal(directory, Path.is_file)


def _require_directory(base: Path) -> None:
    if not base.is_dir():
        raise FileOpsError.invalid_argument(
            f"'{base.absolute()}' must be a directory.", path=base
        )


def find(base: StrPath, pattern: re.Pattern[str] | str) -> list[Path]:
    """Paths under ``base`` (itself included) whose /-based form matches.

    The pattern is searched, not anchored, against the path as built from
    ``base``, so ``re.compile(r"\\.txt$")`` finds every ``.txt`` entry.
    """
    base = Path(base)
    _require_directory(base)
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return [
        path
        for path in walk_pre_order(base)
        if regex.search(to_system_independent_path(str(path)))
    ]


def find_by_name(base: StrPath, name: str) -> Path | None:
    """The last path under ``base`` named ``name``, in pre-order, or None."""
    base = Path(base)
    _require_directory(base)
    found: Path | None = None
    for path in walk_pre_order(base):
        if path.name == name:
            found = path
    return found
