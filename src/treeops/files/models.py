"""File kind classification."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path


class FileKind(str, Enum):
    """What a path currently refers to on disk (symlinks followed)."""

    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
    OTHER = "other"  # device, fifo, socket, dangling symlink


def file_kind(path: str | os.PathLike[str]) -> FileKind:
    p = Path(path)
    if p.is_file():
        return FileKind.REGULAR_FILE
    if p.is_dir():
        return FileKind.DIRECTORY
    if p.exists() or p.is_symlink():
        return FileKind.OTHER
    return FileKind.MISSING
