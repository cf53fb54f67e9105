"""Reading, writing and hashing file contents."""

from __future__ import annotations

import hashlib
import re
from pathlib import Path

from treeops.core.errors import FileOpsError
from treeops.files.paths import StrPath
from treeops.files.tree import mkdirs

DEFAULT_CHUNK_SIZE = 64 * 1024

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def load_file_with_unix_line_separators(file: StrPath) -> str:
    """Read a UTF-8 text file with every line break turned into ``\\n``.

    The file is read as a list of lines (``\\r\\n``, ``\\r`` and ``\\n`` all
    end a line) joined back with ``\\n``, so a final line break is dropped:
    ``"a\\r\\nb\\r\\n"`` loads as ``"a\\nb"``.
    """
    try:
        with open(file, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpsError.io_failure(f"Failed to read {file}", e, path=file) from e
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return "\n".join(lines)


def sha1(file: StrPath, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Lowercase hex SHA-1 of the file's bytes."""
    if chunk_size <= 0:
        raise FileOpsError.invalid_argument(
            f"chunk_size must be positive, got {chunk_size}", chunk_size=chunk_size
        )
    digest = hashlib.sha1()
    try:
        with open(file, "rb") as f:
            while chunk := f.read(chunk_size):
                digest.update(chunk)
    except OSError as e:
        raise FileOpsError.io_failure(f"Failed to hash {file}", e, path=file) from e
    return digest.hexdigest()


def write_to_file(file: StrPath, content: str) -> None:
    """Create or replace a UTF-8 text file, creating parent directories.

    ``content`` is written verbatim; no newline translation happens.
    """
    file = Path(file)
    mkdirs(file.parent)
    try:
        with open(file, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileOpsError.io_failure(f"Failed to write {file}", e, path=file) from e


def create_file(file: StrPath, content: str) -> None:
    """Create a new text file. Fails if ``file`` already exists."""
    file = Path(file)
    if file.exists() or file.is_symlink():
        raise FileOpsError.already_exists(file)
    write_to_file(file, content)
