"""Recursive copy, delete and directory creation.

All operations are synchronous and fail fast. Precondition violations
raise ``FileOpsError(FILE_INVALID_ARGUMENT)``; anything the OS refuses is
re-raised as ``FileOpsError(FILE_IO_FAILURE)`` chained to the ``OSError``.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import structlog

from treeops.core.errors import FileOpsError
from treeops.files.models import FileKind, file_kind
from treeops.files.paths import StrPath, is_same_file

log = structlog.get_logger(__name__)


def _list_children(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise FileOpsError.io_failure(f"Cannot list {directory}", e, path=directory) from e


# =============================================================================
# Delete
# =============================================================================


def delete_recursively_if_exists(path: StrPath) -> None:
    """Delete ``path`` and everything under it. Missing paths are fine.

    Symlinks are removed, never followed.
    """
    path = Path(path)
    try:
        if path.is_symlink() or (path.exists() and not path.is_dir()):
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            return
    except FileNotFoundError:
        return
    except OSError as e:
        raise FileOpsError.io_failure(f"Failed to delete {path}", e, path=path) from e
    log.debug("tree.deleted", path=str(path))


def delete_path(path: StrPath) -> None:
    """Recursively delete a path that may or may not exist."""
    delete_recursively_if_exists(path)


def delete_directory_contents(directory: StrPath) -> None:
    """Delete everything inside ``directory`` but keep the directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise FileOpsError.invalid_argument(f"{directory} is not a directory.", path=directory)
    for child in _list_children(directory):
        delete_path(child)


def delete(path: StrPath) -> None:
    """Delete an existing file or empty directory."""
    path = Path(path)
    try:
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    except OSError as e:
        raise FileOpsError.io_failure(f"Failed to delete {path}", e, path=path) from e


def delete_if_exists(path: StrPath) -> bool:
    """Delete a file or empty directory if present.

    Returns:
        True if something was deleted.
    """
    path = Path(path)
    if not (path.exists() or path.is_symlink()):
        return False
    try:
        delete(path)
    except FileOpsError as e:
        if isinstance(e.__cause__, FileNotFoundError):
            return False
        raise
    return True


def clean_output_dir(path: StrPath) -> None:
    """Make ``path`` an empty directory.

    A directory has its contents removed; for a symlink to a directory the
    link is kept and its target is emptied. Anything else at ``path`` is
    deleted and replaced with a new directory. A missing path is created.
    """
    path = Path(path)
    if path.is_dir():
        delete_directory_contents(path)
        log.debug("tree.clean_output_dir", path=str(path), action="emptied")
        return
    if path.exists() or path.is_symlink():
        delete_path(path)
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise FileOpsError.io_failure(f"Could not create empty folder {path}", e, path=path) from e
    log.debug("tree.clean_output_dir", path=str(path), action="created")


# =============================================================================
# Create / rename
# =============================================================================


def mkdirs(path: StrPath) -> Path:
    """Create a directory and its parents if needed. Returns ``path``.

    Safe to call concurrently on the same path: a directory that already
    exists (or appears meanwhile) counts as success.
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        if path.is_dir():
            return path
        raise FileOpsError.io_failure(f"Cannot create directory {path}", e, path=path) from e
    return path


def rename_to(src: StrPath, dst: StrPath) -> None:
    try:
        os.rename(src, dst)
    except OSError as e:
        raise FileOpsError.io_failure(
            f"Failed to rename {Path(src).absolute()} to {dst}", e, src=src, dst=dst
        ) from e


# =============================================================================
# Copy
# =============================================================================


def copy_file(src: StrPath, dst: StrPath) -> None:
    """Copy a regular file, keeping mode and timestamps. Overwrites ``dst``.

    Copying a file onto itself (same path, hard link or symlink) does nothing.
    """
    if os.path.exists(dst) and is_same_file(src, dst):
        return
    try:
        shutil.copyfile(src, dst)
        shutil.copystat(src, dst)
    except OSError as e:
        raise FileOpsError.io_failure(f"Failed to copy {src} to {dst}", e, src=src, dst=dst) from e


def copy_file_to_directory(src: StrPath, directory: StrPath) -> None:
    """Copy ``src`` into ``directory`` under the same name."""
    src = Path(src)
    copy_file(src, Path(directory) / src.name)


def copy_directory(src: StrPath, dst: StrPath) -> None:
    """Copy a directory tree, merging into ``dst`` if it already exists.

    Files from ``src`` overwrite files with the same relative path in ``dst``.
    Files only present in ``dst`` are left alone.

    Raises:
        FileOpsError(FILE_INVALID_ARGUMENT): ``src`` is not a directory, or
            ``dst`` exists and is not a directory.
        FileOpsError(FILE_UNSUPPORTED_CHILD_TYPE): a child of ``src`` is
            neither a file nor a directory.
    """
    src = Path(src)
    dst = Path(dst)
    if not src.is_dir():
        raise FileOpsError.invalid_argument("Source path is not a directory.", path=src)
    if dst.exists() and not dst.is_dir():
        raise FileOpsError.invalid_argument(
            "Destination path exists and is not a directory.", path=dst
        )
    mkdirs(dst)
    for child in _list_children(src):
        kind = file_kind(child)
        if kind is FileKind.REGULAR_FILE:
            copy_file_to_directory(child, dst)
        elif kind is FileKind.DIRECTORY:
            copy_directory_to_directory(child, dst)
        else:
            raise FileOpsError.unsupported_child_type(child.absolute())
    log.debug("tree.copy_directory", src=str(src), dst=str(dst))


def copy_directory_to_directory(src: StrPath, directory: StrPath) -> None:
    """Copy ``src`` as ``directory/<src name>``."""
    src = Path(src)
    copy_directory(src, Path(directory) / src.name)


def copy_directory_content_to_directory(src: StrPath, dst: StrPath) -> None:
    """Replicate the whole tree under ``src`` below ``dst``.

    ``dst`` is created if needed. Entries that are neither files nor
    directories are skipped.
    """
    src = Path(src)
    dst = Path(dst)
    if not src.is_dir():
        raise FileOpsError.invalid_argument("Source path is not a directory.", path=src)
    for child in _list_children(src):
        kind = file_kind(child)
        if kind is FileKind.DIRECTORY:
            destination = mkdirs(dst / child.name)
            copy_directory_content_to_directory(child, destination)
        elif kind is FileKind.REGULAR_FILE:
            copy_file_to_directory(child, mkdirs(dst))
        else:
            log.debug("tree.copy_skipped", path=str(child), kind=kind.value)
