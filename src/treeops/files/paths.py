"""Path string helpers and identity checks.

Pure functions, no filesystem mutation. Every helper that renders a
separator takes ``sep``; ``None`` means the host separator.
"""

from __future__ import annotations

import hashlib
import os
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from treeops.core.errors import FileOpsError

StrPath = str | os.PathLike[str]

# (absolute jar path, name without extension) -> directory name or None
JarLayout = Callable[[Path, str], str | None]

_UNSAFE_FILE_NAME_CHARS = re.compile(r"[:\\/*\"?|<>']")
_LONG_PATH_PREFIX = "\\\\?\\"


def default_separator() -> str:
    return os.sep


# =============================================================================
# Joining and separators
# =============================================================================


def join(*segments: str, sep: str | None = None) -> str:
    """Join segments with the path separator, dropping empty ones.

    >>> join("a", "", "b", sep="/")
    'a/b'
    """
    separator = sep or default_separator()
    return separator.join(s for s in segments if s)


def join_path(base: StrPath, *segments: str) -> Path:
    """Append non-empty segments to ``base``."""
    return Path(base).joinpath(*(s for s in segments if s))


def join_file_paths(files: Iterable[StrPath], path_sep: str | None = None) -> str:
    """Join absolute paths with the search-path separator (``:`` or ``;``)."""
    return (path_sep or os.pathsep).join(str(Path(f).absolute()) for f in files)


def names_as_comma_separated_list(files: Iterable[StrPath]) -> str:
    return ", ".join(Path(f).name for f in files)


def to_system_dependent_path(path: str, sep: str | None = None) -> str:
    """Convert a /-based path to one using ``sep``."""
    separator = sep or default_separator()
    if separator != "/":
        return path.replace("/", separator)
    return path


def to_system_independent_path(path: str, sep: str | None = None) -> str:
    """Convert a path using ``sep`` to a /-based one."""
    separator = sep or default_separator()
    if separator != "/":
        return path.replace(separator, "/")
    return path


def escape_system_dependent_chars(path: str, sep: str | None = None) -> str:
    """Double backslashes when the separator is a backslash."""
    if (sep or default_separator()) == "\\":
        return path.replace("\\", "\\\\")
    return path


def to_exportable_system_dependent_path(path: StrPath, sep: str | None = None) -> str:
    """Absolute path that system APIs can open regardless of length.

    With a backslash separator the path gets the ``\\\\?\\`` prefix, which
    lifts the 260 character limit of Windows APIs.
    """
    absolute = str(Path(path).absolute())
    if (sep or default_separator()) != "/" and not absolute.startswith(_LONG_PATH_PREFIX):
        return _LONG_PATH_PREFIX + absolute
    return absolute


# =============================================================================
# Relative paths
# =============================================================================


def relative_path(file: StrPath, directory: StrPath, sep: str | None = None) -> str:
    """Path of ``file`` relative to ``directory``.

    Both must exist. If ``file`` is a directory the result ends with the
    separator. ``file == directory`` gives an empty string.

    Raises:
        FileOpsError(FILE_INVALID_ARGUMENT): if ``file`` is neither a file nor a
            directory, or ``directory`` is not a directory.
    """
    file = Path(file)
    directory = Path(directory)
    if not (file.is_file() or file.is_dir()):
        raise FileOpsError.invalid_argument(
            f"{file} is not a file nor a directory.", path=file
        )
    if not directory.is_dir():
        raise FileOpsError.invalid_argument(f"{directory} is not a directory.", path=directory)
    return relative_possibly_non_existing_path(file, directory, sep=sep)


def relative_possibly_non_existing_path(
    file: StrPath, directory: StrPath, sep: str | None = None
) -> str:
    """Like :func:`relative_path` without existence checks.

    For ``/a/b/c`` and ``/a`` this returns ``b/c``. A ``file`` that is not
    under ``directory`` comes back as its absolute path.
    """
    file_abs = Path(os.path.abspath(file))
    dir_abs = Path(os.path.abspath(directory))
    try:
        rel = file_abs.relative_to(dir_abs).as_posix()
        if rel == ".":
            rel = ""
    except ValueError:
        rel = file_abs.as_posix()
    if rel and file_abs.is_dir() and not rel.endswith("/"):
        rel += "/"
    return to_system_dependent_path(rel, sep)


# =============================================================================
# Names
# =============================================================================


def sanitize_file_name(name: str) -> str:
    """Replace characters unsafe in file names on any OS with ``_``."""
    return _UNSAFE_FILE_NAME_CHARS.sub("_", name)


def _name_without_extension(name: str) -> str:
    base, dot, _ = name.rpartition(".")
    return base if dot else name


def exploded_archive_layout(path: Path, name: str) -> str | None:
    """Name ``classes.jar`` inside an exploded-aar tree after its coordinates.

    The layout is ``<group>/<artifact>/<version>/<dir>/classes.jar``, which
    yields ``group-artifact-version``.
    """
    if name != "classes" or "exploded-aar" not in str(path):
        return None
    version_dir = path.parent.parent
    artifact_dir = version_dir.parent
    group_dir = artifact_dir.parent
    return "-".join((group_dir.name, artifact_dir.name, version_dir.name))


DEFAULT_JAR_LAYOUTS: tuple[JarLayout, ...] = (exploded_archive_layout,)


def get_directory_name_for_jar(
    file: StrPath, layouts: Sequence[JarLayout] = DEFAULT_JAR_LAYOUTS
) -> str:
    """Choose a stable directory name for unpacking a jar.

    The name is the jar's base name (or the first name a layout rule
    derives), an underscore, and the SHA-1 of the UTF-16LE encoded
    absolute path, so equal file names from different places never collide.
    """
    absolute = Path(file).absolute()
    digest = hashlib.sha1(str(absolute).encode("utf-16-le")).hexdigest()
    name = _name_without_extension(absolute.name)
    for layout in layouts:
        derived = layout(absolute, name)
        if derived:
            name = derived
            break
    return f"{name}_{digest}"


# =============================================================================
# Identity
# =============================================================================


def canonical(path: StrPath) -> Path:
    """Absolute path with symlinks and ``.``/``..`` resolved."""
    try:
        return Path(path).resolve()
    except (OSError, RuntimeError) as e:
        raise FileOpsError.io_failure(f"Cannot canonicalize {path}", e, path=path) from e


def parent_dir_exists(path: StrPath) -> bool:
    """Whether the canonical parent of ``path`` exists."""
    resolved = canonical(path)
    return resolved.parent != resolved and resolved.parent.exists()


def is_same_file(a: StrPath, b: StrPath) -> bool:
    """Whether ``a`` and ``b`` are the same physical file.

    Existing paths are compared with ``os.path.samefile`` (inode identity,
    so hard links match). Otherwise the canonical paths are compared, which
    works for paths that do not exist yet.
    """
    if os.path.exists(a) and os.path.exists(b):
        try:
            return os.path.samefile(a, b)
        except OSError as e:
            raise FileOpsError.io_failure(f"Cannot compare {a} and {b}", e) from e
    return canonical(a) == canonical(b)


def is_file_in_directory(file: StrPath, directory: StrPath) -> bool:
    """Whether ``directory`` is an ancestor of ``file`` (canonical paths)."""
    resolved = canonical(file)
    if resolved.parent == resolved:
        return False
    parent = resolved.parent
    while True:
        if is_same_file(parent, directory):
            return True
        if parent.parent == parent:
            return False
        parent = parent.parent
