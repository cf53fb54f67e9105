"""Zip archives viewed as a small filesystem.

A :class:`ZipFilesystem` keeps the archive open until :meth:`close` is
called. Use it as a context manager so the handle is released on every
exit path::

    with create_zip_filesystem(jar) as fs:
        manifest = fs.read_text("META-INF/MANIFEST.MF")
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from types import TracebackType

import structlog

from treeops.core.errors import FileOpsError
from treeops.files.paths import StrPath

log = structlog.get_logger(__name__)


class ZipFilesystem:
    """Scoped handle onto an open zip archive."""

    def __init__(self, archive: Path, zf: zipfile.ZipFile, *, writable: bool) -> None:
        self._archive = archive
        self._zip = zf
        self._writable = writable
        self._closed = False

    @property
    def archive(self) -> Path:
        return self._archive

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def root(self) -> zipfile.Path:
        """Traversable root of the archive (``/``)."""
        self._check_open()
        return zipfile.Path(self._zip)

    def _check_open(self) -> None:
        if self._closed:
            raise FileOpsError.invalid_argument(
                f"Zip filesystem for {self._archive} is closed.", path=self._archive
            )

    def _entry(self, name: str) -> str:
        return name.lstrip("/")

    def names(self) -> list[str]:
        """Entry names in archive order."""
        self._check_open()
        return self._zip.namelist()

    def exists(self, name: str) -> bool:
        """Whether ``name`` is an entry or an (implicit) directory."""
        return self.is_dir(name) or self._entry(name) in self.names()

    def is_dir(self, name: str) -> bool:
        entry = self._entry(name).rstrip("/")
        if not entry:
            self._check_open()
            return True
        prefix = entry + "/"
        return any(n.startswith(prefix) for n in self.names())

    def read_bytes(self, name: str) -> bytes:
        self._check_open()
        entry = self._entry(name)
        try:
            return self._zip.read(entry)
        except KeyError as e:
            raise FileOpsError.io_failure(
                f"No entry {entry} in {self._archive}", e, archive=self._archive, entry=entry
            ) from e
        except (OSError, zipfile.BadZipFile) as e:
            raise FileOpsError.io_failure(
                f"Failed to read {entry} from {self._archive}",
                e,
                archive=self._archive,
                entry=entry,
            ) from e

    def read_text(self, name: str, encoding: str = "utf-8") -> str:
        return self.read_bytes(name).decode(encoding)

    def write_bytes(self, name: str, data: bytes) -> None:
        """Add a new entry. Existing entries cannot be replaced."""
        self._check_open()
        if not self._writable:
            raise FileOpsError.invalid_argument(
                f"Zip filesystem for {self._archive} is read-only.", path=self._archive
            )
        entry = self._entry(name)
        if entry in self._zip.namelist():
            raise FileOpsError.already_exists(f"{self._archive}!/{entry}")
        try:
            self._zip.writestr(entry, data, compress_type=zipfile.ZIP_DEFLATED)
        except OSError as e:
            raise FileOpsError.io_failure(
                f"Failed to write {entry} to {self._archive}",
                e,
                archive=self._archive,
                entry=entry,
            ) from e

    def write_text(self, name: str, text: str, encoding: str = "utf-8") -> None:
        self.write_bytes(name, text.encode(encoding))

    def close(self) -> None:
        """Release the archive. Calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        try:
            self._zip.close()
        except OSError as e:
            raise FileOpsError.io_failure(
                f"Failed to close {self._archive}", e, path=self._archive
            ) from e
        log.debug("archive.closed", archive=str(self._archive))

    def __enter__(self) -> ZipFilesystem:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("rw" if self._writable else "ro")
        return f"ZipFilesystem({str(self._archive)!r}, {state})"


def create_zip_filesystem(archive: StrPath, *, writable: bool = False) -> ZipFilesystem:
    """Open an existing zip archive as a :class:`ZipFilesystem`.

    Args:
        archive: Path of the zip (or jar/aar) file.
        writable: Open for appending new entries.

    Raises:
        FileOpsError(FILE_IO_FAILURE): the archive cannot be read.
        FileOpsError(FILE_INVALID_ARGUMENT): the file is not a zip archive.
    """
    archive = Path(archive)
    try:
        with archive.open("rb"):
            pass
    except OSError as e:
        raise FileOpsError.io_failure(f"Cannot read archive {archive}", e, path=archive) from e
    if not zipfile.is_zipfile(archive):
        raise FileOpsError.invalid_argument(f"{archive} is not a zip archive.", path=archive)
    try:
        zf = zipfile.ZipFile(archive, "a" if writable else "r")
    except zipfile.BadZipFile as e:
        raise FileOpsError.invalid_argument(
            f"{archive} is not a zip archive.", path=archive, reason=e
        ) from e
    except OSError as e:
        raise FileOpsError.io_failure(f"Cannot open archive {archive}", e, path=archive) from e
    log.debug("archive.opened", archive=str(archive), writable=writable)
    return ZipFilesystem(archive, zf, writable=writable)
