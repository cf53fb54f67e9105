"""Java-style ``.properties`` reading.

Build hosts keep repository URLs and credentials in ``local.properties``
next to the project. Loading is best-effort: a missing or unreadable file
is logged and treated as empty, so callers fall back to their defaults.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

import structlog

log = structlog.get_logger(__name__)

LOCAL_PROPERTIES = "local.properties"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u" and re.fullmatch(r"[0-9a-fA-F]{4}", text[i + 2 : i + 6]):
            out.append(chr(int(text[i + 2 : i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _logical_lines(text: str) -> list[str]:
    """Join continuation lines (odd number of trailing backslashes)."""
    lines: list[str] = []
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not pending and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        lines.append(pending + line)
        pending = ""
    if pending:
        lines.append(pending)
    return lines


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` content into a dict. Later keys win."""
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        # Find the first unescaped separator, skipping escaped chars in the key
        i = 0
        while i < len(line):
            if line[i] == "\\":
                i += 2
                continue
            if line[i] in "=: \t\f":
                break
            i += 1
        key = line[:i]
        rest = line[i:].lstrip(" \t\f")
        if rest[:1] in ("=", ":"):
            rest = rest[1:].lstrip(" \t\f")
        result[_unescape(key)] = _unescape(rest)
    return result


def load_properties(path: Path) -> dict[str, str]:
    """Load a properties file, returning ``{}`` when it cannot be read."""
    try:
        text = path.read_text(encoding="latin-1")
    except OSError as e:
        log.warning("properties.load_failed", path=str(path), error=str(e))
        return {}
    return parse_properties(text)


def resolve_property(
    key: str,
    overrides: Mapping[str, str] | None = None,
    properties_file: Path | None = None,
) -> str | None:
    """Resolve ``key`` from explicit overrides, then from a properties file.

    Args:
        key: Property name (e.g. ``RELEASE_REPOSITORY_URL``).
        overrides: Values supplied directly by the caller; these win.
        properties_file: File consulted when the key is not overridden.
                         Defaults to ``./local.properties``.

    Returns:
        The value, or None if neither source defines it.
    """
    if overrides and key in overrides:
        return overrides[key]
    path = properties_file if properties_file is not None else Path(LOCAL_PROPERTIES)
    return load_properties(path).get(key)
