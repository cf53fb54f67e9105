"""Shared fixtures for file operation tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    tree/
        a.txt
        other/
            a.txt
        sub/
            b.txt
            deep/
                c.bin
    """
    root = tmp_path / "tree"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "other").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "other" / "a.txt").write_text("second alpha")
    (root / "sub" / "b.txt").write_text("beta")
    (root / "sub" / "deep" / "c.bin").write_bytes(bytes(range(256)))
    return root
