"""Shared test fixtures for the mnemonic-bookmarks test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from mnemonic_bookmarks.core.persistence import BookmarkStore

RESOURCE = "file:///work/a.ts"
OTHER_RESOURCE = "file:///work/b.ts"


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "projects" / "-work" / "workspace-state.json"


@pytest.fixture
def store(store_path: Path) -> BookmarkStore:
    """A loaded, empty bookmark store backed by a temp file."""
    s = BookmarkStore(store_path)
    s.load()
    return s


@pytest.fixture
def document() -> list[str]:
    """Thirty distinct lines; line 10 reads ``FOO``."""
    lines = [f"line {i}" for i in range(30)]
    lines[10] = "FOO"
    return lines


def insert_above(lines: list[str], at: int, count: int) -> list[str]:
    """Return *lines* with *count* new lines inserted before index *at*."""
    return lines[:at] + [f"inserted {k}" for k in range(count)] + lines[at:]
