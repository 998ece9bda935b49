"""Decoration labels for bookmarked lines.

Rendering is the host's job; this only works out which label goes on which
line of a document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..models import Bookmark


@dataclass(frozen=True)
class LineDecoration:
    line: int
    text: str
    mnemonic: str


def label_for(bookmark: Bookmark) -> str:
    return f"[{bookmark.mnemonic}]"


def decorations_for(
    bookmarks: Iterable[Bookmark], resource: str | None
) -> list[LineDecoration]:
    """Decorations for *resource*, sorted by line (store order within a line)."""
    if resource is None:
        return []
    decorations = [
        LineDecoration(line=b.line, text=label_for(b), mnemonic=b.mnemonic)
        for b in bookmarks
        if b.resource == resource
    ]
    decorations.sort(key=lambda d: d.line)
    return decorations


def render_gutter(decorations: Iterable[LineDecoration], line_count: int) -> list[str]:
    """One ``"<line+1>  [a] [b]"`` row per decorated line.

    Stale bookmarks past the end of the document are listed after the rest,
    marked with ``?``.
    """
    by_line: dict[int, list[str]] = {}
    for decoration in decorations:
        by_line.setdefault(decoration.line, []).append(decoration.text)

    rows: list[str] = []
    for line in sorted(by_line):
        marker = "" if 0 <= line < line_count else "?"
        rows.append(f"{line + 1:>5}{marker}  {' '.join(by_line[line])}")
    return rows
