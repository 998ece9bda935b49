"""Bookmark reanchoring.

After a document changes, each of its bookmarks is checked against its
fingerprint (the first ``N`` characters of the line it was placed on).  If
the stored line no longer carries that fingerprint, nearby lines are searched
in order of increasing distance::

    L+1, L-1, L+2, L-2, ... L+R, L-R

The first in-range line whose fingerprint matches wins.  At equal distance
the line below (``L+offset``) is always tried before the line above, so a
downward shift is preferred; callers may rely on this ordering.

If nothing within ``R`` lines matches, the bookmark is left where it was.
It may now be stale, pointing at the wrong line or past the end of the
document, until a later edit brings a matching line back into range.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ...log import logger
from ..events import DocumentChanged, EventDispatcher
from ..persistence.bookmarks import BookmarkStore

#: Characters of line text kept as a bookmark's fingerprint.
FINGERPRINT_LENGTH = 40

#: How far (in lines, each direction) to search for a moved fingerprint.
SEARCH_RADIUS = 20


def fingerprint(
    lines: Sequence[str], line: int, length: int = FINGERPRINT_LENGTH
) -> str:
    """First *length* characters of ``lines[line]``, or ``""`` when out of range.

    No normalisation is applied; comparisons are exact.
    """
    if 0 <= line < len(lines):
        return lines[line][:length]
    return ""


def candidate_lines(line: int, radius: int = SEARCH_RADIUS):
    """Yield ``line+1, line-1, line+2, line-2, ...`` out to *radius*."""
    for offset in range(1, radius + 1):
        yield line + offset
        yield line - offset


def find_anchor(
    line: int,
    target: str,
    line_count: int,
    fingerprint_at: Callable[[int], str],
    radius: int = SEARCH_RADIUS,
) -> int | None:
    """Return the line now carrying *target*, or ``None`` if it can't be found.

    ``line`` itself is returned when it still matches.  Otherwise candidates
    come from :func:`candidate_lines`; those outside ``[0, line_count)`` are
    skipped.  Pure: works on any accessor, not just a live document.
    """
    if fingerprint_at(line) == target:
        return line
    for candidate in candidate_lines(line, radius):
        if 0 <= candidate < line_count and fingerprint_at(candidate) == target:
            return candidate
    return None


class ReanchorEngine:
    """Keep bookmarks on their lines as documents change.

    Subscribe it to a dispatcher with :meth:`attach`, or call :meth:`reanchor`
    directly with the resource and its current lines.
    """

    def __init__(
        self,
        store: BookmarkStore,
        *,
        radius: int = SEARCH_RADIUS,
        fingerprint_length: int = FINGERPRINT_LENGTH,
    ) -> None:
        self.store = store
        self.radius = radius
        self.fingerprint_length = fingerprint_length

    def attach(self, dispatcher: EventDispatcher) -> None:
        dispatcher.subscribe(DocumentChanged, self.on_document_changed)

    def on_document_changed(self, event: DocumentChanged) -> None:
        self.reanchor(event.resource, event.lines)

    def fingerprint(self, lines: Sequence[str], line: int) -> str:
        return fingerprint(lines, line, self.fingerprint_length)

    def reanchor(self, resource: str, lines: Sequence[str]) -> list[str]:
        """Reanchor every bookmark in *resource*; return the mnemonics moved.

        When the document has bookmarks the whole collection is saved exactly
        once and listeners are notified once, whether or not anything moved.
        Documents without bookmarks are ignored.
        """
        bookmarks = self.store.for_resource(resource)
        if not bookmarks:
            return []

        line_count = len(lines)

        def fingerprint_at(index: int) -> str:
            return self.fingerprint(lines, index)

        moved: list[str] = []
        for bookmark in bookmarks:
            found = find_anchor(
                bookmark.line,
                bookmark.fingerprint,
                line_count,
                fingerprint_at,
                self.radius,
            )
            if found is None:
                logger.debug(
                    "bookmark %s not found within %d lines of %d in %s",
                    bookmark.mnemonic,
                    self.radius,
                    bookmark.line,
                    resource,
                )
                continue
            if found == bookmark.line:
                continue
            logger.debug(
                "bookmark %s moved %d -> %d", bookmark.mnemonic, bookmark.line, found
            )
            if self.store.update_line(
                bookmark.mnemonic, found, fingerprint_at(found), persist=False
            ):
                moved.append(bookmark.mnemonic)

        self.store.save()
        self.store.notify()
        return moved
