"""Set, list, go to, remove and delete-all bookmark commands."""

from __future__ import annotations

from ...log import logger
from ..errors import (
    BookmarkError,
    BookmarkNotFound,
    InvalidMnemonicFormat,
    NoActiveDocument,
)
from ..models import Bookmark, is_valid_mnemonic

EMPTY_MESSAGE = "No mnemonic bookmarks set."
SET_PROMPT = "Enter a mnemonic for this bookmark (e.g., init, bug, todo)"
GOTO_PROMPT = "Enter the mnemonic to jump to"
DELETE_ALL_QUESTION = "Are you sure you want to delete ALL mnemonic bookmarks?"


def mnemonic_error(value: str) -> str | None:
    """Inline validation for the mnemonic prompt."""
    if is_valid_mnemonic(value):
        return None
    return str(InvalidMnemonicFormat(value))


class BookmarkCommandsMixin:
    """The five bookmark commands.

    Each is a no-argument coroutine that may prompt the user.  Errors are
    caught here and shown; nothing propagates to the host.
    """

    async def _cmd_set_bookmark(self) -> None:
        """Bookmark the cursor line under a new mnemonic."""
        if self._active_location() is None:  # type: ignore[attr-defined]
            self._show_error(str(NoActiveDocument()))  # type: ignore[attr-defined]
            return

        mnemonic = await self._prompt_text(  # type: ignore[attr-defined]
            SET_PROMPT, validate=mnemonic_error
        )
        if not mnemonic:
            return  # cancelled

        try:
            # Re-read after the prompt: the cursor may have moved meanwhile.
            location = self._active_location()  # type: ignore[attr-defined]
            if location is None:
                raise NoActiveDocument()
            engine = self.reanchor_engine  # type: ignore[attr-defined]
            bookmark = self.bookmark_store.create(  # type: ignore[attr-defined]
                mnemonic,
                location.resource,
                location.line,
                engine.fingerprint(location.lines, location.line),
            )
        except BookmarkError as exc:
            self._show_error(str(exc))  # type: ignore[attr-defined]
            return

        logger.debug("set bookmark %s at %s:%d", mnemonic, location.resource, location.line)
        self._add_system_message(  # type: ignore[attr-defined]
            f"Bookmark set: {bookmark.mnemonic} → {location.name}:{bookmark.line + 1}"
        )

    async def _cmd_list_bookmarks(self) -> None:
        """Pick a bookmark from a list and go to it."""
        bookmarks = self.bookmark_store.load_all()  # type: ignore[attr-defined]
        if not bookmarks:
            self._add_system_message(EMPTY_MESSAGE)  # type: ignore[attr-defined]
            return

        selection = await self._pick_bookmark(  # type: ignore[attr-defined]
            bookmarks, "Select a mnemonic bookmark to go to"
        )
        if selection is None:
            return
        await self._navigate_to(selection)

    async def _cmd_goto_bookmark(self) -> None:
        """Prompt for a mnemonic and go to it."""
        if not len(self.bookmark_store):  # type: ignore[attr-defined]
            self._add_system_message(EMPTY_MESSAGE)  # type: ignore[attr-defined]
            return

        mnemonic = await self._prompt_text(GOTO_PROMPT)  # type: ignore[attr-defined]
        if not mnemonic:
            return

        bookmark = self.bookmark_store.find_by_mnemonic(mnemonic)  # type: ignore[attr-defined]
        if bookmark is None:
            self._show_error(str(BookmarkNotFound(mnemonic)))  # type: ignore[attr-defined]
            return
        await self._navigate_to(bookmark)

    async def _cmd_remove_bookmark(self) -> None:
        """Pick a bookmark from a list and delete it."""
        bookmarks = self.bookmark_store.load_all()  # type: ignore[attr-defined]
        if not bookmarks:
            self._add_system_message(EMPTY_MESSAGE)  # type: ignore[attr-defined]
            return

        selection = await self._pick_bookmark(  # type: ignore[attr-defined]
            bookmarks, "Select a mnemonic bookmark to remove"
        )
        if selection is None:
            return

        try:
            self.bookmark_store.remove(selection.mnemonic)  # type: ignore[attr-defined]
        except BookmarkError as exc:
            self._show_error(str(exc))  # type: ignore[attr-defined]
            return
        self._add_system_message(f"Removed bookmark: {selection.mnemonic}")  # type: ignore[attr-defined]

    async def _cmd_delete_all_bookmarks(self) -> None:
        """Clear every bookmark after a yes/no confirmation."""
        if not await self._confirm(DELETE_ALL_QUESTION):  # type: ignore[attr-defined]
            return
        count = self.bookmark_store.remove_all()  # type: ignore[attr-defined]
        logger.debug("deleted %d bookmark(s)", count)
        self._add_system_message("All mnemonic bookmarks have been deleted.")  # type: ignore[attr-defined]

    # ── Helpers ──────────────────────────────────────────────────

    async def _navigate_to(self, bookmark: Bookmark) -> None:
        try:
            await self._open_location(bookmark.resource, bookmark.line)  # type: ignore[attr-defined]
        except OSError as exc:
            logger.debug("failed to open %s", bookmark.resource, exc_info=True)
            self._show_error(f"Cannot open {bookmark.path}: {exc.strerror or exc}")  # type: ignore[attr-defined]
