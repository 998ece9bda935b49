"""Bookmark persistence store."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from ...log import logger
from ..errors import BookmarkNotFound, DuplicateMnemonic
from ..models import Bookmark, validate_mnemonic
from ._base import JsonStore

#: Key under which the bookmark sequence lives in the workspace state file.
STATE_KEY = "mnemonicBookmarks"

STATE_FILENAME = "workspace-state.json"


def project_key(workspace: Path) -> str:
    """Encode a workspace path as a directory name (``/`` becomes ``-``)."""
    return str(workspace.expanduser().resolve()).replace("/", "-")


def project_state_path(data_dir: Path, workspace: Path) -> Path:
    """Return the workspace-state file for *workspace* under *data_dir*."""
    return data_dir / "projects" / project_key(workspace) / STATE_FILENAME


class BookmarkStore(JsonStore):
    """Mnemonic bookmarks for one project (``{"mnemonicBookmarks": [...]}``).

    The store keeps the ordered collection in memory.  :meth:`load` replaces
    it with what is on disk; :meth:`save` writes the whole collection back,
    leaving any other keys in the state file untouched.  Every mutation saves
    and then notifies listeners so decorations can be refreshed.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self._bookmarks: list[Bookmark] = []
        self._listeners: list[Callable[[], object]] = []

    # -- lifecycle ------------------------------------------------------------

    def load(self) -> list[Bookmark]:
        """Read the persisted collection into memory.  Never fails."""
        raw = self.load_raw()
        records = raw.get(STATE_KEY, []) if isinstance(raw, dict) else []
        if not isinstance(records, list):
            logger.debug("ignoring malformed %s in %s", STATE_KEY, self.path)
            records = []

        bookmarks: list[Bookmark] = []
        seen: set[str] = set()
        for record in records:
            try:
                bookmark = Bookmark.from_dict(record)
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.debug("skipping unreadable bookmark record %r", record)
                continue
            if bookmark.mnemonic in seen:
                logger.debug("skipping duplicate mnemonic %s", bookmark.mnemonic)
                continue
            seen.add(bookmark.mnemonic)
            bookmarks.append(bookmark)

        self._bookmarks = bookmarks
        return self.load_all()

    def save(self) -> None:
        """Write the whole in-memory collection back to disk."""
        raw = self.load_raw()
        state = raw if isinstance(raw, dict) else {}
        state[STATE_KEY] = [b.to_dict() for b in self._bookmarks]
        self.save_raw(state)

    # -- listeners ------------------------------------------------------------

    def add_listener(self, callback: Callable[[], object]) -> None:
        """Call *callback* after every successful mutation."""
        self._listeners.append(callback)

    def notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    # -- queries --------------------------------------------------------------

    def load_all(self) -> list[Bookmark]:
        """Return a copy of the ordered collection."""
        return [
            Bookmark(b.mnemonic, b.resource, b.line, b.fingerprint)
            for b in self._bookmarks
        ]

    def find_by_mnemonic(self, mnemonic: str) -> Bookmark | None:
        for bookmark in self._bookmarks:
            if bookmark.mnemonic == mnemonic:
                return Bookmark(
                    bookmark.mnemonic,
                    bookmark.resource,
                    bookmark.line,
                    bookmark.fingerprint,
                )
        return None

    def for_resource(self, resource: str) -> list[Bookmark]:
        """Bookmarks belonging to *resource*, in store order."""
        return [b for b in self.load_all() if b.resource == resource]

    def __len__(self) -> int:
        return len(self._bookmarks)

    # -- mutations ------------------------------------------------------------

    def create(
        self, mnemonic: str, resource: str, line: int, fingerprint: str
    ) -> Bookmark:
        """Append a new bookmark and persist.

        Raises :class:`InvalidMnemonicFormat` or :class:`DuplicateMnemonic`;
        the store is unchanged in either case.
        """
        validate_mnemonic(mnemonic)
        if any(b.mnemonic == mnemonic for b in self._bookmarks):
            raise DuplicateMnemonic(mnemonic)
        bookmark = Bookmark(mnemonic, resource, line, fingerprint)
        self._bookmarks.append(bookmark)
        self._commit()
        return self.find_by_mnemonic(mnemonic)  # type: ignore[return-value]

    def remove(self, mnemonic: str) -> Bookmark:
        """Delete one bookmark and persist.  Raises :class:`BookmarkNotFound`."""
        for index, bookmark in enumerate(self._bookmarks):
            if bookmark.mnemonic == mnemonic:
                del self._bookmarks[index]
                self._commit()
                return bookmark
        raise BookmarkNotFound(mnemonic)

    def remove_all(self) -> int:
        """Empty the collection and persist.  Returns how many were removed."""
        count = len(self._bookmarks)
        self._bookmarks.clear()
        self._commit()
        return count

    def update_line(
        self,
        mnemonic: str,
        new_line: int,
        new_fingerprint: str,
        *,
        persist: bool = True,
    ) -> bool:
        """Move a bookmark, replacing line and fingerprint together.

        A mnemonic that no longer exists (removed while a reanchor pass was
        pending) is a no-op and returns ``False``.  With ``persist=False`` the
        caller is responsible for :meth:`save` and :meth:`notify`.
        """
        for bookmark in self._bookmarks:
            if bookmark.mnemonic == mnemonic:
                bookmark.line = new_line
                bookmark.fingerprint = new_fingerprint
                if persist:
                    self._commit()
                return True
        return False

    def _commit(self) -> None:
        self.save()
        self.notify()
