"""Shared application base class for bookmark hosts.

The Textual app inherits from this, and so does the test suite's mock host.
Command mixins are mixed in alongside this class.  Subclasses implement the
abstract host methods: messages, prompts, pickers and navigation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..preferences import Preferences
from .events import (
    ActiveViewChanged,
    DocumentOpened,
    EventDispatcher,
    VisibleViewsChanged,
)
from .features.reanchor import ReanchorEngine
from .models import Bookmark
from .persistence.bookmarks import BookmarkStore


@dataclass
class EditorLocation:
    """Where the cursor is: document, zero-based line, and the document's lines."""

    resource: str
    line: int
    lines: Sequence[str]
    name: str


class SharedAppBase:
    """Base class providing the bookmark store, reanchoring and event wiring."""

    def __init__(
        self,
        *,
        store: BookmarkStore,
        prefs: Preferences | None = None,
        **kwargs,
    ) -> None:  # type: ignore[no-untyped-def]
        # Cooperative MRO: propagate to next base (e.g. Textual App)
        super().__init__(**kwargs)

        self._prefs = prefs or Preferences()
        self.bookmark_store = store
        self.dispatcher = EventDispatcher()
        self.reanchor_engine = ReanchorEngine(
            store,
            radius=self._prefs.anchoring.search_radius,
            fingerprint_length=self._prefs.anchoring.fingerprint_length,
        )
        self.reanchor_engine.attach(self.dispatcher)

        # Only DocumentChanged moves bookmarks; the rest just redraw.
        for event_type in (ActiveViewChanged, DocumentOpened, VisibleViewsChanged):
            self.dispatcher.subscribe(event_type, self._on_view_event)
        store.add_listener(self._refresh_decorations)

    def _on_view_event(self, event: object) -> None:
        self._refresh_decorations()

    # --- Abstract host methods (subclasses MUST implement) ---

    def _add_system_message(self, text: str) -> None:
        raise NotImplementedError

    def _show_error(self, text: str) -> None:
        raise NotImplementedError

    def _active_location(self) -> EditorLocation | None:
        raise NotImplementedError

    async def _prompt_text(self, prompt: str, *, validate=None) -> str | None:  # type: ignore[no-untyped-def]
        """Ask for a line of text; ``None`` when the user cancels.

        *validate* maps the current value to an error message or ``None``.
        """
        raise NotImplementedError

    async def _pick_bookmark(
        self, bookmarks: list[Bookmark], placeholder: str
    ) -> Bookmark | None:
        raise NotImplementedError

    async def _confirm(self, question: str) -> bool:
        raise NotImplementedError

    async def _open_location(self, resource: str, line: int) -> None:
        raise NotImplementedError

    def _refresh_decorations(self) -> None:
        raise NotImplementedError
