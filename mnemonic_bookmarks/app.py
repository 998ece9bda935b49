"""Main Mnemonic Bookmarks application.

A small Textual editor that hosts the bookmark commands: it turns editor
activity into core events and renders the bookmark panel.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Static, TextArea

from .core.app_base import EditorLocation, SharedAppBase
from .core.commands import BookmarkCommandsMixin
from .core.events import (
    ActiveViewChanged,
    DocumentChanged,
    DocumentOpened,
    VisibleViewsChanged,
)
from .core.features.decorations import decorations_for
from .core.features.file_watch import DocumentWatcher
from .core.models import Bookmark, path_for_resource, resource_for_path
from .core.persistence import BookmarkStore, project_state_path
from .log import logger
from .preferences import Preferences, load_preferences
from .widgets import (
    BookmarkCommandProvider,
    BookmarkPanel,
    BookmarkPickerScreen,
    ConfirmScreen,
    MnemonicPromptScreen,
)


class MnemonicBookmarksApp(BookmarkCommandsMixin, SharedAppBase, App):
    """Editor host for mnemonic bookmarks."""

    TITLE = "Mnemonic Bookmarks"

    CSS = """
    #main-container { height: 1fr; }
    #editor-area { width: 1fr; }
    #doc-title { height: 1; background: $panel; padding: 0 1; }
    #editor { height: 1fr; }
    #bookmark-sidebar { width: 32; border-left: solid $panel; }
    #sidebar-title { height: 1; text-style: bold; }
    #status-bar { height: 1; padding: 0 1; color: $text-muted; }
    .modal {
        width: 70;
        height: auto;
        max-height: 80%;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }
    MnemonicPromptScreen, BookmarkPickerScreen, ConfirmScreen { align: center middle; }
    #prompt-error { color: $error; height: auto; }
    #picker-options { height: auto; max-height: 20; }
    #confirm-buttons { height: auto; margin-top: 1; }
    #confirm-buttons Button { margin-right: 2; }
    """

    COMMANDS = App.COMMANDS | {BookmarkCommandProvider}

    BINDINGS = [
        Binding("ctrl+b", "set_bookmark", "Set", show=True, priority=True),
        Binding("ctrl+l", "list_bookmarks", "List", show=True, priority=True),
        Binding("ctrl+g", "goto_bookmark", "Go to", show=True, priority=True),
        Binding("ctrl+r", "remove_bookmark", "Remove", show=True, priority=True),
        Binding("ctrl+o", "next_document", "Next file", show=True, priority=True),
        Binding("ctrl+s", "save_document", "Save", show=False, priority=True),
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(
        self,
        store: BookmarkStore,
        prefs: Preferences | None = None,
        files: Iterable[str | Path] = (),
    ) -> None:
        super().__init__(store=store, prefs=prefs)
        # Text of every open document; the active one lives in the editor.
        self._documents: dict[str, str] = {}
        # Text as last read from or written to disk, per open document.
        self._disk_text: dict[str, str] = {}
        self._document_order: list[str] = []
        self._active_resource: str | None = None
        self._initial_files = [Path(f) for f in files]
        self._ui_ready = False
        self._document_watcher = DocumentWatcher(
            dispatch=self.dispatcher.dispatch,
            set_interval=self.set_interval,
            is_open=self._is_open,
            interval=self._prefs.watch.interval,
        )
        self.dispatcher.subscribe(DocumentChanged, self._on_document_changed)

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Horizontal(id="main-container"):
            with Vertical(id="editor-area"):
                yield Static("No document", id="doc-title")
                yield TextArea("", id="editor", show_line_numbers=True)
            with Vertical(id="bookmark-sidebar"):
                yield Static(" Bookmarks", id="sidebar-title")
                yield BookmarkPanel("", id="bookmark-panel")
        yield Static("Ready", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self._ui_ready = True
        for path in self._initial_files:
            try:
                self._load_document(resource_for_path(path), create=True)
            except OSError as exc:
                self._show_error(f"Cannot open {path}: {exc.strerror or exc}")
        if self._document_order:
            self._activate(self._document_order[0])
        self._refresh_decorations()
        self.query_one("#editor", TextArea).focus()

    def on_unmount(self) -> None:
        self._document_watcher.stop()
        self.dispatcher.unsubscribe(DocumentChanged, self._on_document_changed)

    # ── Documents ───────────────────────────────────────────────

    def _is_open(self, resource: str) -> bool:
        """True when the editor, not the disk, owns *resource*'s text.

        That is the active document, or an inactive one with unsaved edits.
        """
        if resource == self._active_resource:
            return True
        text = self._documents.get(resource)
        return text is not None and text != self._disk_text.get(resource)

    def _on_document_changed(self, event: DocumentChanged) -> None:
        # The watcher only reports documents the editor does not own, so a
        # cached copy of one is just stale.
        resource = event.resource
        if resource not in self._documents or self._is_open(resource):
            return
        path = path_for_resource(resource)
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            logger.debug("failed to refresh %s", path, exc_info=True)
            return
        self._documents[resource] = self._disk_text[resource] = text

    def _load_document(self, resource: str, *, create: bool = False) -> None:
        """Read *resource* from disk into the open-document list."""
        if resource in self._documents:
            return
        path = path_for_resource(resource)
        if create and not path.exists():
            text = ""
        else:
            text = path.read_text(encoding="utf-8", errors="replace")
        self._documents[resource] = self._disk_text[resource] = text
        self._document_order.append(resource)
        self.dispatcher.dispatch(DocumentOpened(resource))

    def _activate(self, resource: str) -> None:
        """Show *resource* in the editor."""
        editor = self.query_one("#editor", TextArea)
        if self._active_resource is not None:
            self._documents[self._active_resource] = editor.text
        self._active_resource = resource
        editor.load_text(self._documents[resource])
        self.query_one("#doc-title", Static).update(str(path_for_resource(resource)))
        self.dispatcher.dispatch(ActiveViewChanged(resource))
        self.dispatcher.dispatch(VisibleViewsChanged((resource,)))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self._active_resource is None:
            return
        lines = list(event.text_area.document.lines)
        self.dispatcher.dispatch(DocumentChanged(self._active_resource, lines))

    # ── Host methods used by the command mixin ──────────────────

    def _add_system_message(self, text: str) -> None:
        self.query_one("#status-bar", Static).update(text)
        self.notify(text)

    def _show_error(self, text: str) -> None:
        self.query_one("#status-bar", Static).update(text)
        self.notify(text, severity="error")

    def _active_location(self) -> EditorLocation | None:
        if self._active_resource is None:
            return None
        editor = self.query_one("#editor", TextArea)
        row, _col = editor.cursor_location
        return EditorLocation(
            resource=self._active_resource,
            line=row,
            lines=list(editor.document.lines),
            name=path_for_resource(self._active_resource).name,
        )

    async def _prompt_text(self, prompt: str, *, validate=None) -> str | None:  # type: ignore[no-untyped-def]
        return await self.push_screen_wait(MnemonicPromptScreen(prompt, validate))

    async def _pick_bookmark(
        self, bookmarks: list[Bookmark], placeholder: str
    ) -> Bookmark | None:
        mnemonic = await self.push_screen_wait(
            BookmarkPickerScreen(bookmarks, placeholder)
        )
        return next((b for b in bookmarks if b.mnemonic == mnemonic), None)

    async def _confirm(self, question: str) -> bool:
        return bool(await self.push_screen_wait(ConfirmScreen(question)))

    async def _open_location(self, resource: str, line: int) -> None:
        self._load_document(resource)
        if resource != self._active_resource:
            self._activate(resource)
        editor = self.query_one("#editor", TextArea)
        # Stale bookmarks may point past the end; land on the last line.
        last = max(editor.document.line_count - 1, 0)
        editor.move_cursor((min(max(line, 0), last), 0), center=True)
        editor.focus()

    def _refresh_decorations(self) -> None:
        if not self._ui_ready:
            return
        bookmarks = self.bookmark_store.load_all()
        decorations = (
            decorations_for(bookmarks, self._active_resource)
            if self._prefs.decorations.enabled
            else []
        )
        line_count = 0
        if self._active_resource is not None:
            line_count = self.query_one("#editor", TextArea).document.line_count
        self.query_one("#bookmark-panel", BookmarkPanel).show(
            decorations, line_count, color=self._prefs.decorations.color
        )
        if self._prefs.watch.enabled:
            self._document_watcher.sync({b.resource for b in bookmarks})

    # ── Actions ─────────────────────────────────────────────────

    @work(group="bookmark-command")
    async def action_set_bookmark(self) -> None:
        await self._cmd_set_bookmark()

    @work(group="bookmark-command")
    async def action_list_bookmarks(self) -> None:
        await self._cmd_list_bookmarks()

    @work(group="bookmark-command")
    async def action_goto_bookmark(self) -> None:
        await self._cmd_goto_bookmark()

    @work(group="bookmark-command")
    async def action_remove_bookmark(self) -> None:
        await self._cmd_remove_bookmark()

    @work(group="bookmark-command")
    async def action_delete_all_bookmarks(self) -> None:
        await self._cmd_delete_all_bookmarks()

    def action_next_document(self) -> None:
        if len(self._document_order) < 2 or self._active_resource is None:
            return
        index = self._document_order.index(self._active_resource)
        self._activate(self._document_order[(index + 1) % len(self._document_order)])

    def action_save_document(self) -> None:
        if self._active_resource is None:
            self._show_error("No active editor.")
            return
        path = path_for_resource(self._active_resource)
        text = self.query_one("#editor", TextArea).text
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.debug("failed to save %s", path, exc_info=True)
            self._show_error(f"Cannot save {path}: {exc.strerror or exc}")
            return
        self._documents[self._active_resource] = text
        self._disk_text[self._active_resource] = text
        self._add_system_message(f"Saved {path.name}")


# ── Entry Point ─────────────────────────────────────────────────────


def build_store(workspace: Path, prefs: Preferences) -> BookmarkStore:
    """Open and load the bookmark store for *workspace*."""
    store = BookmarkStore(project_state_path(prefs.storage.data_dir, workspace))
    store.load()
    return store


def run_app(
    workspace: Path,
    files: Iterable[str | Path] = (),
    prefs: Preferences | None = None,
) -> None:
    """Run the Mnemonic Bookmarks application."""
    prefs = prefs or load_preferences()
    app = MnemonicBookmarksApp(build_store(workspace, prefs), prefs, files)
    app.run()
