"""Command palette provider for the bookmark commands."""

from __future__ import annotations

from functools import partial

from textual.command import DiscoveryHit, Hit, Hits, Provider

# (display_name, description, action_name)
_PALETTE_COMMANDS: tuple[tuple[str, str, str], ...] = (
    ("Set Mnemonic Bookmark", "Bookmark the cursor line under a name", "set_bookmark"),
    ("List Mnemonic Bookmarks", "Pick a bookmark and go to it", "list_bookmarks"),
    ("Go to Mnemonic Bookmark", "Type a mnemonic and go to it", "goto_bookmark"),
    ("Remove Mnemonic Bookmark", "Pick a bookmark and delete it", "remove_bookmark"),
    (
        "Delete All Mnemonic Bookmarks",
        "Remove every bookmark (asks first)",
        "delete_all_bookmarks",
    ),
    ("Next Document", "Cycle through open documents", "next_document"),
    ("Save Document", "Write the active document to disk", "save_document"),
)


class BookmarkCommandProvider(Provider):
    """Expose the bookmark commands in the command palette."""

    async def search(self, query: str) -> Hits:
        """Yield commands that fuzzy-match *query*."""
        matcher = self.matcher(query)
        for name, description, action in _PALETTE_COMMANDS:
            score = matcher.match(f"{name} {description}")
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(name),
                    partial(self._run_command, action),
                    help=description,
                )

    async def discover(self) -> Hits:
        """Show every command when the palette first opens (no query yet)."""
        for name, description, action in _PALETTE_COMMANDS:
            yield DiscoveryHit(
                name,
                partial(self._run_command, action),
                help=description,
            )

    def _run_command(self, action: str) -> None:
        method = getattr(self.app, f"action_{action}", None)
        if method is not None:
            method()
