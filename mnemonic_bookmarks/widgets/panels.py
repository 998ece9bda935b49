"""Side panel listing the active document's bookmarks."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from ..core.features.decorations import LineDecoration, render_gutter


class BookmarkPanel(Static):
    """Shows ``line  [mnemonic]`` rows for the active document."""

    def show(
        self,
        decorations: list[LineDecoration],
        line_count: int,
        *,
        color: str = "#888888",
    ) -> None:
        rows = render_gutter(decorations, line_count)
        if not rows:
            self.update(Text("(no bookmarks in this file)", style="dim"))
            return
        self.update(Text("\n".join(rows), style=color))
