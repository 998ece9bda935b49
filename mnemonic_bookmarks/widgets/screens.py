"""Modal screens used by the bookmark commands."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, OptionList, Static
from textual.widgets.option_list import Option

from ..core.models import Bookmark


class MnemonicPromptScreen(ModalScreen[str | None]):
    """Single-line text prompt with optional inline validation."""

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(
        self,
        prompt: str,
        validate: Callable[[str], str | None] | None = None,
    ) -> None:
        super().__init__()
        self._prompt = prompt
        self._validate = validate

    def compose(self) -> ComposeResult:
        with Vertical(id="prompt-modal", classes="modal"):
            yield Static(self._prompt, id="prompt-title")
            yield Input(id="prompt-input")
            yield Static("", id="prompt-error")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def _error_for(self, value: str) -> str | None:
        if self._validate is None or not value:
            return None
        return self._validate(value)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#prompt-error", Static).update(
            self._error_for(event.value) or ""
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value
        if not value:
            self.dismiss(None)
            return
        error = self._error_for(value)
        if error:
            self.query_one("#prompt-error", Static).update(error)
            return
        self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class BookmarkPickerScreen(ModalScreen[str | None]):
    """Choose one bookmark; dismisses with its mnemonic."""

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(self, bookmarks: list[Bookmark], placeholder: str) -> None:
        super().__init__()
        self._bookmarks = bookmarks
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-modal", classes="modal"):
            yield Static(self._placeholder, id="picker-title")
            yield OptionList(
                *(
                    Option(
                        Text.assemble(b.mnemonic, "  ", (b.location_label(), "dim")),
                        id=b.mnemonic,
                    )
                    for b in self._bookmarks
                ),
                id="picker-options",
            )

    def on_mount(self) -> None:
        options = self.query_one("#picker-options", OptionList)
        if options.option_count:
            options.highlighted = 0
        options.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    """Modal yes/no question."""

    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("y", "answer(True)", show=False),
        Binding("n", "answer(False)", show=False),
    ]

    def __init__(self, question: str) -> None:
        super().__init__()
        self._question = question

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-modal", classes="modal"):
            yield Static(self._question, id="confirm-question")
            with Horizontal(id="confirm-buttons"):
                yield Button("Yes", id="confirm-yes", variant="error")
                yield Button("No", id="confirm-no", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#confirm-no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)

    def action_cancel(self) -> None:
        self.dismiss(False)
