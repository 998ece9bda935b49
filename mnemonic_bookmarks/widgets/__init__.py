"""Textual widgets for the bookmark host."""

from .commands import BookmarkCommandProvider
from .panels import BookmarkPanel
from .screens import BookmarkPickerScreen, ConfirmScreen, MnemonicPromptScreen

__all__ = [
    "BookmarkCommandProvider",
    "BookmarkPanel",
    "BookmarkPickerScreen",
    "ConfirmScreen",
    "MnemonicPromptScreen",
]
