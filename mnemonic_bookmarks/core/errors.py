"""Errors raised by bookmark operations.

Each carries the message shown to the user; command handlers catch
:class:`BookmarkError` and display ``str(exc)``.
"""

from __future__ import annotations


class BookmarkError(Exception):
    """Base class for user-facing bookmark errors."""


class InvalidMnemonicFormat(BookmarkError):
    def __init__(self, mnemonic: str = "") -> None:
        self.mnemonic = mnemonic
        super().__init__("Mnemonic must be alphanumeric (letters, numbers, _ or -)")


class DuplicateMnemonic(BookmarkError):
    def __init__(self, mnemonic: str) -> None:
        self.mnemonic = mnemonic
        super().__init__(f'Mnemonic "{mnemonic}" already exists.')


class BookmarkNotFound(BookmarkError):
    def __init__(self, mnemonic: str) -> None:
        self.mnemonic = mnemonic
        super().__init__(f'Mnemonic "{mnemonic}" not found.')


class NoActiveDocument(BookmarkError):
    def __init__(self) -> None:
        super().__init__("No active editor.")


# Short alias matching the error-kind name used in messages and docs.
NotFound = BookmarkNotFound
