"""Textual-free command handler mixins."""

from .bookmark_cmds import BookmarkCommandsMixin

__all__ = [
    "BookmarkCommandsMixin",
]
