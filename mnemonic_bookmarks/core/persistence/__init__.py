"""Persistence layer – each store owns its file path, data format, and I/O."""

from ._base import JsonStore
from .bookmarks import STATE_KEY, BookmarkStore, project_state_path

__all__ = [
    "BookmarkStore",
    "JsonStore",
    "STATE_KEY",
    "project_state_path",
]
