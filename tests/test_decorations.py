"""Tests for decoration labels and the gutter rendering."""

from __future__ import annotations

from mnemonic_bookmarks.core.features.decorations import (
    LineDecoration,
    decorations_for,
    label_for,
    render_gutter,
)
from mnemonic_bookmarks.core.models import Bookmark

from .conftest import OTHER_RESOURCE, RESOURCE


def test_label():
    assert label_for(Bookmark("todo", RESOURCE, 0)) == "[todo]"


class TestDecorationsFor:
    def test_filters_and_sorts(self):
        bookmarks = [
            Bookmark("late", RESOURCE, 9),
            Bookmark("other", OTHER_RESOURCE, 1),
            Bookmark("early", RESOURCE, 2),
        ]
        assert decorations_for(bookmarks, RESOURCE) == [
            LineDecoration(2, "[early]", "early"),
            LineDecoration(9, "[late]", "late"),
        ]

    def test_no_active_document(self):
        assert decorations_for([Bookmark("a", RESOURCE, 0)], None) == []

    def test_same_line_keeps_store_order(self):
        bookmarks = [Bookmark("b", RESOURCE, 3), Bookmark("a", RESOURCE, 3)]
        assert [d.mnemonic for d in decorations_for(bookmarks, RESOURCE)] == ["b", "a"]


class TestRenderGutter:
    def test_rows(self):
        decorations = [
            LineDecoration(0, "[a]", "a"),
            LineDecoration(4, "[b]", "b"),
            LineDecoration(4, "[c]", "c"),
        ]
        assert render_gutter(decorations, 10) == [
            "    1  [a]",
            "    5  [b] [c]",
        ]

    def test_stale_line_marked(self):
        rows = render_gutter([LineDecoration(12, "[gone]", "gone")], 5)
        assert rows == ["   13?  [gone]"]

    def test_empty(self):
        assert render_gutter([], 10) == []
