"""Tests for the bookmark record and mnemonic/resource helpers."""

from __future__ import annotations

import pytest

from mnemonic_bookmarks.core.errors import InvalidMnemonicFormat, NotFound, BookmarkNotFound
from mnemonic_bookmarks.core.models import (
    Bookmark,
    is_valid_mnemonic,
    path_for_resource,
    resource_for_path,
    validate_mnemonic,
)


class TestMnemonicValidation:
    @pytest.mark.parametrize("good", ["init", "bug", "todo_2", "A-b_C", "0"])
    def test_valid(self, good):
        assert is_valid_mnemonic(good)
        assert validate_mnemonic(good) == good

    @pytest.mark.parametrize("bad", ["", " ", "a b", "a.b", "a\n", "é"])
    def test_invalid(self, bad):
        assert not is_valid_mnemonic(bad)
        with pytest.raises(InvalidMnemonicFormat) as excinfo:
            validate_mnemonic(bad)
        assert "alphanumeric" in str(excinfo.value)


class TestResources:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "dir with space" / "a.ts"
        resource = resource_for_path(path)
        assert resource.startswith("file://")
        assert "%20" in resource
        assert path_for_resource(resource) == path.resolve()

    def test_plain_path_passes_through(self):
        assert str(path_for_resource("/tmp/x.py")) == "/tmp/x.py"


class TestBookmark:
    def test_to_dict(self):
        b = Bookmark("bug", "file:///a.ts", 5, "x")
        assert b.to_dict() == {
            "mnemonic": "bug",
            "resource": "file:///a.ts",
            "line": 5,
            "fingerprint": "x",
        }

    def test_from_dict_round_trip(self):
        b = Bookmark("bug", "file:///a.ts", 5, "x")
        assert Bookmark.from_dict(b.to_dict()) == b

    def test_from_dict_legacy_file_path(self):
        b = Bookmark.from_dict({"mnemonic": "m", "filePath": "file:///a.ts", "line": 2})
        assert b == Bookmark("m", "file:///a.ts", 2, "")

    def test_from_dict_without_resource(self):
        with pytest.raises(ValueError):
            Bookmark.from_dict({"mnemonic": "m", "line": 2})

    def test_location_label_is_one_based(self):
        assert Bookmark("m", "file:///work/a.ts", 0).location_label() == "/work/a.ts:1"


def test_not_found_alias():
    assert NotFound is BookmarkNotFound
