"""Tests for the command-line entry point."""

from __future__ import annotations

import logging

import pytest

from mnemonic_bookmarks import __main__ as cli
from mnemonic_bookmarks import __version__
from mnemonic_bookmarks.app import build_store
from mnemonic_bookmarks.log import logger
from mnemonic_bookmarks.preferences import Preferences, load_preferences


@pytest.fixture()
def prefs(tmp_path, monkeypatch):
    prefs = Preferences()
    prefs.storage.data_dir = tmp_path / "data"
    monkeypatch.setattr(cli, "load_preferences", lambda: prefs)
    return prefs


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_list_empty(prefs, tmp_path, capsys):
    cli.main(["--list", "--workspace", str(tmp_path)])
    assert capsys.readouterr().out == "No mnemonic bookmarks set.\n"


def test_list_bookmarks(prefs, tmp_path, capsys):
    store = build_store(tmp_path, prefs)
    store.create("init", "file:///work/a.ts", 0, "")
    store.create("bug", "file:///work/b.ts", 41, "")

    cli.main(["--list", "-w", str(tmp_path)])
    assert capsys.readouterr().out.splitlines() == [
        "  init  /work/a.ts:1",
        "  bug   /work/b.ts:42",
    ]


def test_runs_app(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(
        "mnemonic_bookmarks.app.run_app",
        lambda workspace, files: calls.append((workspace, files)),
    )
    cli.main(["-w", str(tmp_path), "a.ts", "b.ts"])
    assert calls == [(tmp_path, ["a.ts", "b.ts"])]


def test_app_failure_exits_nonzero(monkeypatch, tmp_path):
    def boom(workspace, files):
        raise RuntimeError("broken")

    monkeypatch.setattr("mnemonic_bookmarks.app.run_app", boom)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-w", str(tmp_path)])
    assert excinfo.value.code == 1


def test_log_file(prefs, tmp_path):
    log_path = tmp_path / "logs" / "debug.log"
    before = list(logger.handlers)
    try:
        cli.main(["--list", "-w", str(tmp_path), "--log-file", str(log_path)])
        logger.debug("hello from the test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the test" in log_path.read_text()
    finally:
        for handler in logger.handlers[len(before):]:
            handler.close()
        logger.handlers[:] = before
        logger.setLevel(logging.NOTSET)


class TestSearchRadiusOption:
    def test_saves_radius(self, tmp_path, monkeypatch, capsys):
        prefs_path = tmp_path / "preferences.yaml"
        monkeypatch.setattr("mnemonic_bookmarks.preferences.PREFS_PATH", prefs_path)

        cli.main(["--search-radius", "35"])

        assert capsys.readouterr().out == "Search radius set to 35.\n"
        assert load_preferences(prefs_path).anchoring.search_radius == 35

    def test_keeps_other_settings(self, tmp_path, monkeypatch):
        prefs_path = tmp_path / "preferences.yaml"
        prefs_path.write_text("watch:\n  enabled: false\n")
        monkeypatch.setattr("mnemonic_bookmarks.preferences.PREFS_PATH", prefs_path)

        cli.main(["--search-radius", "0"])

        prefs = load_preferences(prefs_path)
        assert prefs.anchoring.search_radius == 0
        assert prefs.watch.enabled is False

    def test_negative_rejected(self, tmp_path, monkeypatch):
        prefs_path = tmp_path / "preferences.yaml"
        monkeypatch.setattr("mnemonic_bookmarks.preferences.PREFS_PATH", prefs_path)

        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--search-radius", "-3"])
        assert excinfo.value.code == 2
        assert not prefs_path.exists()
