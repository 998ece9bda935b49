"""Tests for DocumentWatcher: disk changes become DocumentChanged events."""

from __future__ import annotations

import os

from mnemonic_bookmarks.core.events import DocumentChanged
from mnemonic_bookmarks.core.features.file_watch import DocumentWatcher, read_lines
from mnemonic_bookmarks.core.models import resource_for_path


class FakeTimer:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def stop(self):
        self.stopped = True


class Harness:
    """Collects dispatched events and timers."""

    def __init__(self, open_resources=()):
        self.events: list[DocumentChanged] = []
        self.timers: list[FakeTimer] = []
        self.open_resources = set(open_resources)

    def set_interval(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    def watcher(self, interval=2.0) -> DocumentWatcher:
        return DocumentWatcher(
            dispatch=self.events.append,
            set_interval=self.set_interval,
            is_open=lambda resource: resource in self.open_resources,
            interval=interval,
        )


def _write(path, text):
    path.write_text(text)
    # Bump mtime so the change is visible even on coarse-grained filesystems.
    stat = os.stat(path)
    os.utime(path, (stat.st_atime + 10, stat.st_mtime + 10))


class TestReadLines:
    def test_reads(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("one\ntwo\n")
        assert read_lines(str(path)) == ["one", "two"]

    def test_missing(self, tmp_path):
        assert read_lines(str(tmp_path / "missing")) is None


class TestDocumentWatcher:
    def test_watch_missing_file(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        assert watcher.watch(resource_for_path(tmp_path / "missing.ts")) is False
        assert watcher.count == 0
        assert harness.timers == []

    def test_watch_directory(self, tmp_path):
        watcher = Harness().watcher()
        assert watcher.watch(resource_for_path(tmp_path)) is False

    def test_watch_starts_single_timer(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher(interval=0.5)
        for name in ("a.ts", "b.ts"):
            (tmp_path / name).write_text("x\n")
            assert watcher.watch(resource_for_path(tmp_path / name))
        assert watcher.count == 2
        assert len(harness.timers) == 1
        assert harness.timers[0].interval == 0.5
        assert harness.timers[0].callback == watcher.check

    def test_unchanged_file_not_reported(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        watcher.watch(resource_for_path(path))
        assert watcher.check() == []
        assert harness.events == []

    def test_change_dispatches_new_lines(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        resource = resource_for_path(path)
        watcher.watch(resource)

        _write(path, "new\nx\n")
        assert watcher.check() == [resource]
        assert harness.events == [DocumentChanged(resource, ["new", "x"])]
        # Reported once per change.
        assert watcher.check() == []

    def test_open_documents_skipped(self, tmp_path):
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        resource = resource_for_path(path)
        harness = Harness(open_resources=[resource])
        watcher = harness.watcher()
        watcher.watch(resource)

        _write(path, "changed\n")
        assert watcher.check() == []
        assert harness.events == []

    def test_deleted_file_dropped_and_timer_stopped(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        watcher.watch(resource_for_path(path))

        path.unlink()
        assert watcher.check() == []
        assert watcher.count == 0
        assert harness.timers[0].stopped

    def test_sync_matches_resources(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        paths = [tmp_path / n for n in ("a.ts", "b.ts", "c.ts")]
        for p in paths:
            p.write_text("x\n")
        a, b, c = (resource_for_path(p) for p in paths)

        watcher.sync({a, b})
        assert set(watcher.watched) == {a, b}
        watcher.sync({b, c})
        assert set(watcher.watched) == {b, c}
        watcher.sync(set())
        assert watcher.count == 0
        assert harness.timers[0].stopped

    def test_stop(self, tmp_path):
        harness = Harness()
        watcher = harness.watcher()
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        watcher.watch(resource_for_path(path))
        watcher.stop()
        assert watcher.count == 0
        assert harness.timers[0].stopped

    def test_without_timer_factory(self, tmp_path):
        events = []
        watcher = DocumentWatcher(dispatch=events.append)
        path = tmp_path / "a.ts"
        path.write_text("x\n")
        resource = resource_for_path(path)
        assert watcher.watch(resource)
        _write(path, "y\n")
        watcher.check()
        assert events == [DocumentChanged(resource, ["y"])]
