"""Document watcher - notices files changed on disk and reports their new text.

The :class:`DocumentWatcher` owns the ``watched`` dict and polling logic.
It talks back to the app through callbacks injected at construction time,
keeping it decoupled from Textual and the app class.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from ...log import logger
from ..events import DocumentChanged
from ..models import path_for_resource

# Type alias for the timer handle returned by ``App.set_interval``.
TimerHandle = Any


def read_lines(path: str) -> list[str] | None:
    """Return the lines of *path*, or ``None`` if it can't be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError:
        logger.debug("failed to read %s", path, exc_info=True)
        return None


class DocumentWatcher:
    """Poll a set of documents and dispatch :class:`DocumentChanged` for edits.

    Parameters
    ----------
    dispatch:
        Callback receiving each event (e.g. ``dispatcher.dispatch``).
    set_interval:
        Callback to start a periodic timer (e.g. ``app.set_interval``).
        Must return a handle with a ``.stop()`` method.
    is_open:
        Returns ``True`` for resources the editor has open; those are
        skipped because the editor reports their changes itself.
    interval:
        Seconds between polls.
    """

    def __init__(
        self,
        *,
        dispatch: Callable[[DocumentChanged], object],
        set_interval: Callable[..., TimerHandle] | None = None,
        is_open: Callable[[str], bool] | None = None,
        interval: float = 2.0,
    ) -> None:
        self.watched: dict[str, dict[str, Any]] = {}
        self.interval = interval
        self._timer: TimerHandle | None = None
        self._dispatch = dispatch
        self._set_interval = set_interval
        self._is_open = is_open or (lambda resource: False)

    @property
    def count(self) -> int:
        return len(self.watched)

    def watch(self, resource: str) -> bool:
        """Start watching *resource*.  Returns ``False`` if it isn't a file."""
        if resource in self.watched:
            return True
        path = str(path_for_resource(resource))
        try:
            stat = os.stat(path)
        except OSError:
            return False
        if not os.path.isfile(path):
            return False
        self.watched[resource] = {"path": path, "mtime": stat.st_mtime, "size": stat.st_size}
        self._start_timer()
        return True

    def unwatch(self, resource: str) -> None:
        self.watched.pop(resource, None)
        if not self.watched:
            self._stop_timer()

    def sync(self, resources: set[str]) -> None:
        """Watch exactly *resources* (typically every bookmarked document)."""
        for resource in list(self.watched):
            if resource not in resources:
                self.unwatch(resource)
        for resource in resources:
            self.watch(resource)

    def check(self) -> list[str]:
        """Poll watched files (called by the timer).  Returns resources reported."""
        reported: list[str] = []
        for resource, info in list(self.watched.items()):
            path = info["path"]
            try:
                if not os.path.exists(path):
                    logger.debug("watched document removed: %s", path)
                    del self.watched[resource]
                    continue

                stat = os.stat(path)
                if stat.st_mtime == info["mtime"] and stat.st_size == info["size"]:
                    continue
                info["mtime"] = stat.st_mtime
                info["size"] = stat.st_size

                if self._is_open(resource):
                    continue
                lines = read_lines(path)
                if lines is None:
                    continue
                self._dispatch(DocumentChanged(resource, lines))
                reported.append(resource)
            except OSError:
                logger.debug("document watch check failed for %s", path, exc_info=True)

        if not self.watched:
            self._stop_timer()
        return reported

    def stop(self) -> None:
        self.watched.clear()
        self._stop_timer()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _start_timer(self) -> None:
        if self._timer is None and self._set_interval is not None:
            self._timer = self._set_interval(self.interval, self.check)

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
