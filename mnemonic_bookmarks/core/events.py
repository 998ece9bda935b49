"""Host events and a synchronous dispatcher.

The host (the Textual app, the disk watcher, or a test) turns its own
notifications into these messages; consumers subscribe by event type and
never see the host's callback machinery.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Sequence


@dataclass(frozen=True)
class DocumentChanged:
    """The text of *resource* changed; *lines* is its full new content."""

    resource: str
    lines: Sequence[str]


@dataclass(frozen=True)
class ActiveViewChanged:
    resource: str | None


@dataclass(frozen=True)
class DocumentOpened:
    resource: str


@dataclass(frozen=True)
class VisibleViewsChanged:
    resources: tuple[str, ...] = field(default_factory=tuple)


HostEvent = DocumentChanged | ActiveViewChanged | DocumentOpened | VisibleViewsChanged


class EventDispatcher:
    """Deliver events to subscribers, in subscription order, on the caller's thread.

    Each dispatch runs every handler to completion before returning, so events
    are handled strictly in the order the host delivers them.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def dispatch(self, event: HostEvent) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)
