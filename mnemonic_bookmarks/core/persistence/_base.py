"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path

from ...log import logger


class JsonStore:
    """Whole-file JSON store: read everything, write everything."""

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, returning ``{}`` on any error."""
        try:
            if self.path.exists():
                return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.debug("failed to load JSON store from %s", self.path, exc_info=True)
        return {}

    def save_raw(self, data: dict | list) -> None:
        """Write *data* as pretty-printed JSON, creating parents as needed.

        Keys keep their insertion order.  Errors propagate: a failed write is
        fatal to the caller's operation.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)
