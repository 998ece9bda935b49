"""User preferences for Mnemonic Bookmarks.

Loads settings from ~/.mnemonic-bookmarks/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger

DATA_DIR = Path.home() / ".mnemonic-bookmarks"
PREFS_PATH = DATA_DIR / "preferences.yaml"

_DEFAULT_YAML = """\
# Mnemonic Bookmarks Preferences
# Delete this file to reset to defaults.

anchoring:
  search_radius: 20              # lines searched above/below for a moved bookmark
  fingerprint_length: 40         # characters of line text used to recognise it

storage:
  data_dir: ""                   # where bookmark state lives (empty = ~/.mnemonic-bookmarks)

decorations:
  enabled: true                  # show [mnemonic] labels next to bookmarked lines
  color: "#888888"               # label color

watch:
  enabled: true                  # reanchor bookmarks in files changed by other tools
  interval: 2.0                  # seconds between disk checks
"""


@dataclass
class AnchoringPreferences:
    """Reanchoring parameters."""

    search_radius: int = 20
    fingerprint_length: int = 40


@dataclass
class StoragePreferences:
    data_dir: Path = DATA_DIR


@dataclass
class DecorationPreferences:
    enabled: bool = True
    color: str = "#888888"


@dataclass
class WatchPreferences:
    enabled: bool = True
    interval: float = 2.0


@dataclass
class Preferences:
    """Top-level preferences."""

    anchoring: AnchoringPreferences = field(default_factory=AnchoringPreferences)
    storage: StoragePreferences = field(default_factory=StoragePreferences)
    decorations: DecorationPreferences = field(default_factory=DecorationPreferences)
    watch: WatchPreferences = field(default_factory=WatchPreferences)


def _apply(prefs: Preferences, data: dict) -> None:
    adata = data.get("anchoring")
    if isinstance(adata, dict):
        if "search_radius" in adata:
            radius = int(adata["search_radius"])
            if radius >= 0:
                prefs.anchoring.search_radius = radius
        if "fingerprint_length" in adata:
            length = int(adata["fingerprint_length"])
            if length >= 1:
                prefs.anchoring.fingerprint_length = length
    sdata = data.get("storage")
    if isinstance(sdata, dict) and sdata.get("data_dir"):
        prefs.storage.data_dir = Path(str(sdata["data_dir"])).expanduser()
    ddata = data.get("decorations")
    if isinstance(ddata, dict):
        if "enabled" in ddata:
            prefs.decorations.enabled = bool(ddata["enabled"])
        if "color" in ddata:
            prefs.decorations.color = str(ddata["color"])
    wdata = data.get("watch")
    if isinstance(wdata, dict):
        if "enabled" in wdata:
            prefs.watch.enabled = bool(wdata["enabled"])
        if "interval" in wdata:
            interval = float(wdata["interval"])
            if interval > 0:
                prefs.watch.interval = interval


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if isinstance(data, dict):
                _apply(prefs, data)
        except (OSError, yaml.YAMLError, TypeError, ValueError):
            logger.debug("invalid preferences file %s", path, exc_info=True)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs


def save_search_radius(radius: int, path: Path | None = None) -> None:
    """Persist the search radius to the preferences file.

    Surgically updates only the search_radius value, preserving the rest of
    the file (including user comments) as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        if re.search(r"^\s+search_radius:", text, re.MULTILINE):
            text = re.sub(
                r"^(\s+search_radius:)\s*\S+(.*)$",
                f"\\1 {radius}\\2",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(r"^anchoring:", text, re.MULTILINE):
            text = re.sub(
                r"^(anchoring:.*)$",
                f"\\1\n  search_radius: {radius}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\nanchoring:\n  search_radius: {radius}\n"

        path.write_text(text)
    except OSError:
        logger.debug("could not save search radius to %s", path, exc_info=True)
