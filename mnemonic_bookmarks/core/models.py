"""Bookmark record and helpers for mnemonics and resource identifiers."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from pathlib import Path
from urllib.parse import unquote, urlparse

from .errors import InvalidMnemonicFormat

MNEMONIC_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_mnemonic(mnemonic: str) -> bool:
    return bool(MNEMONIC_PATTERN.fullmatch(mnemonic))


def validate_mnemonic(mnemonic: str) -> str:
    """Return *mnemonic* unchanged, or raise :class:`InvalidMnemonicFormat`."""
    if not is_valid_mnemonic(mnemonic):
        raise InvalidMnemonicFormat(mnemonic)
    return mnemonic


def resource_for_path(path: str | Path) -> str:
    """Canonical ``file://`` URI for a filesystem path."""
    return Path(path).expanduser().resolve().as_uri()


def path_for_resource(resource: str) -> Path:
    """Inverse of :func:`resource_for_path`; plain paths pass through."""
    parsed = urlparse(resource)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(resource)


@dataclass
class Bookmark:
    """A named pointer to one line of one document.

    ``resource`` never changes after creation.  ``line`` and ``fingerprint``
    are only rewritten together, by the reanchor pass.
    """

    mnemonic: str
    resource: str
    line: int
    fingerprint: str = ""

    @property
    def path(self) -> Path:
        return path_for_resource(self.resource)

    def location_label(self) -> str:
        """``<fs path>:<1-based line>`` as shown in pickers."""
        return f"{self.path}:{self.line + 1}"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Bookmark:
        """Build from a persisted record.

        Older state stored ``filePath`` instead of ``resource`` and had no
        fingerprint; both shapes are accepted.
        """
        resource = data.get("resource", data.get("filePath"))
        if not isinstance(resource, str):
            raise ValueError(f"bookmark record has no resource: {data!r}")
        return cls(
            mnemonic=str(data["mnemonic"]),
            resource=resource,
            line=int(data["line"]),
            fingerprint=str(data.get("fingerprint") or ""),
        )
