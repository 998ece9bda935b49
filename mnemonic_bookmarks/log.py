"""Package logger.

Textual owns the terminal while the app runs, so nothing is emitted unless
the CLI attaches a handler (``--log-file``).
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("mnemonic_bookmarks")
logger.addHandler(logging.NullHandler())


def log_to_file(path: Path) -> None:
    """Send DEBUG and above to *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
