"""Entry point for the Mnemonic Bookmarks CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .log import log_to_file, logger
from .preferences import load_preferences, save_search_radius


def _print_bookmarks(workspace: Path) -> None:
    """Print the workspace's bookmarks, one per line."""
    from .app import build_store

    store = build_store(workspace, load_preferences())
    bookmarks = store.load_all()
    if not bookmarks:
        print("No mnemonic bookmarks set.")
        return
    width = max(len(b.mnemonic) for b in bookmarks)
    for b in bookmarks:
        print(f"  {b.mnemonic:<{width}}  {b.location_label()}")


def main(argv: list[str] | None = None) -> None:
    """Run Mnemonic Bookmarks."""
    parser = argparse.ArgumentParser(
        prog="mnemonic-bookmarks",
        description="Named line bookmarks that follow their text as files change",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"mnemonic-bookmarks {__version__}",
    )
    parser.add_argument(
        "--workspace",
        "-w",
        type=Path,
        default=Path.cwd(),
        help="Project directory whose bookmarks to use (default: current directory)",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="Print bookmarks and exit",
    )
    parser.add_argument(
        "--search-radius",
        type=int,
        metavar="N",
        help="Save how many lines above/below to search for a moved bookmark, then exit",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write debug logging to this file",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Files to open",
    )

    args = parser.parse_args(argv)

    if args.log_file:
        log_to_file(args.log_file)

    if args.search_radius is not None:
        if args.search_radius < 0:
            parser.error("--search-radius must be 0 or more")
        save_search_radius(args.search_radius)
        print(f"Search radius set to {args.search_radius}.")
        return

    if args.list:
        _print_bookmarks(args.workspace)
        return

    try:
        from .app import run_app

        run_app(args.workspace, args.files)
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in mnemonic-bookmarks", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
