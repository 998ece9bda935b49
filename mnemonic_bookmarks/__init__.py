"""Mnemonic Bookmarks - named line bookmarks that follow their text."""

__version__ = "0.1.0"
