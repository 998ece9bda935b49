"""Textual-free core: models, persistence, reanchoring and commands."""
