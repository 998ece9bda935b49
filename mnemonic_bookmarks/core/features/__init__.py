"""Feature modules with no UI dependencies."""
