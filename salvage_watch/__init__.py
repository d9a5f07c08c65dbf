"""Salvage-yard inventory watcher."""

__version__ = "0.1.0"
