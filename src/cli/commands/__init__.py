"""CLI command groups."""

__all__ = ["config", "index", "note"]

from . import config, index, note
