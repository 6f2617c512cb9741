"""Internal schema definitions."""

from .tables import Alignment, ParsedTable  # noqa: F401

__all__ = ["Alignment", "ParsedTable"]
