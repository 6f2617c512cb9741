"""Schema package for command results and internal contracts."""

from .internal.tables import Alignment, ParsedTable
from .responses import IndexSummary, NoteResult

__all__ = ["Alignment", "IndexSummary", "NoteResult", "ParsedTable"]
