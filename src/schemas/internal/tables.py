"""Markdown table contracts."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

Alignment = Literal["left", "center", "right"]


class ParsedTable(BaseModel):
    """Headers and data rows read back from markdown table lines.

    Rows keep whatever width the source lines had; hand-edited tables may be
    ragged.
    """

    headers: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)


__all__ = ["Alignment", "ParsedTable"]
