"""Results returned by the user-facing commands."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class IndexSummary(BaseModel):
    project: str
    index_path: str
    created: bool = False
    changed: bool = False
    columns: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class NoteResult(BaseModel):
    project: str
    path: str
    template_path: str
    inherited: dict[str, str | int | float | bool | None] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


__all__ = ["IndexSummary", "NoteResult"]
