"""Lightweight persistence records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Literal

EntryKind = Literal["file", "folder"]


@dataclass(frozen=True, order=True)
class DocumentRef:
    """A document addressed by its vault-relative POSIX path."""

    path: str

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix.lstrip(".")

    @property
    def folder(self) -> str:
        parent = PurePosixPath(self.path).parent.as_posix()
        return "" if parent == "." else parent


def normalize_path(path: str) -> str:
    """Normalize separators and strip surrounding slashes."""
    parts = [part for part in path.replace("\\", "/").split("/") if part and part != "."]
    return "/".join(parts)


def join_path(folder: str, name: str) -> str:
    return f"{folder}/{name}" if folder else name


__all__ = ["DocumentRef", "EntryKind", "join_path", "normalize_path"]
