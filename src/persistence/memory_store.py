"""In-memory document store for tests and embedding hosts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.errors import PreconditionError
from persistence.folders import ensure_folder_path
from persistence.models import DocumentRef, EntryKind, normalize_path
from utils.frontmatter import MetadataValue, merge_frontmatter, parse_frontmatter


class MemoryDocumentStore:
    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        folders: list[str] | None = None,
    ) -> None:
        self.files: dict[str, str] = {}
        self.folders: set[str] = set()
        self.writes: list[str] = []
        for folder in folders or []:
            self._add_parents(normalize_path(folder) + "/x")
        for path, text in (files or {}).items():
            normalized = normalize_path(path)
            self._add_parents(normalized)
            self.files[normalized] = text

    def _add_parents(self, path: str) -> None:
        parts = path.split("/")[:-1]
        for index in range(1, len(parts) + 1):
            self.folders.add("/".join(parts[:index]))

    async def list_documents(self, extension: str | None = "md") -> list[DocumentRef]:
        refs = (DocumentRef(path) for path in self.files)
        return sorted(ref for ref in refs if extension is None or ref.extension == extension)

    async def entry_kind(self, path: str) -> EntryKind | None:
        normalized = normalize_path(path)
        if normalized in self.folders:
            return "folder"
        if normalized in self.files:
            return "file"
        return None

    async def read_text(self, ref: DocumentRef) -> str:
        try:
            return self.files[ref.path]
        except KeyError as exc:
            raise FileNotFoundError(ref.path) from exc

    async def write_text(self, ref: DocumentRef, text: str) -> None:
        if ref.path not in self.files:
            raise FileNotFoundError(ref.path)
        self.files[ref.path] = text
        self.writes.append(ref.path)

    async def create_document(self, path: str, text: str) -> DocumentRef:
        normalized = normalize_path(path)
        if await self.entry_kind(normalized) is not None:
            raise PreconditionError(f"Path already exists: {path}")
        self._add_parents(normalized)
        self.files[normalized] = text
        self.writes.append(normalized)
        return DocumentRef(normalized)

    async def create_folder(self, path: str) -> None:
        normalized = normalize_path(path)
        if normalized in self.files:
            raise PreconditionError(f"Path already exists: {path}")
        self._add_parents(normalized + "/x")

    async def ensure_folder(self, path: str) -> None:
        await ensure_folder_path(self, path)

    async def metadata_of(self, ref: DocumentRef) -> dict[str, MetadataValue]:
        return parse_frontmatter(await self.read_text(ref))

    async def set_metadata_fields(self, ref: DocumentRef, fields: Mapping[str, Any]) -> None:
        text = await self.read_text(ref)
        updated = merge_frontmatter(text, fields)
        if updated != text:
            await self.write_text(ref, updated)


__all__ = ["MemoryDocumentStore"]
