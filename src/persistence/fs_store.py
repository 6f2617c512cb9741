"""Filesystem vault store: markdown files under a root directory."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from core.errors import PreconditionError
from persistence.folders import ensure_folder_path
from persistence.models import DocumentRef, EntryKind, normalize_path
from utils.frontmatter import MetadataValue, merge_frontmatter, parse_frontmatter


class FsDocumentStore:
    """Document store over a vault directory.

    Blocking file I/O runs in a worker thread so every call is a suspension
    point for the caller's event loop.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: str) -> Path:
        target = (self._root / normalize_path(path)).resolve()
        if target != self._root and self._root not in target.parents:
            raise PreconditionError(f"Path escapes the vault: {path}")
        return target

    def ref_for(self, path: str | Path) -> DocumentRef:
        """Build a ref from a vault-relative or absolute path inside the vault."""
        candidate = Path(path)
        if candidate.is_absolute():
            resolved = candidate.resolve()
            if self._root not in resolved.parents:
                raise PreconditionError(f"Path is outside the vault: {path}")
            return DocumentRef(resolved.relative_to(self._root).as_posix())
        return DocumentRef(normalize_path(str(path)))

    async def list_documents(self, extension: str | None = "md") -> list[DocumentRef]:
        return await asyncio.to_thread(self._list_documents, extension)

    async def entry_kind(self, path: str) -> EntryKind | None:
        return await asyncio.to_thread(self._entry_kind, path)

    async def read_text(self, ref: DocumentRef) -> str:
        return await asyncio.to_thread(self._read, ref.path)

    async def write_text(self, ref: DocumentRef, text: str) -> None:
        await asyncio.to_thread(self._write, ref.path, text)

    async def create_document(self, path: str, text: str) -> DocumentRef:
        return await asyncio.to_thread(self._create, path, text)

    async def create_folder(self, path: str) -> None:
        await asyncio.to_thread(self.resolve(path).mkdir)

    async def ensure_folder(self, path: str) -> None:
        await ensure_folder_path(self, path)

    async def metadata_of(self, ref: DocumentRef) -> dict[str, MetadataValue]:
        return parse_frontmatter(await self.read_text(ref))

    async def set_metadata_fields(self, ref: DocumentRef, fields: Mapping[str, Any]) -> None:
        text = await self.read_text(ref)
        updated = merge_frontmatter(text, fields)
        if updated != text:
            await self.write_text(ref, updated)

    def _list_documents(self, extension: str | None) -> list[DocumentRef]:
        pattern = f"*.{extension}" if extension else "*"
        refs = [
            DocumentRef(path.relative_to(self._root).as_posix())
            for path in self._root.rglob(pattern)
            if path.is_file() and not _is_hidden(path.relative_to(self._root))
        ]
        return sorted(refs)

    def _entry_kind(self, path: str) -> EntryKind | None:
        target = self.resolve(path)
        if target.is_dir():
            return "folder"
        if target.exists():
            return "file"
        return None

    def _read(self, path: str) -> str:
        return self.resolve(path).read_text(encoding="utf-8")

    def _write(self, path: str, text: str) -> None:
        self.resolve(path).write_text(text, encoding="utf-8")

    def _create(self, path: str, text: str) -> DocumentRef:
        target = self.resolve(path)
        if target.exists():
            raise PreconditionError(f"Path already exists: {path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("x", encoding="utf-8") as handle:
            handle.write(text)
        return DocumentRef(normalize_path(path))


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


__all__ = ["FsDocumentStore"]
