"""Persistence protocol contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from persistence.models import DocumentRef, EntryKind
from utils.frontmatter import MetadataValue


class DocumentStore(Protocol):
    """Vault storage and metadata cache the indexer runs against.

    Metadata comes from the store's own cache and may lag the most recent
    write; callers never assume it reflects text they have just written.
    """

    async def list_documents(self, extension: str | None = "md") -> list[DocumentRef]: ...

    async def entry_kind(self, path: str) -> EntryKind | None: ...

    async def read_text(self, ref: DocumentRef) -> str: ...

    async def write_text(self, ref: DocumentRef, text: str) -> None: ...

    async def create_document(self, path: str, text: str) -> DocumentRef: ...

    async def create_folder(self, path: str) -> None: ...

    async def ensure_folder(self, path: str) -> None: ...

    async def metadata_of(self, ref: DocumentRef) -> dict[str, MetadataValue]: ...

    async def set_metadata_fields(self, ref: DocumentRef, fields: Mapping[str, Any]) -> None: ...


__all__ = ["DocumentStore"]
