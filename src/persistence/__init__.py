"""Persistence subsystem exports."""

from persistence.contracts import DocumentStore
from persistence.fs_store import FsDocumentStore
from persistence.memory_store import MemoryDocumentStore
from persistence.models import DocumentRef

__all__ = ["DocumentRef", "DocumentStore", "FsDocumentStore", "MemoryDocumentStore"]
