"""Folder creation shared by the store implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.errors import PreconditionError
from persistence.models import join_path, normalize_path

if TYPE_CHECKING:
    from persistence.contracts import DocumentStore

logger = logging.getLogger(__name__)


async def ensure_folder_path(store: "DocumentStore", path: str) -> None:
    """Create every missing segment of ``path``.

    Raises PreconditionError for a blank path or a segment that exists as a
    file. Check-then-create per segment; not atomic against other writers.
    """
    if not path or not path.strip():
        raise PreconditionError("Project index folder is not configured.")
    current = ""
    for part in normalize_path(path).split("/"):
        current = join_path(current, part)
        kind = await store.entry_kind(current)
        if kind is None:
            logger.debug("Creating folder %s", current)
            await store.create_folder(current)
        elif kind != "folder":
            raise PreconditionError(f"Path exists and is not a folder: {current}")


__all__ = ["ensure_folder_path"]
