"""User-facing command boundary: run an action, report the outcome once."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from core.errors import ProjectIndexerError
from persistence.models import DocumentRef
from schemas.responses import IndexSummary, NoteResult
from services.indexer import ProjectIndexer
from services.notes import FileNamePrompt, NoteCreator, TemplatePicker

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")
Notifier = Callable[[str], None]


class ProjectCommands:
    """Wraps the services so that failures become notifications.

    Expected failures carry their own message; anything else is logged with
    a traceback and reported generically. Nothing is retried or rolled back.
    """

    def __init__(
        self,
        indexer: ProjectIndexer,
        note_creator: NoteCreator,
        notify: Notifier,
    ) -> None:
        self.indexer = indexer
        self.note_creator = note_creator
        self._notify = notify

    async def _run(
        self, action: Awaitable[ResultT], failure: str
    ) -> ResultT | None:
        try:
            return await action
        except ProjectIndexerError as exc:
            self._notify(str(exc))
        except Exception:
            logger.exception(failure)
            self._notify(failure)
        return None

    async def create_project_index(self, note_ref: DocumentRef) -> IndexSummary | None:
        summary = await self._run(
            self.indexer.create_project_index(note_ref),
            "Failed to create project index",
        )
        if summary is not None:
            verb = "created" if summary.created else "updated"
            self._notify(f"Project index {verb} for: {summary.project}")
        return summary

    async def update_project_index(self, note_ref: DocumentRef) -> IndexSummary | None:
        summary = await self._run(
            self.indexer.update_project_index(note_ref),
            "Failed to update project index",
        )
        if summary is not None:
            self._notify(f"Project index updated for: {summary.project}")
        return summary

    async def create_note_from_project(
        self,
        project_ref: DocumentRef,
        pick_template: TemplatePicker,
        prompt_file_name: FileNamePrompt,
    ) -> NoteResult | None:
        result = await self._run(
            self.note_creator.create_note_from_project(
                project_ref, pick_template, prompt_file_name
            ),
            "Failed to create note from template",
        )
        if result is not None:
            self._notify(f"Created new note from template: {result.path}")
        return result


__all__ = ["Notifier", "ProjectCommands"]
