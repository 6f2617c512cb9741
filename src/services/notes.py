"""Create notes from templates under a project document."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from core.config import Settings
from core.errors import PreconditionError
from persistence.contracts import DocumentStore
from persistence.models import DocumentRef, join_path, normalize_path
from schemas.responses import NoteResult
from services.templates import TemplateProcessor
from utils.frontmatter import coerce_value, load_frontmatter
from utils.text import sanitize_note_name

logger = logging.getLogger(__name__)

TemplatePicker = Callable[[list[DocumentRef]], Awaitable[DocumentRef | None]]
FileNamePrompt = Callable[[], Awaitable[str | None]]


class NoteCreator:
    def __init__(
        self,
        store: DocumentStore,
        settings: Settings,
        processor: TemplateProcessor | None = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._processor = processor or TemplateProcessor()

    async def list_templates(self) -> list[DocumentRef]:
        documents = await self._store.list_documents()
        folder = normalize_path(self._settings.template_folder or "")
        if not folder:
            return documents
        return [ref for ref in documents if ref.path.startswith(f"{folder}/")]

    async def new_note_path(self, file_name: str, folder: str) -> str:
        """Pick a free path in ``folder``, numbering the name on collision."""
        sanitized = sanitize_note_name(file_name.strip())
        name = sanitized if sanitized.endswith(".md") else f"{sanitized}.md"
        stem = name[:-3]
        candidate = join_path(folder, name)
        counter = 1
        while await self._store.entry_kind(candidate) is not None:
            candidate = join_path(folder, f"{stem} {counter}.md")
            counter += 1
        return candidate

    async def create_note_from_project(
        self,
        project_ref: DocumentRef,
        pick_template: TemplatePicker,
        prompt_file_name: FileNamePrompt,
    ) -> NoteResult | None:
        """Create a note next to ``project_ref`` from a chosen template.

        Returns None when the user cancels either prompt; nothing is written.
        """
        raw = load_frontmatter(await self._store.read_text(project_ref))
        metadata = {key: coerce_value(value) for key, value in raw.items()}
        if not metadata:
            raise PreconditionError("Project top file has no frontmatter")
        project = metadata.get("project")
        if project is None or not str(project).strip():
            raise PreconditionError('Project top file has no "project" field in frontmatter')

        template = await pick_template(await self.list_templates())
        if template is None:
            return None
        file_name = await prompt_file_name()
        if file_name is None or not file_name.strip():
            return None

        # frontmatter keeps the parent's YAML types; templates see display text
        fields = [name for name in self._settings.inherited_frontmatter_fields if name in raw]
        inherited = {name: metadata[name] for name in fields}
        variables = {"title": file_name.strip(), "project": project, **inherited}
        content = self._processor.process(await self._store.read_text(template), variables)

        path = await self.new_note_path(file_name, project_ref.folder)
        ref = await self._store.create_document(path, content)
        if fields:
            await self._store.set_metadata_fields(ref, {name: raw[name] for name in fields})
        logger.info("Created note %s from template %s", ref.path, template.path)
        return NoteResult(
            project=str(project),
            path=ref.path,
            template_path=template.path,
            inherited=inherited,
        )


__all__ = ["FileNamePrompt", "NoteCreator", "TemplatePicker"]
