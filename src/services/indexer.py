"""Project index documents: bootstrap and Notes table synchronization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath

from core.config import Settings
from core.errors import IndexNotFoundError, PreconditionError
from mdsync.notes import NOTES_HEADER, sync_section_table
from mdsync.tables import render_table
from mdsync.values import link_sort_key, normalize_value, wiki_link
from persistence.contracts import DocumentStore
from persistence.models import DocumentRef, join_path, normalize_path
from schemas.responses import IndexSummary
from services.templates import TemplateProcessor
from utils.frontmatter import MetadataValue, render_frontmatter
from utils.text import sanitize_file_name

logger = logging.getLogger(__name__)

INDEX_TYPES = frozenset({"project_index", "project_top"})
NOTE_COLUMN = "Note"


@dataclass(frozen=True)
class ProjectNote:
    ref: DocumentRef
    metadata: dict[str, MetadataValue]


def is_index_metadata(metadata: dict[str, MetadataValue]) -> bool:
    return metadata.get("type") in INDEX_TYPES


def belongs_to(metadata: dict[str, MetadataValue], project: str) -> bool:
    value = metadata.get("project")
    return value is not None and str(value) == project


class ProjectIndexer:
    def __init__(
        self,
        store: DocumentStore,
        settings: Settings,
        processor: TemplateProcessor | None = None,
    ) -> None:
        self._store = store
        self._settings = settings
        self._processor = processor or TemplateProcessor()

    @property
    def columns(self) -> list[str]:
        return list(self._settings.frontmatter_columns)

    @property
    def headers(self) -> list[str]:
        return [NOTE_COLUMN, *self.columns]

    def index_path(self, project: str) -> str:
        folder = normalize_path((self._settings.project_index_folder or "").strip())
        if not folder:
            raise PreconditionError("Project index folder is not configured.")
        base_name = sanitize_file_name(project)
        if not base_name:
            raise PreconditionError(f"Project name cannot be used as a file name: {project!r}")
        return join_path(folder, f"{base_name}.md")

    async def project_of(self, ref: DocumentRef) -> str:
        """Read the ``project`` field of a member note."""
        metadata = await self._store.metadata_of(ref)
        if not metadata:
            raise PreconditionError(f"Current note has no frontmatter: {ref.path}")
        project = metadata.get("project")
        if project is None or not str(project).strip():
            raise PreconditionError('Current note has no "project" field in frontmatter')
        return str(project)

    async def find_index_document(self, project: str) -> DocumentRef | None:
        path = self.index_path(project)
        kind = await self._store.entry_kind(path)
        if kind is None:
            return None
        if kind != "file":
            raise PreconditionError(f"Index path exists and is not a file: {path}")
        return DocumentRef(path)

    async def ensure_index_document(self, project: str) -> tuple[DocumentRef, bool]:
        """Return the project's index document, creating it when absent."""
        path = self.index_path(project)
        existing = await self.find_index_document(project)
        if existing is not None:
            return existing, False

        content = await self._initial_content(project)
        await self._store.ensure_folder(str(PurePosixPath(path).parent))
        ref = await self._store.create_document(path, content)
        logger.info("Created project index %s", ref.path)
        await self._store.set_metadata_fields(
            ref, {"type": self._settings.index_type, "project": project}
        )
        return ref, True

    async def _initial_content(self, project: str) -> str:
        template_path = normalize_path(self._settings.template_path or "")
        if not (self._settings.use_template and template_path):
            return self.scaffold(project)
        if not PurePosixPath(template_path).suffix:
            template_path = f"{template_path}.md"
        if await self._store.entry_kind(template_path) != "file":
            raise PreconditionError(f"Template not found: {template_path}")
        text = await self._store.read_text(DocumentRef(template_path))
        return self._processor.process(text, {"title": project, "project": project})

    def scaffold(self, project: str) -> str:
        header = render_frontmatter({"type": self._settings.index_type, "project": project})
        return "\n".join([header, f"# {project}", "", f"## {NOTES_HEADER}", ""])

    async def collect_project_notes(self, project: str) -> list[ProjectNote]:
        notes: list[ProjectNote] = []
        for ref in await self._store.list_documents():
            metadata = await self._store.metadata_of(ref)
            if belongs_to(metadata, project) and not is_index_metadata(metadata):
                notes.append(ProjectNote(ref=ref, metadata=metadata))
        return notes

    def build_rows(self, notes: list[ProjectNote]) -> list[list[str]]:
        rows = []
        for note in notes:
            cells = [normalize_value(note.metadata.get(column)) for column in self.columns]
            rows.append([wiki_link(note.ref.basename), *cells])
        rows.sort(key=lambda row: link_sort_key(row[0]))
        return rows

    async def synchronize(self, ref: DocumentRef, project: str) -> IndexSummary:
        """Rewrite the Notes table of ``ref`` from the project's current notes."""
        notes = await self.collect_project_notes(project)
        rows = self.build_rows(notes)
        table_lines = render_table(self.headers, rows)

        content = await self._store.read_text(ref)
        updated = sync_section_table(content, table_lines, NOTES_HEADER)
        changed = updated != content
        if changed:
            await self._store.write_text(ref, updated)
        logger.info(
            "Synchronized %s: %d notes%s", ref.path, len(rows), "" if changed else " (unchanged)"
        )
        return IndexSummary(
            project=project,
            index_path=ref.path,
            changed=changed,
            columns=self.columns,
            notes=[row[0] for row in rows],
        )

    async def create_project_index(self, note_ref: DocumentRef) -> IndexSummary:
        """Create the index for the note's project if needed, then synchronize it."""
        project = await self.project_of(note_ref)
        ref, created = await self.ensure_index_document(project)
        summary = await self.synchronize(ref, project)
        return summary.model_copy(update={"created": created})

    async def update_project_index(self, note_ref: DocumentRef) -> IndexSummary:
        """Synchronize an existing index; never creates one."""
        project = await self.project_of(note_ref)
        ref = await self.find_index_document(project)
        if ref is None:
            raise IndexNotFoundError(project, self.index_path(project))
        return await self.synchronize(ref, project)


__all__ = [
    "INDEX_TYPES",
    "NOTE_COLUMN",
    "ProjectIndexer",
    "ProjectNote",
    "belongs_to",
    "is_index_metadata",
]
