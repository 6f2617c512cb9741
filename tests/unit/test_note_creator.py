from __future__ import annotations

import asyncio
from datetime import date

import pytest

from core.errors import PreconditionError
from persistence.memory_store import MemoryDocumentStore
from persistence.models import DocumentRef
from services.notes import NoteCreator
from utils.frontmatter import load_frontmatter, parse_frontmatter, split_frontmatter

TEMPLATE = "---\nstatus: open\n---\n\n# {{title}}\nProject: {{project}} for {{client}} on {{date}}\n"


@pytest.fixture
def vault_store(make_note):
    def build(**extra: str) -> MemoryDocumentStore:
        files = {
            "projects/Alpha.md": make_note(type="project_top", project="Alpha", client="Acme", owner="me"),
            "templates/meeting.md": TEMPLATE,
            "templates/nested/blank.md": "",
            "other/x.md": "x",
        }
        files.update(extra)
        return MemoryDocumentStore(files)

    return build


@pytest.fixture
def creator_for(make_settings, processor):
    def build(store: MemoryDocumentStore, **overrides) -> NoteCreator:
        overrides.setdefault("inherited_frontmatter_fields", ["project", "client", "missing"])
        return NoteCreator(store, make_settings(**overrides), processor)

    return build


def _picker(path: str):
    async def pick(candidates: list[DocumentRef]) -> DocumentRef | None:
        return next(ref for ref in candidates if ref.path == path)

    return pick


def _name(value: str | None):
    async def prompt() -> str | None:
        return value

    return prompt


def test_list_templates_filters_folder(vault_store, creator_for) -> None:
    store = vault_store()

    templates = asyncio.run(creator_for(store).list_templates())
    everything = asyncio.run(creator_for(store, template_folder="").list_templates())

    assert [ref.path for ref in templates] == ["templates/meeting.md", "templates/nested/blank.md"]
    assert len(everything) == 4


def test_create_note_from_template(vault_store, creator_for) -> None:
    store = vault_store()

    result = asyncio.run(
        creator_for(store).create_note_from_project(
            DocumentRef("projects/Alpha.md"), _picker("templates/meeting.md"), _name("Kickoff")
        )
    )

    assert result is not None
    assert result.path == "projects/Kickoff.md"
    assert result.inherited == {"project": "Alpha", "client": "Acme"}
    text = store.files["projects/Kickoff.md"]
    assert parse_frontmatter(text) == {"status": "open", "project": "Alpha", "client": "Acme"}
    assert split_frontmatter(text)[1] == "\n# Kickoff\nProject: Alpha for Acme on 2024-01-02\n"


def test_inherited_fields_keep_yaml_types(make_note, vault_store, creator_for) -> None:
    store = vault_store(
        **{
            "projects/Beta.md": make_note(
                type="project_top", project="Beta", tags=["work", "q1"], due=date(2024, 5, 1)
            ),
            "templates/summary.md": "Tags: {{tags}} due {{due}}\n",
        }
    )

    result = asyncio.run(
        creator_for(store, inherited_frontmatter_fields=["project", "tags", "due"]).create_note_from_project(
            DocumentRef("projects/Beta.md"), _picker("templates/summary.md"), _name("Review")
        )
    )

    assert result is not None
    assert result.inherited == {"project": "Beta", "tags": "work, q1", "due": "2024-05-01"}
    text = store.files["projects/Review.md"]
    assert load_frontmatter(text) == {"project": "Beta", "tags": ["work", "q1"], "due": date(2024, 5, 1)}
    assert "due: 2024-05-01\n" in text
    assert text.endswith("\nTags: work, q1 due 2024-05-01\n")


def test_create_note_numbers_colliding_names(vault_store, creator_for) -> None:
    store = vault_store(**{"projects/Kickoff.md": "taken", "projects/Kickoff 1.md": "taken"})

    result = asyncio.run(
        creator_for(store).create_note_from_project(
            DocumentRef("projects/Alpha.md"), _picker("templates/nested/blank.md"), _name("Kickoff.md")
        )
    )

    assert result is not None
    assert result.path == "projects/Kickoff 2.md"


def test_file_name_is_sanitized(vault_store, creator_for) -> None:
    store = vault_store()

    result = asyncio.run(
        creator_for(store).create_note_from_project(
            DocumentRef("projects/Alpha.md"), _picker("templates/nested/blank.md"), _name("Q1: plan/draft")
        )
    )

    assert result is not None
    assert result.path == "projects/Q1- plan-draft.md"


@pytest.mark.parametrize(
    ("picker", "name"),
    [
        (None, "Kickoff"),
        ("templates/meeting.md", None),
        ("templates/meeting.md", "   "),
    ],
)
def test_cancelled_prompts_write_nothing(picker, name, vault_store, creator_for) -> None:
    store = vault_store()

    async def cancel(candidates):
        return None

    result = asyncio.run(
        creator_for(store).create_note_from_project(
            DocumentRef("projects/Alpha.md"),
            _picker(picker) if picker else cancel,
            _name(name),
        )
    )

    assert result is None
    assert store.writes == []


def test_project_document_needs_project_field(make_note, vault_store, creator_for) -> None:
    store = vault_store(**{"projects/Bare.md": make_note(type="project_top")})

    with pytest.raises(PreconditionError, match='no "project" field'):
        asyncio.run(
            creator_for(store).create_note_from_project(
                DocumentRef("projects/Bare.md"), _picker("templates/meeting.md"), _name("x")
            )
        )
    assert store.writes == []
