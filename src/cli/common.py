"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from core.config import Settings, get_settings
from persistence.fs_store import FsDocumentStore
from persistence.models import DocumentRef
from services.commands import ProjectCommands
from services.indexer import ProjectIndexer
from services.notes import NoteCreator

console = Console()
ResultT = TypeVar("ResultT")


@dataclass
class CliState:
    vault: Path | None = None
    overrides: dict[str, Any] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    def settings(self) -> Settings:
        settings = get_settings()
        updates = dict(self.overrides)
        if self.vault is not None:
            updates["vault_path"] = str(self.vault)
        if not updates:
            return settings
        return Settings.model_validate({**settings.model_dump(), **updates})


def get_state(ctx: typer.Context) -> CliState:
    root = ctx.find_root()
    if not isinstance(root.obj, CliState):
        root.obj = CliState()
    return root.obj


def build_store(settings: Settings) -> FsDocumentStore:
    root = Path(settings.vault_path).expanduser()
    if not root.is_dir():
        raise typer.BadParameter(f"Vault folder not found: {root}")
    return FsDocumentStore(root)


def build_commands(state: CliState) -> tuple[FsDocumentStore, ProjectCommands]:
    settings = state.settings()
    store = build_store(settings)

    def notify(message: str) -> None:
        state.messages.append(message)
        console.print(escape(message))

    commands = ProjectCommands(
        ProjectIndexer(store, settings),
        NoteCreator(store, settings),
        notify,
    )
    return store, commands


def resolve_ref(store: FsDocumentStore, note: str) -> DocumentRef:
    """Accept a vault-relative path or a filesystem path inside the vault."""
    candidate = Path(note)
    if not candidate.is_absolute() and not (store.root / candidate).exists() and candidate.exists():
        candidate = candidate.resolve()
    try:
        ref = store.ref_for(candidate)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not (store.root / ref.path).is_file():
        raise typer.BadParameter(f"Note not found in vault: {note}")
    return ref


def run(coro: Coroutine[Any, Any, ResultT]) -> ResultT:
    return asyncio.run(coro)


def prompt_choice(title: str, options: list[str]) -> int | None:
    """Ask for a numbered choice; blank input cancels."""
    if not options:
        console.print(f"[yellow]No {title.lower()} available.[/yellow]")
        return None
    console.print(f"[bold]{title}[/bold]")
    for index, option in enumerate(options, start=1):
        console.print(f"  {index:>2}. {escape(option)}")
    choices = [str(index) for index in range(1, len(options) + 1)]
    answer = Prompt.ask("Select", choices=[*choices, ""], default="", show_choices=False)
    if not answer:
        return None
    return int(answer) - 1


def prompt_text(label: str) -> str | None:
    answer = Prompt.ask(label, default="", show_default=False).strip()
    return answer or None


def parse_list_option(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


__all__ = [
    "CliState",
    "build_commands",
    "build_store",
    "console",
    "emit_json",
    "get_state",
    "parse_list_option",
    "prompt_choice",
    "prompt_text",
    "resolve_ref",
    "run",
]
