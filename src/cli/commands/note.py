"""Note-from-template commands."""

from __future__ import annotations

import typer

from core.errors import PreconditionError
from persistence.models import DocumentRef, normalize_path
from ..common import build_commands, get_state, prompt_choice, prompt_text, resolve_ref, run


app = typer.Typer(
    help="Create notes inside a project",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("new", help="Create a note from a template next to a project note")
def new_note(
    ctx: typer.Context,
    project_note: str = typer.Argument(..., metavar="PROJECT_NOTE"),
    template: str | None = typer.Option(
        None, "--template", help="Vault-relative template path (prompted when omitted)"
    ),
    name: str | None = typer.Option(None, "--name", help="New note file name"),
) -> None:
    state = get_state(ctx)
    store, commands = build_commands(state)
    cancelled = False

    async def pick_template(candidates: list[DocumentRef]) -> DocumentRef | None:
        nonlocal cancelled
        if template is not None:
            wanted = normalize_path(template)
            for ref in candidates:
                if ref.path in (wanted, f"{wanted}.md"):
                    return ref
            raise PreconditionError(f"Template not found: {template}")
        index = prompt_choice("Templates", [ref.path for ref in candidates])
        if index is None:
            cancelled = True
            return None
        return candidates[index]

    async def prompt_file_name() -> str | None:
        nonlocal cancelled
        answer = name if name is not None else prompt_text("File name")
        if not answer:
            cancelled = True
        return answer

    result = run(
        commands.create_note_from_project(
            resolve_ref(store, project_note), pick_template, prompt_file_name
        )
    )
    if result is None:
        if cancelled:
            typer.echo("Cancelled.")
            return
        raise typer.Exit(code=1)


__all__ = ["app"]
