"""Project index commands."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from mdsync.notes import NOTES_HEADER, get_table_from_section
from services.indexer import ProjectIndexer
from ..common import build_commands, build_store, console, emit_json, get_state, parse_list_option, resolve_ref, run


app = typer.Typer(
    help="Create, update and inspect project index notes",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


def _apply_columns(ctx: typer.Context, columns: str | None) -> None:
    parsed = parse_list_option(columns)
    if parsed is not None:
        get_state(ctx).overrides["frontmatter_columns"] = parsed


@app.command("create", help="Create (or refresh) the index for the note's project")
def create_index(
    ctx: typer.Context,
    note: str = typer.Argument(..., metavar="NOTE", help="Note carrying a project field"),
    columns: str | None = typer.Option(
        None, "--columns", help="Comma-separated frontmatter fields shown as columns"
    ),
    json_out: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
) -> None:
    _apply_columns(ctx, columns)
    store, commands = build_commands(get_state(ctx))
    summary = run(commands.create_project_index(resolve_ref(store, note)))
    if summary is None:
        raise typer.Exit(code=1)
    if json_out:
        emit_json(summary.model_dump())


@app.command("update", help="Refresh an existing project index; never creates one")
def update_index(
    ctx: typer.Context,
    note: str = typer.Argument(..., metavar="NOTE", help="Note carrying a project field"),
    columns: str | None = typer.Option(
        None, "--columns", help="Comma-separated frontmatter fields shown as columns"
    ),
    json_out: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
) -> None:
    _apply_columns(ctx, columns)
    store, commands = build_commands(get_state(ctx))
    summary = run(commands.update_project_index(resolve_ref(store, note)))
    if summary is None:
        raise typer.Exit(code=1)
    if json_out:
        emit_json(summary.model_dump())


@app.command("show", help="Print the Notes table of a project's index")
def show_index(
    ctx: typer.Context,
    project: str = typer.Argument(..., metavar="PROJECT"),
) -> None:
    settings = get_state(ctx).settings()
    store = build_store(settings)
    indexer = ProjectIndexer(store, settings)

    async def _load() -> str | None:
        ref = await indexer.find_index_document(project)
        return None if ref is None else await store.read_text(ref)

    content = run(_load())
    if content is None:
        console.print(f"No project index found for: {escape(project)}")
        raise typer.Exit(code=1)
    parsed = get_table_from_section(content, NOTES_HEADER)
    if parsed is None or not parsed.headers:
        console.print(f"No {NOTES_HEADER} table in index for: {escape(project)}")
        raise typer.Exit(code=1)

    table = Table(title=escape(project))
    for header in parsed.headers:
        table.add_column(escape(header))
    for row in parsed.rows:
        cells = [row[index] if index < len(row) else "" for index in range(len(parsed.headers))]
        table.add_row(*[escape(cell) for cell in cells])
    console.print(table)


__all__ = ["app"]
