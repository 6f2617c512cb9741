"""Typer CLI entrypoint for project index maintenance."""

from __future__ import annotations

from importlib import import_module
from pathlib import Path

import typer

from core.logging import configure_logging
from project_indexer import __version__
from .common import get_state

_SUBCOMMAND_SPECS: list[tuple[str, str]] = [
    ("index", "cli.commands.index"),
    ("note", "cli.commands.note"),
    ("config", "cli.commands.config"),
]

app = typer.Typer(
    help="Keep project index notes in a markdown vault in sync with their notes.",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
    vault: Path | None = typer.Option(
        None,
        "--vault",
        file_okay=False,
        help="Vault root folder (default: VAULT_PATH or the current directory)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: LOG_LEVEL or INFO)",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    state = get_state(ctx)
    state.vault = vault
    configure_logging((log_level or state.settings().log_level).upper())


def _register_subcommands() -> None:
    for name, module_path in _SUBCOMMAND_SPECS:
        module = import_module(module_path)
        app.add_typer(module.app, name=name)


_register_subcommands()


def main() -> None:
    app()


__all__ = ["app", "main"]
