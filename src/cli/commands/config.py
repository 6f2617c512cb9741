"""Configuration inspection commands."""

from __future__ import annotations

import typer

from ..common import emit_json, get_state


app = typer.Typer(
    help="Inspect effective configuration",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


@app.command("show", help="Show the effective configuration")
def show_config(
    ctx: typer.Context,
    json_out: bool = typer.Option(True, "--json/--no-json", help="Output JSON"),
) -> None:
    payload = get_state(ctx).settings().model_dump()
    if json_out:
        emit_json(payload)
        return
    for key, value in payload.items():
        typer.echo(f"{key}={value}")


__all__ = ["app"]
