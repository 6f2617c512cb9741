"""Markdown table rendering and parsing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from schemas.internal.tables import Alignment, ParsedTable

_SEPARATORS: dict[str, str] = {
    "left": ":---",
    "center": ":---:",
    "right": "---:",
}


def _format_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_table(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    alignments: Sequence[Alignment | None] | None = None,
) -> list[str]:
    """Render a header row, a separator row and one line per data row.

    Rows are fitted to the header width: missing cells render empty and
    extra cells are dropped.
    """
    width = len(headers)
    lines = [_format_row(headers)]

    separators = []
    for index in range(width):
        align = alignments[index] if alignments and index < len(alignments) else None
        separators.append(_SEPARATORS.get(align or "left", _SEPARATORS["left"]))
    lines.append(_format_row(separators))

    for row in rows:
        fitted = [row[index] if index < len(row) and row[index] else "" for index in range(width)]
        lines.append(_format_row(fitted))
    return lines


def split_row(line: str) -> list[str]:
    """Split a table line into trimmed cells, dropping the outer pipe segments."""
    segments = line.strip().split("|")
    if segments and not segments[0].strip():
        segments = segments[1:]
    if segments and not segments[-1].strip():
        segments = segments[:-1]
    return [segment.strip() for segment in segments]


def is_table_line(line: str) -> bool:
    return line.strip().startswith("|")


def parse_table(lines: Sequence[str]) -> ParsedTable:
    """Parse markdown table lines back into headers and rows.

    The second line is taken as the separator without validation. Later
    lines that do not start with a pipe are skipped.
    """
    if len(lines) < 3:
        return ParsedTable()
    headers = split_row(lines[0])
    rows = [split_row(line) for line in lines[2:] if is_table_line(line)]
    return ParsedTable(headers=headers, rows=rows)


__all__ = ["is_table_line", "parse_table", "render_table", "split_row"]
