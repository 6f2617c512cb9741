"""Splice a freshly rendered table into a document section."""

from __future__ import annotations

from typing import Sequence

from mdsync.sections import (
    DEFAULT_LEVEL,
    append_header,
    get_section_content,
    has_header,
    replace_section_content,
)
from mdsync.tables import is_table_line, parse_table
from schemas.internal.tables import ParsedTable

NOTES_HEADER = "Notes"


def table_block(section_lines: Sequence[str]) -> list[str]:
    """Return the first contiguous run of table lines in a section."""
    block: list[str] = []
    for line in section_lines:
        if is_table_line(line):
            block.append(line)
        elif block:
            break
    return block


def get_table_from_section(
    content: str, header_text: str, level: int = DEFAULT_LEVEL
) -> ParsedTable | None:
    block = table_block(get_section_content(content, header_text, level))
    if not block:
        return None
    return parse_table(block)


def rebuild_section(section_lines: Sequence[str], table_lines: Sequence[str]) -> list[str]:
    """Build the new section body around ``table_lines``.

    The body opens with one blank line. An existing table is replaced in
    place; every table line in the section is dropped and the new table is
    emitted once, at the first one. Non-table lines keep their order. A
    section without a table gets the table first, then its prose after a
    blank line.
    """
    body: list[str] = [""]
    remaining = list(section_lines)
    while remaining and not remaining[0].strip():
        remaining.pop(0)

    if any(is_table_line(line) for line in remaining):
        replaced = False
        for line in remaining:
            if is_table_line(line):
                if not replaced:
                    body.extend(table_lines)
                    replaced = True
                continue
            body.append(line)
        return body

    body.extend(table_lines)
    if remaining:
        body.append("")
        body.extend(remaining)
    elif section_lines:
        body.append("")
    return body


def sync_section_table(
    content: str,
    table_lines: Sequence[str],
    header_text: str = NOTES_HEADER,
    level: int = DEFAULT_LEVEL,
) -> str:
    """Return ``content`` with the section's table replaced by ``table_lines``.

    The header is appended first when missing. Feeding the result back in
    with the same table yields identical text.
    """
    if not has_header(content, header_text, level):
        content = append_header(content, header_text, level)
    section_lines = get_section_content(content, header_text, level)
    body = rebuild_section(section_lines, table_lines)
    return replace_section_content(content, header_text, body, level)


__all__ = [
    "NOTES_HEADER",
    "get_table_from_section",
    "rebuild_section",
    "sync_section_table",
    "table_block",
]
