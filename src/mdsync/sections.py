"""Locate and rewrite a header-delimited section of a markdown document.

A section starts after a line reading exactly ``## Title`` (for level 2,
surrounding whitespace ignored) and runs until the next line that starts
with ``#`` but not with ``###``. Deeper headers belong to the section;
headers of the same or a shallower level end it. Only the first matching
header is recognized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DEFAULT_LEVEL = 2


@dataclass(frozen=True)
class SectionSpan:
    """Line indexes of a section: header line, first body line, end (exclusive)."""

    header: int
    start: int
    end: int

    def body(self, lines: Sequence[str]) -> list[str]:
        return list(lines[self.start:self.end])


def header_line(header_text: str, level: int = DEFAULT_LEVEL) -> str:
    if level < 1:
        raise ValueError("Header level must be >= 1")
    return "#" * level + " " + header_text


def ends_section(line: str, level: int = DEFAULT_LEVEL) -> bool:
    """True when ``line`` is a header at ``level`` or shallower."""
    trimmed = line.strip()
    return trimmed.startswith("#") and not trimmed.startswith("#" * (level + 1))


def find_section(
    lines: Sequence[str], header_text: str, level: int = DEFAULT_LEVEL
) -> SectionSpan | None:
    target = header_line(header_text, level)
    for index, line in enumerate(lines):
        if line.strip() != target:
            continue
        end = index + 1
        while end < len(lines) and not ends_section(lines[end], level):
            end += 1
        return SectionSpan(header=index, start=index + 1, end=end)
    return None


def has_header(content: str, header_text: str, level: int = DEFAULT_LEVEL) -> bool:
    target = header_line(header_text, level)
    return any(line.strip() == target for line in content.split("\n"))


def append_header(content: str, header_text: str, level: int = DEFAULT_LEVEL) -> str:
    """Append two line breaks and the header line to the end of ``content``."""
    return content + "\n\n" + header_line(header_text, level) + "\n"


def get_section_content(
    content: str, header_text: str, level: int = DEFAULT_LEVEL
) -> list[str]:
    """Return the lines between the header and the section end.

    An empty list means the header is missing or the section has no lines.
    """
    lines = content.split("\n")
    span = find_section(lines, header_text, level)
    if span is None:
        return []
    return span.body(lines)


def replace_section_content(
    content: str,
    header_text: str,
    new_lines: Sequence[str],
    level: int = DEFAULT_LEVEL,
) -> str:
    """Swap the section body for ``new_lines``.

    Everything up to and including the header line, and everything from the
    terminating header onwards, is kept verbatim. Without a matching header
    the content is returned unchanged.
    """
    lines = content.split("\n")
    span = find_section(lines, header_text, level)
    if span is None:
        return content
    return "\n".join([*lines[:span.start], *new_lines, *lines[span.end:]])


__all__ = [
    "DEFAULT_LEVEL",
    "SectionSpan",
    "append_header",
    "ends_section",
    "find_section",
    "get_section_content",
    "has_header",
    "header_line",
    "replace_section_content",
]
