"""Cell value normalization and link sort keys."""

from __future__ import annotations

import re
from typing import Any

_WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
_LINE_BREAKS_RE = re.compile(r"\r\n|\r|\n")


def normalize_value(value: Any) -> str:
    """Render a metadata value as single-line table cell text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return _LINE_BREAKS_RE.sub(" ", str(value))


def wiki_link(basename: str) -> str:
    return f"[[{basename}]]"


def extract_link_target(cell: str | None) -> str:
    """Return the base name a cross-reference cell points at.

    ``[[folder/Note#Heading|Alias]]`` gives ``Note``. Cells without a
    double-bracket link are treated as the link text itself.
    """
    if not cell:
        return ""
    match = _WIKI_LINK_RE.search(cell)
    inner = match.group(1) if match else cell
    target = inner.split("|", 1)[0] or inner
    target = target.replace("\\", "/")
    target = target.partition("#")[0].partition("^")[0]
    basename = target.rsplit("/", 1)[-1] or target
    return basename.strip()


def link_sort_key(cell: str | None) -> str:
    return extract_link_target(cell).lower()


__all__ = ["extract_link_target", "link_sort_key", "normalize_value", "wiki_link"]
