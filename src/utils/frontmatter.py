"""Frontmatter helpers: read metadata, merge fields, keep the body intact."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Union

import frontmatter
import yaml

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)

MetadataValue = Union[str, int, float, bool, None]


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Return ``(yaml_block, body)``; ``yaml_block`` is None without frontmatter."""
    match = _BLOCK_RE.match(text)
    if match is None:
        return None, text
    return match.group("yaml"), text[match.end():]


def coerce_value(value: Any) -> MetadataValue:
    """Collapse a YAML value into the scalar variant the index works with."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set)):
        return ", ".join(str(coerce_value(item)) for item in value)
    return str(value)


def load_frontmatter(text: str) -> dict[str, Any]:
    """Return the frontmatter mapping of ``text`` with its YAML types intact."""
    if split_frontmatter(text)[0] is None:
        return {}
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        logger.warning("Ignoring unparseable frontmatter: %s", exc)
        return {}
    return {str(key): value for key, value in post.metadata.items()}


def parse_frontmatter(text: str) -> dict[str, MetadataValue]:
    """Parse the frontmatter block of ``text`` into a flat metadata mapping."""
    return {key: coerce_value(value) for key, value in load_frontmatter(text).items()}


def render_frontmatter(fields: Mapping[str, Any]) -> str:
    """Render ``fields`` as a complete ``---`` delimited block."""
    dumped = yaml.safe_dump(
        dict(fields),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=4096,
    )
    return f"---\n{dumped}---\n"


def merge_frontmatter(text: str, fields: Mapping[str, Any]) -> str:
    """Overwrite or add ``fields`` in the frontmatter, leaving the body as is.

    Returns ``text`` unchanged when every field already holds the given value.
    """
    block, body = split_frontmatter(text)
    existing: dict[str, Any] = {}
    if block is not None:
        try:
            loaded = yaml.safe_load(block)
        except yaml.YAMLError as exc:
            raise ValueError(f"Frontmatter contains invalid YAML: {exc}") from exc
        if isinstance(loaded, dict):
            existing = loaded
        elif loaded is not None:
            raise ValueError("Frontmatter must be a mapping of key/value pairs.")

    if all(key in existing and existing[key] == value for key, value in fields.items()):
        return text

    merged = {**existing, **dict(fields)}
    if block is None:
        separator = "\n" if body and not body.startswith("\n") else ""
        return render_frontmatter(merged) + separator + body
    return render_frontmatter(merged) + body


__all__ = [
    "MetadataValue",
    "coerce_value",
    "load_frontmatter",
    "merge_frontmatter",
    "parse_frontmatter",
    "render_frontmatter",
    "split_frontmatter",
]
