"""Markdown section and table synchronization."""

from mdsync.notes import NOTES_HEADER, get_table_from_section, sync_section_table
from mdsync.sections import (
    append_header,
    get_section_content,
    has_header,
    replace_section_content,
)
from mdsync.tables import parse_table, render_table
from mdsync.values import extract_link_target, normalize_value

__all__ = [
    "NOTES_HEADER",
    "append_header",
    "extract_link_target",
    "get_section_content",
    "get_table_from_section",
    "has_header",
    "normalize_value",
    "parse_table",
    "render_table",
    "replace_section_content",
    "sync_section_table",
]
