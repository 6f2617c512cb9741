"""Text normalization helpers."""

from __future__ import annotations

import re

MAX_FILE_NAME_LENGTH = 180

_ILLEGAL_FILE_CHARS = re.compile(r'[/\\:*?"<>|]')
_WHITESPACE_RUN = re.compile(r"\s+")
_LEADING_DOTS = re.compile(r"^\.+")


def sanitize_file_name(name: str) -> str:
    """Turn a project name into a base name safe on common filesystems.

    Illegal characters become ``-``, whitespace runs collapse to one space,
    leading dots are removed and the result is capped at 180 characters.
    """
    cleaned = _ILLEGAL_FILE_CHARS.sub("-", name.strip())
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned)
    cleaned = _LEADING_DOTS.sub("", cleaned)
    return cleaned[:MAX_FILE_NAME_LENGTH]


def sanitize_note_name(name: str) -> str:
    """Replace characters that cannot appear in a note file name."""
    return _ILLEGAL_FILE_CHARS.sub("-", name)


__all__ = [
    "MAX_FILE_NAME_LENGTH",
    "sanitize_file_name",
    "sanitize_note_name",
]
