"""Template variable substitution."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from mdsync.values import normalize_value

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

_FORMATTED_RE = re.compile(r"\{\{(date|time):([^}]+)\}\}")
_PLACEHOLDER_RE = re.compile(r"\{\{([^{}]+)\}\}")


class TemplateProcessor:
    """Fill ``{{title}}``, ``{{date}}``, ``{{time}}`` and caller variables.

    ``{{date:FMT}}`` and ``{{time:FMT}}`` take ``strftime`` patterns. A
    placeholder that cannot be resolved is left as written.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def process(self, content: str, variables: Mapping[str, Any] | None = None) -> str:
        now = self._clock()
        values = {
            "date": now.strftime(DATE_FORMAT),
            "time": now.strftime(TIME_FORMAT),
        }
        for key, value in (variables or {}).items():
            values[key] = normalize_value(value)

        def _format(match: re.Match[str]) -> str:
            try:
                return now.strftime(match.group(2))
            except (ValueError, TypeError):
                return match.group(0)

        content = _FORMATTED_RE.sub(_format, content)
        return _PLACEHOLDER_RE.sub(
            lambda match: values.get(match.group(1), match.group(0)), content
        )


__all__ = ["DATE_FORMAT", "TIME_FORMAT", "TemplateProcessor"]
