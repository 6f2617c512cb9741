"""Error taxonomy surfaced at the command boundary."""

from __future__ import annotations


class ProjectIndexerError(Exception):
    """Base error whose message is safe to show to the user."""


class PreconditionError(ProjectIndexerError, ValueError):
    """A required input or vault state is missing; nothing was written."""


class IndexNotFoundError(ProjectIndexerError, LookupError):
    """An update was requested for a project without an index document."""

    def __init__(self, project: str, path: str) -> None:
        super().__init__(f"No project index found for: {project} ({path})")
        self.project = project
        self.path = path


__all__ = ["IndexNotFoundError", "PreconditionError", "ProjectIndexerError"]
