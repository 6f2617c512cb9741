"""Core configuration and shared utilities."""

from dotenv import load_dotenv

from .config import Settings, get_settings
from .errors import IndexNotFoundError, PreconditionError, ProjectIndexerError

load_dotenv()

__all__ = [
    "IndexNotFoundError",
    "PreconditionError",
    "ProjectIndexerError",
    "Settings",
    "get_settings",
]
