from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from core.config import Settings
from services.templates import TemplateProcessor
from utils.frontmatter import render_frontmatter

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5)


def _note_text(body: str = "Body\n", **fields: Any) -> str:
    return render_frontmatter(fields) + "\n" + body


def _settings(**overrides: Any) -> Settings:
    payload: dict[str, Any] = {
        "project_index_folder": "projects",
        "frontmatter_columns": ["status", "priority"],
    }
    payload.update(overrides)
    return Settings.model_validate(payload)


@pytest.fixture
def make_note() -> Callable[..., str]:
    """Factory for markdown text with a frontmatter block built from keyword fields."""
    return _note_text


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for settings with test defaults, overridable per call."""
    return _settings


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest.fixture
def processor() -> TemplateProcessor:
    return TemplateProcessor(clock=lambda: FIXED_NOW)
