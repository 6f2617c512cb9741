"""Application configuration and .env loading."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

IndexType = Literal["project_index", "project_top"]


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    vault_path: str = Field(default=".", validation_alias="VAULT_PATH")

    project_index_folder: str = Field(
        default="projects", validation_alias="PROJECT_INDEX_FOLDER"
    )
    frontmatter_columns: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["status", "priority"],
        validation_alias="FRONTMATTER_COLUMNS",
    )
    index_type: IndexType = Field(
        default="project_index", validation_alias="INDEX_TYPE"
    )

    use_template: bool = Field(default=False, validation_alias="USE_TEMPLATE")
    template_folder: str = Field(default="templates", validation_alias="TEMPLATE_FOLDER")
    template_path: str = Field(default="", validation_alias="TEMPLATE_PATH")
    inherited_frontmatter_fields: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["project"],
        validation_alias="INHERITED_FRONTMATTER_FIELDS",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("frontmatter_columns", "inherited_frontmatter_fields", mode="before")
    @classmethod
    def _split_field_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                value = json.loads(text)
            else:
                value = text.split(",")
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["IndexType", "Settings", "get_settings"]
