"""Runtime settings for branchdiff, read from the environment and CLI flags."""

import os
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE = "origin/main"

ENV_PREFIX = "BRANCHDIFF_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class PickerConfig(BaseModel):
    """Validated settings for one picker run."""

    base: str = Field(DEFAULT_BASE, description="Base reference to diff against")
    repo_path: Optional[str] = Field(None, description="Repository to query instead of the current directory")
    author: Optional[str] = Field(None, description="Only include files from commits by this author")
    mine: bool = Field(False, description="Only include files from commits by the configured git user")

    @field_validator("base")
    @classmethod
    def _base_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base reference must not be empty")
        return value

    @field_validator("repo_path", "author")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def load_config(**overrides: Any) -> PickerConfig:
    """Build a PickerConfig from .env, the environment and explicit overrides.

    The .env file is searched from the working directory upwards and never
    replaces variables that are already set. Overrides that are None are ignored so unset CLI flags fall back to the
    environment.
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict = {}
    for key in ("base", "repo_path", "author"):
        env_value = _env(key.upper())
        if env_value is not None:
            values[key] = env_value

    mine = _env("MINE")
    if mine is not None:
        values["mine"] = mine.strip().lower() in _TRUE_VALUES

    values.update({key: value for key, value in overrides.items() if value is not None})
    return PickerConfig(**values)
