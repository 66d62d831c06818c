"""Configuration utilities for windowleft.

Settings are described with Pydantic models.  The :class:`Settings` container
groups the window defaults used by the command line interface, output
formatting options and the logging level.  Instances can be populated from
environment variables (``WINDOWLEFT_WINDOW__SIZE=3``) or from YAML/JSON files
with matching nested keys.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class WindowSettings(SectionModel):
    """Defaults for window construction."""

    size: int = 2
    stop_pattern: str | None = None

    @field_validator("size")
    @classmethod
    def _positive_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("size must be positive")
        return value

    @field_validator("stop_pattern")
    @classmethod
    def _compilable_pattern(cls, value: str | None) -> str | None:
        if value:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid regular expression: {exc}") from exc
        return value or None


class OutputSettings(SectionModel):
    """How windows are rendered on the command line."""

    format: Literal["text", "json"] = "text"
    separator: str = " "


class LoggingSettings(SectionModel):
    """Logging verbosity."""

    level: str = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    window: WindowSettings = Field(default_factory=WindowSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="WINDOWLEFT_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
