from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import AliasChoices, Field, ValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .manager import DEFAULT_LIMIT


class Settings(BaseSettings):
    """Movies manager configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    limit: int = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of movies returned by find_last.",
        validation_alias=AliasChoices("MOVIES_LIMIT"),
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for application logging",
        validation_alias=AliasChoices("MOVIES_LOG_LEVEL", "LOG_LEVEL"),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Build settings, applying overrides from a YAML file when given.

    Values in the file take precedence over environment variables.
    """

    if config_path is None:
        return get_settings()

    path = Path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    if not all(isinstance(key, str) for key in data):
        raise ConfigError(f"Config file {path} must use string keys")

    unknown = sorted(set(data) - set(Settings.model_fields))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    merged = get_settings().model_dump()
    merged.update(data)
    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc
