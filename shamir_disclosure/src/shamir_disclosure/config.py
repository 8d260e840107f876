"""Configuration loading for the shamir-disclosure CLI."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import local_config_path, runtime_config_dir

_LEVELS = {"critical", "error", "warning", "info", "debug"}
_FORMATS = {"decimal", "hex"}
LOG_LEVEL_ENV = "SHAMIR_LOG_LEVEL"


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.strip().lower() not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value.strip()

    def normalized_level(self) -> str:
        return self.level.upper()


class OutputConfig(BaseModel):
    format: str = Field(default="decimal", description="How secrets are printed: decimal|hex")

    @field_validator("format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in _FORMATS:
            raise ValueError(f"Unknown output format '{value}'")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def _apply_env(config: AppConfig) -> AppConfig:
    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        try:
            config.logging = LoggingConfig(level=level)
        except ValidationError as exc:
            raise ValueError(f"Invalid {LOG_LEVEL_ENV}: {exc}") from exc
    return config


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return _apply_env(AppConfig.model_validate(data))
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return _apply_env(DEFAULT_CONFIG.model_copy(deep=True))


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
