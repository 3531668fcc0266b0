# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Runtime settings for the web service and CLI, loaded from an optional YAML file."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from yaml import YAMLError

from services.convert import DIALECTS

CONFIG_ENV_VAR = "RACKVIZ_CONFIG"
SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class ConfigError(ValueError):
    """Raised when the settings file cannot be read or validated."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    internal_link_base: str | None = None
    max_content_length: int = Field(default=1024 * 1024, gt=0)
    max_rack_height: int = Field(default=200, gt=0)
    default_dialect: str = "rack-text"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_choices(self) -> "Settings":
        if self.default_dialect not in DIALECTS:
            raise ValueError(
                f"unsupported default_dialect: {self.default_dialect!r}; "
                f"allowed: {sorted(DIALECTS)}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(
                f"unsupported log_level: {self.log_level!r}; "
                f"allowed: {sorted(SUPPORTED_LOG_LEVELS)}"
            )
        return self


def load_settings(path: str | Path | None = None) -> Settings:
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Settings()

    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read settings file {config_path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw) or {}
    except YAMLError as exc:
        raise ConfigError(f"YAML parse error in {config_path}: {exc}") from exc
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(
            f"invalid settings in {config_path}: {exc.error_count()} error(s); {exc.errors()[0]['msg']}"
        ) from exc
