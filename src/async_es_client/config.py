"""YAML configuration loading (pydantic BaseModel)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, ConfigErrorCodes
from .logger import new_logger
from .models import DEFAULT_ES_URL, ElasticsearchConfig


class ElasticsearchSection(BaseModel):
    """Elasticsearch connection settings."""

    url: str = DEFAULT_ES_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    api_key: str = ""
    username: str = ""
    password: str = ""
    verify_certs: bool = True


class LogSection(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseModel):
    """Top-level settings file."""

    elasticsearch: ElasticsearchSection = Field(default_factory=ElasticsearchSection)
    log: LogSection = Field(default_factory=LogSection)

    def configure_logging(self) -> structlog.stdlib.BoundLogger:
        """Configure structlog from the log section."""
        return new_logger(level=self.log.level, format=self.log.format)

    def to_client_config(self) -> ElasticsearchConfig:
        es = self.elasticsearch
        return ElasticsearchConfig(
            base_url=es.url,
            timeout_seconds=es.timeout_seconds,
            api_key=es.api_key,
            username=es.username,
            password=es.password,
            verify_certs=es.verify_certs,
        )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with override merged into base.

    Override values win. Lists are replaced, not merged.
    """
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(base_path: Path, env_path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    base_path: base settings file (required)
    env_path: per-environment overlay, merged over the base when it exists
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = deep_merge(data, _read_yaml(env_path))
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
