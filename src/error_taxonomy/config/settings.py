"""Configuration system for the error taxonomy layer."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environments supported by the host service."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for application output")
    correlation_id_header: str = Field(
        default="X-Correlation-ID", description="Header used for trace correlation"
    )
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization"],
        description="Fields that should be redacted in logs",
    )


class SentrySettings(BaseModel):
    """Sentry error tracking configuration."""

    dsn: str | None = Field(default=None, description="Sentry DSN for reporting errors")
    traces_sample_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    send_default_pii: bool = False
    environment: str | None = Field(default=None, description="Override environment tag")


class ObservabilitySettings(BaseModel):
    """Aggregate observability configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    sentry: SentrySettings = Field(default_factory=SentrySettings)


class ReportingSettings(BaseModel):
    """Forwarding of finalized errors to the external aggregator."""

    enabled: bool = True
    threshold: Literal["debug", "info", "warning", "error", "fatal"] = Field(
        default="error", description="Lowest severity forwarded to the aggregator"
    )
    background: bool = Field(
        default=True, description="Submit reports to a worker thread instead of inline"
    )
    max_workers: int = Field(default=2, ge=1, le=32)


class ErrorSettings(BaseModel):
    """Error instance construction defaults."""

    id_prefix: str = Field(default="ERR", description="Prefix prepended to generated error ids")
    stack_limit: int | None = Field(
        default=None, ge=1, description="Maximum number of frames kept in captured stacks"
    )


class AppSettings(BaseSettings):
    """Top-level application settings."""

    environment: Environment = Environment.DEV
    debug: bool = False
    service_name: str = "error-taxonomy"
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    errors: ErrorSettings = Field(default_factory=ErrorSettings)

    model_config = SettingsConfigDict(env_prefix="ET_", env_nested_delimiter="__")


ENVIRONMENT_DEFAULTS: Mapping[Environment, dict[str, Any]] = {
    Environment.DEV: {
        "debug": True,
        "reporting": {"threshold": "fatal", "background": False},
        "observability": {"logging": {"level": "DEBUG"}},
    },
    Environment.STAGING: {
        "reporting": {"threshold": "warning"},
        "observability": {"sentry": {"traces_sample_rate": 0.25}},
    },
    Environment.PROD: {
        "reporting": {"threshold": "error"},
        "observability": {"sentry": {"traces_sample_rate": 0.05}},
    },
}


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = value
    return target


def load_settings(environment: str | None = None) -> AppSettings:
    """Load application settings with environment specific defaults applied.

    Environment presets act as a base layer; values explicitly provided through
    ``ET_`` environment variables take precedence over them.
    """
    env_value = (environment or os.getenv("ET_ENV", "dev")).lower()
    env = Environment(env_value)
    defaults = ENVIRONMENT_DEFAULTS.get(env, {})
    try:
        base_settings = AppSettings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err
    explicit = base_settings.model_dump(exclude_unset=True)
    merged = _deep_update(AppSettings.model_construct().model_dump(), defaults)
    merged = _deep_update(merged, explicit)
    merged["environment"] = env
    return AppSettings.model_validate(merged)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Cached accessor used by production code."""
    return load_settings()


__all__ = [
    "AppSettings",
    "ENVIRONMENT_DEFAULTS",
    "Environment",
    "ErrorSettings",
    "LoggingSettings",
    "ObservabilitySettings",
    "ReportingSettings",
    "SentrySettings",
    "get_settings",
    "load_settings",
]
