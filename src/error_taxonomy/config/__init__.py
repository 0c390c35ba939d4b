"""Lightweight configuration package exports."""

from __future__ import annotations

from .settings import (
    AppSettings,
    Environment,
    ErrorSettings,
    LoggingSettings,
    ObservabilitySettings,
    ReportingSettings,
    SentrySettings,
    get_settings,
    load_settings,
)

__all__ = [
    "AppSettings",
    "Environment",
    "ErrorSettings",
    "LoggingSettings",
    "ObservabilitySettings",
    "ReportingSettings",
    "SentrySettings",
    "get_settings",
    "load_settings",
]
