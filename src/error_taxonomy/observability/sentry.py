"""Sentry error tracking integration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import sentry_sdk
import structlog
from sentry_sdk.integrations import Integration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from error_taxonomy.config.settings import AppSettings
from error_taxonomy.errors.runtime import install_reporting

from .reporting import ReportingAdapter, Severity

logger = structlog.get_logger(__name__)

_SENTRY_INITIALISED = False

_SENTRY_LEVELS = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FATAL: "fatal",
}


class SentryReporter:
    """Report messages to Sentry with the error context attached as extras."""

    def report(self, message: str, severity: Severity, context: Mapping[str, Any]) -> None:
        level = _SENTRY_LEVELS[severity]
        with sentry_sdk.new_scope() as scope:
            scope.set_level(level)
            for key, value in context.items():
                scope.set_extra(key, value)
            if "error_code" in context:
                scope.set_tag("error_code", str(context["error_code"]))
            sentry_sdk.capture_message(message, level=level)


def initialise_sentry(settings: AppSettings) -> bool:
    global _SENTRY_INITIALISED

    if _SENTRY_INITIALISED:
        return True

    sentry_settings = settings.observability.sentry
    if not sentry_settings.dsn:
        return False

    integrations: list[Integration] = [FastApiIntegration(transaction_style="endpoint")]
    integrations.append(LoggingIntegration(level=logging.INFO, event_level=logging.ERROR))

    sentry_sdk.init(
        dsn=sentry_settings.dsn,
        environment=sentry_settings.environment or settings.environment.value,
        traces_sample_rate=sentry_settings.traces_sample_rate,
        send_default_pii=sentry_settings.send_default_pii,
        integrations=integrations,
    )

    _SENTRY_INITIALISED = True
    return True


def initialise_reporting(settings: AppSettings) -> ReportingAdapter:
    """Install the reporting adapter described by ``settings``.

    Without a DSN, or with reporting disabled, an adapter without reporter is
    installed and every report is silently skipped.
    """
    reporter: SentryReporter | None = None
    if settings.reporting.enabled and initialise_sentry(settings):
        reporter = SentryReporter()
    adapter = ReportingAdapter.from_settings(settings.reporting, reporter)
    install_reporting(adapter)
    logger.info(
        "errors.reporting.configured",
        enabled=adapter.enabled,
        threshold=adapter.threshold.label,
    )
    return adapter


__all__ = ["SentryReporter", "initialise_reporting", "initialise_sentry"]
