"""Observability helpers: error reporting, Sentry wiring and metrics."""

from __future__ import annotations

from .metrics import record_error_created, record_error_report
from .reporting import ErrorReporter, ReportingAdapter, Severity, build_context
from .sentry import SentryReporter, initialise_reporting, initialise_sentry

__all__ = [
    "ErrorReporter",
    "ReportingAdapter",
    "SentryReporter",
    "Severity",
    "build_context",
    "initialise_reporting",
    "initialise_sentry",
    "record_error_created",
    "record_error_report",
]
