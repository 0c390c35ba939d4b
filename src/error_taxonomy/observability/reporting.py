"""Forwarding of finalized errors to an external aggregation service.

Key Responsibilities:
    - Decide whether an error is severe enough to be reported
    - Build the message and key/value context sent to the aggregator
    - Isolate the caller from aggregator failures

Collaborators:
    - Upstream: :meth:`Error.report` and the JSON:API exception handlers
    - Downstream: any :class:`ErrorReporter`, usually
      :class:`~error_taxonomy.observability.sentry.SentryReporter`

Side Effects:
    - Network calls performed by the reporter, optionally on a worker thread
    - Emits ``errors.reporting.*`` log events and report outcome metrics

Thread Safety:
    - The adapter holds no per-request state; one instance is shared by the
      whole process once configured
"""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import Executor, ThreadPoolExecutor
from enum import IntEnum
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import structlog

from error_taxonomy.utils.logging import get_correlation_id

from .metrics import record_error_report

if TYPE_CHECKING:  # pragma: no cover - import hints only
    from error_taxonomy.config.settings import ReportingSettings
    from error_taxonomy.errors.error import Error

logger = structlog.get_logger(__name__)


class Severity(IntEnum):
    """Ordered severity levels understood by the aggregator."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Severity | str | int) -> Severity:
        if isinstance(value, Severity):
            return value
        if isinstance(value, int):
            return cls(value)
        if not isinstance(value, str):
            raise ValueError(f"Unknown severity {value!r}")
        try:
            return cls[value.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown severity '{value}'") from exc


@runtime_checkable
class ErrorReporter(Protocol):
    """Client of an external error aggregation service."""

    def report(self, message: str, severity: Severity, context: Mapping[str, Any]) -> None:
        ...


def default_severity(error: Error) -> Severity:
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return Severity.ERROR
    return Severity.WARNING


def build_context(error: Error) -> dict[str, Any]:
    """Key/value context sent along with the report message."""
    context: dict[str, Any] = {}
    context.update(error.metadata or {})
    context.update(error.internal_metadata or {})
    context.update(
        {
            "error_id": error.id,
            "error_class": error.error_class.name,
            "error_code": error.error_class.code,
            "status": error.status,
        }
    )
    correlation_id = get_correlation_id()
    if correlation_id:
        context["correlation_id"] = correlation_id
    return context


class ReportingAdapter:
    """Threshold gate in front of an :class:`ErrorReporter`.

    Without a reporter every call is a no-op. When an executor is supplied the
    reporter runs there and :meth:`report` returns as soon as the work is
    queued.
    """

    def __init__(
        self,
        reporter: ErrorReporter | None = None,
        *,
        threshold: Severity | str = Severity.ERROR,
        executor: Executor | None = None,
    ) -> None:
        self._reporter = reporter
        self._threshold = Severity.parse(threshold)
        self._executor = executor

    @classmethod
    def from_settings(
        cls, settings: ReportingSettings, reporter: ErrorReporter | None
    ) -> ReportingAdapter:
        executor = None
        if settings.background and reporter is not None:
            executor = ThreadPoolExecutor(
                max_workers=settings.max_workers, thread_name_prefix="error-reporting"
            )
        return cls(reporter, threshold=settings.threshold, executor=executor)

    @property
    def enabled(self) -> bool:
        return self._reporter is not None

    @property
    def threshold(self) -> Severity:
        return self._threshold

    def report(self, error: Error, severity: Severity | str | None = None) -> bool:
        """Forward ``error`` when it reaches the threshold; never raises."""
        if self._reporter is None:
            return False
        try:
            level = Severity.parse(severity) if severity is not None else default_severity(error)
        except ValueError:
            logger.warning("errors.reporting.invalid_severity", severity=str(severity))
            level = default_severity(error)
        if level < self._threshold:
            record_error_report("skipped")
            return False

        message = error.internal_error or error.details
        context = build_context(error)
        if self._executor is not None:
            try:
                self._executor.submit(self._dispatch, self._reporter, message, level, context)
            except RuntimeError as exc:
                logger.warning("errors.reporting.failed", error_id=error.id, error=str(exc))
                record_error_report("failed")
                return False
            return True
        return self._dispatch(self._reporter, message, level, context)

    def _dispatch(
        self,
        reporter: ErrorReporter,
        message: str,
        level: Severity,
        context: dict[str, Any],
    ) -> bool:
        try:
            reporter.report(message, level, context)
        except Exception as exc:
            logger.warning(
                "errors.reporting.failed",
                error_id=context.get("error_id"),
                severity=level.label,
                error=str(exc),
            )
            record_error_report("failed")
            return False
        logger.debug(
            "errors.reporting.dispatched",
            error_id=context.get("error_id"),
            severity=level.label,
        )
        record_error_report("dispatched")
        return True

    def shutdown(self, *, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)


__all__ = [
    "ErrorReporter",
    "ReportingAdapter",
    "Severity",
    "build_context",
    "default_severity",
]
