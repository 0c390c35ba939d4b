"""Prometheus metrics for error creation and reporting.

Thread Safety:
    - Thread-safe: All metric operations use atomic Prometheus operations
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from prometheus_client import Counter

# ==============================================================================
# METRICS
# ==============================================================================

ERRORS_CREATED_TOTAL = Counter(
    "error_taxonomy_errors_created_total",
    "Total number of error instances created",
    ["code"],
)

ERROR_REPORTS_TOTAL = Counter(
    "error_taxonomy_error_reports_total",
    "Outcome of forwarding errors to the external aggregator",
    ["outcome"],
)

# ==============================================================================
# RECORDING HELPERS
# ==============================================================================


def record_error_created(code: str) -> None:
    ERRORS_CREATED_TOTAL.labels(code).inc()


def record_error_report(outcome: str) -> None:
    """Count a reporting attempt; ``outcome`` is dispatched, skipped or failed."""
    ERROR_REPORTS_TOTAL.labels(outcome).inc()


__all__ = [
    "ERRORS_CREATED_TOTAL",
    "ERROR_REPORTS_TOTAL",
    "record_error_created",
    "record_error_report",
]
