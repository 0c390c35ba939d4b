from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from error_taxonomy.config.settings import get_settings
from error_taxonomy.errors import ErrorClass, ErrorClassRegistry, reset_config
from error_taxonomy.observability.reporting import Severity


class RecordingReporter:
    """Reporter double keeping every call for later assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Severity, dict[str, Any]]] = []

    def report(self, message: str, severity: Severity, context: Mapping[str, Any]) -> None:
        self.calls.append((message, severity, dict(context)))


@pytest.fixture(autouse=True)
def _reset_runtime():
    reset_config()
    get_settings.cache_clear()
    yield
    reset_config()
    get_settings.cache_clear()


@pytest.fixture
def registry() -> ErrorClassRegistry:
    return ErrorClassRegistry()


@pytest.fixture
def conflict_class() -> ErrorClass:
    return ErrorClass(name="tests.ErrConflict", status=409, title="Conflict", code="Conflict")


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
