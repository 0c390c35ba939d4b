"""Identifier utilities for error instance ids."""

from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable

DEFAULT_ERROR_ID_PREFIX = "ERR"


@runtime_checkable
class ErrorIDGenerator(Protocol):
    """Capability producing an opaque, unique-enough token per call."""

    def generate_id(self) -> str:
        ...


class DefaultErrorIDGenerator:
    """Uppercase alphanumeric ids derived from a random UUID, without dashes."""

    def __init__(self, prefix: str = DEFAULT_ERROR_ID_PREFIX) -> None:
        self.prefix = prefix

    def generate_id(self) -> str:
        return f"{self.prefix}{uuid.uuid4().hex.upper()}"


def generate_error_id(prefix: str = DEFAULT_ERROR_ID_PREFIX) -> str:
    """Return a fresh error id using the default scheme."""
    return DefaultErrorIDGenerator(prefix).generate_id()


__all__ = [
    "DEFAULT_ERROR_ID_PREFIX",
    "DefaultErrorIDGenerator",
    "ErrorIDGenerator",
    "generate_error_id",
]
