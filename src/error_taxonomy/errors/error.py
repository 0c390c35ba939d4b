"""Error instances built from registered error classes.

Key Responsibilities:
    - Carry one failure occurrence: its class, id, public details and status
    - Hold internal-only context (cause, metadata, stack trace) for operators
    - Render the flat debugging document and the JSON:API error object

Collaborators:
    - Upstream: :class:`~error_taxonomy.errors.classes.ErrorClass` factories
    - Downstream: JSON:API presenter and the reporting adapter

Thread Safety:
    - Not thread-safe. An instance has a single owner while it is being
      built; once rendered it is sealed and mutators raise
      :class:`~error_taxonomy.errors.exceptions.ErrorSealedError`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .exceptions import ErrorSealedError, ErrorSerializationError
from .internal import describe_internal
from .runtime import get_config
from .stack import StackTrace

if TYPE_CHECKING:  # pragma: no cover - import hints only
    from error_taxonomy.observability.reporting import Severity

    from .classes import ErrorClass

FLAT_KEYS = (
    "id",
    "class",
    "details",
    "internal_error",
    "internal_details",
    "stack_trace",
    "status",
)
JSONAPI_KEYS = ("id", "code", "status", "title", "detail")


class Error(Exception):
    """A single failure occurrence of a registered error class.

    Instances are created through :meth:`ErrorClass.new` or
    :meth:`ErrorClass.new_with_stack` rather than directly. They are regular
    exceptions, so host code may raise them and let the presentation layer
    render the JSON:API response.
    """

    def __init__(
        self,
        error_class: ErrorClass,
        *,
        id: str,
        details: str = "",
        stack_trace: StackTrace | None = None,
    ) -> None:
        self._error_class = error_class
        self.id = id
        self.details = details or error_class.title
        self.status = error_class.status
        self.metadata: dict[str, Any] | None = None
        self.internal_error = ""
        self.internal_details: Any = None
        self.internal_metadata: dict[str, Any] | None = None
        self.stack_trace = stack_trace
        self._sealed = False
        super().__init__(self.details)

    @property
    def error_class(self) -> ErrorClass:
        return self._error_class

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __str__(self) -> str:
        return f"[{self._error_class.code}] {self.details}"

    def __repr__(self) -> str:
        return (
            f"Error(class={self._error_class.name!r}, id={self.id!r}, "
            f"status={self.status}, details={self.details!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # rebuilt from the class and id; every other field travels as state
        state = dict(self.__dict__)
        state["args"] = self.args
        return (_rebuild_error, (self._error_class, self.id), state)

    # -------- mutators --------

    def seal(self) -> Error:
        """Freeze the instance; called by every rendering method."""
        self._sealed = True
        return self

    def _ensure_mutable(self) -> None:
        if self._sealed:
            raise ErrorSealedError(f"error {self.id} was already rendered and cannot be modified")

    def set_internal(self, cause: Any) -> Error:
        """Attach the internal cause and derive its one line summary."""
        self._ensure_mutable()
        self.internal_details = cause
        self.internal_error = describe_internal(cause)
        return self

    def set_metadata(self, metadata: Mapping[str, Any] | None) -> Error:
        self._ensure_mutable()
        self.metadata = dict(metadata) if metadata is not None else None
        return self

    def set_internal_metadata(self, metadata: Mapping[str, Any] | None) -> Error:
        self._ensure_mutable()
        self.internal_metadata = dict(metadata) if metadata is not None else None
        return self

    def set_status(self, status: int) -> Error:
        self._ensure_mutable()
        self.status = int(status)
        return self

    def set_details(self, details: str) -> Error:
        """Replace the public message; an empty value restores the class title."""
        self._ensure_mutable()
        self.details = details or self._error_class.title
        self.args = (self.details,)
        return self

    # -------- rendering --------

    def as_dict(self) -> dict[str, Any]:
        """Return the flat debugging document as a dictionary."""
        return {
            "id": self.id,
            "class": self._error_class.code,
            "details": self.details,
            "internal_error": self.internal_error,
            "internal_details": self.internal_details,
            "stack_trace": self.stack_trace,
            "status": self.status,
        }

    def as_json(self) -> str:
        """Encode the flat debugging document, internal fields included.

        Raises:
            ErrorSerializationError: when ``internal_details`` (or another
                field) holds a value that has no JSON representation.
        """
        try:
            encoded = json.dumps(self.as_dict(), allow_nan=False)
        except (TypeError, ValueError, RecursionError) as exc:
            raise ErrorSerializationError(
                f"error {self.id} ({self._error_class.name}) is not JSON serializable: {exc}"
            ) from exc
        self.seal()
        return encoded

    def as_jsonapi_error(self) -> dict[str, str]:
        """Return the end-user safe JSON:API error object.

        The object always carries the five members ``id``, ``code``,
        ``status``, ``title`` and ``detail``; ``detail`` is kept even when
        empty. ``status`` is string encoded as JSON:API requires.
        """
        self.seal()
        return {
            "id": self.id,
            "code": self._error_class.code,
            "status": str(self.status),
            "title": self._error_class.title,
            "detail": self.details,
        }

    def as_jsonapi_response(self) -> dict[str, list[dict[str, str]]]:
        return {"errors": [self.as_jsonapi_error()]}

    def get_status(self) -> int:
        return self.status

    # -------- finalization --------

    def report(self, severity: Severity | str | None = None) -> bool:
        """Forward this error to the configured aggregator, if any.

        Returns ``True`` when a report was dispatched. Reporting failures are
        logged by the adapter and never raised.
        """
        adapter = get_config().reporting
        if adapter is None:
            return False
        return adapter.report(self, severity)


def _rebuild_error(error_class: ErrorClass, id: str) -> Error:
    return Error(error_class, id=id)


__all__ = ["Error", "FLAT_KEYS", "JSONAPI_KEYS"]
