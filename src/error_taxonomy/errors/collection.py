"""Ordered collections of errors accumulated while handling one request."""

from __future__ import annotations

import json
from collections.abc import Iterable, MutableSequence
from http import HTTPStatus
from typing import Any, Protocol, overload, runtime_checkable

from .error import Error
from .exceptions import ErrorSerializationError

EMPTY_ERRORS_STATUS = int(HTTPStatus.INTERNAL_SERVER_ERROR)


@runtime_checkable
class ErrorType(Protocol):
    """Anything that can be rendered as an error response."""

    def as_json(self) -> str:
        ...

    def as_jsonapi_response(self) -> dict[str, Any]:
        ...

    def get_status(self) -> int:
        ...


class Errors(Exception, MutableSequence[Error]):
    """Insertion ordered sequence of :class:`Error` instances.

    The first element is the primary error: :meth:`get_status` returns its
    status, so callers control precedence purely through insertion order.
    No reordering or deduplication ever happens here.

    Like :class:`Error`, a collection may be raised as a whole and rendered by
    the presentation layer.
    """

    def __init__(self, errors: Iterable[Error] = ()) -> None:
        super().__init__()
        self._errors: list[Error] = list(errors)

    @overload
    def __getitem__(self, index: int) -> Error: ...

    @overload
    def __getitem__(self, index: slice) -> Errors: ...

    def __getitem__(self, index: int | slice) -> Error | Errors:
        if isinstance(index, slice):
            return Errors(self._errors[index])
        return self._errors[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._errors[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def insert(self, index: int, value: Error) -> None:
        self._errors.insert(index, value)

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"

    def __str__(self) -> str:
        return "; ".join(str(error) for error in self._errors)

    def add_error(self, error: Error) -> Errors:
        self._errors.append(error)
        return self

    def get_status(self) -> int:
        """Return the status of the first error added."""
        if not self._errors:
            return EMPTY_ERRORS_STATUS
        return self._errors[0].status

    def as_jsonapi_response(self) -> dict[str, list[dict[str, str]]]:
        return {"errors": [error.as_jsonapi_error() for error in self._errors]}

    def as_json(self) -> str:
        """Encode every error's flat document as a JSON array."""
        try:
            encoded = json.dumps([error.as_dict() for error in self._errors], allow_nan=False)
        except (TypeError, ValueError, RecursionError) as exc:
            raise ErrorSerializationError(f"errors are not JSON serializable: {exc}") from exc
        for error in self._errors:
            error.seal()
        return encoded


__all__ = ["EMPTY_ERRORS_STATUS", "ErrorType", "Errors"]
