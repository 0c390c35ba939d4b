"""Summaries of internal causes attached to error instances.

An internal cause can be anything the failing code had at hand: an exception,
a domain object, a bare string. The summary stored in ``internal_error`` is
derived from a small closed set of shapes:

- plain values (``str``; ``None`` yields an empty summary)
- message-bearing values (exceptions and :class:`SupportsErrorMessage`)
- string-convertible values (types that override ``__str__``)

Anything else falls back to the default stringification. Deriving a summary
never raises.
"""

from __future__ import annotations

from enum import Enum
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

UNSTRINGIFIABLE = "<unstringifiable>"


@runtime_checkable
class SupportsErrorMessage(Protocol):
    """Objects exposing an explicit error message."""

    def error_message(self) -> str:
        ...


class CauseShape(str, Enum):
    """Shape an internal cause was recognised as."""

    PLAIN = "plain"
    MESSAGE = "message"
    STRING = "string"
    OPAQUE = "opaque"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return UNSTRINGIFIABLE


def cause_shape(cause: Any) -> CauseShape:
    """Classify ``cause`` into one of the accepted shapes."""
    if cause is None or isinstance(cause, str):
        return CauseShape.PLAIN
    if isinstance(cause, (BaseException, SupportsErrorMessage)):
        return CauseShape.MESSAGE
    if type(cause).__str__ is not object.__str__:
        return CauseShape.STRING
    return CauseShape.OPAQUE


@singledispatch
def describe_internal(cause: object) -> str:
    """Return the one line summary stored as ``internal_error``."""
    if cause_shape(cause) is CauseShape.MESSAGE:
        try:
            return _safe_str(cause.error_message())
        except Exception:
            return UNSTRINGIFIABLE
    return _safe_str(cause)


@describe_internal.register
def _(cause: str) -> str:
    return cause


@describe_internal.register(type(None))
def _(cause: object) -> str:
    return ""


@describe_internal.register
def _(cause: BaseException) -> str:
    message = _safe_str(cause)
    return message or type(cause).__name__


__all__ = [
    "CauseShape",
    "SupportsErrorMessage",
    "UNSTRINGIFIABLE",
    "cause_shape",
    "describe_internal",
]
