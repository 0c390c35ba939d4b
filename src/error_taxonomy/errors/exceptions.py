"""Exceptions raised by the error taxonomy layer itself."""

from __future__ import annotations


class ErrorTaxonomyError(RuntimeError):
    """Base class for failures of the taxonomy machinery."""


class ErrorClassRegistrationError(ErrorTaxonomyError):
    """Raised when an error class cannot be registered.

    This is a startup-time programming error: duplicate class names or
    registration after the registry was frozen. It is never expected while
    serving traffic.
    """


class ErrorSerializationError(ErrorTaxonomyError):
    """Raised when an error instance cannot be encoded as JSON."""


class ErrorSealedError(ErrorTaxonomyError):
    """Raised when an error instance is mutated after being serialized."""


__all__ = [
    "ErrorClassRegistrationError",
    "ErrorSealedError",
    "ErrorSerializationError",
    "ErrorTaxonomyError",
]
