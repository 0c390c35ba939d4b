"""Application-wide error taxonomy with flat JSON and JSON:API rendering."""

from __future__ import annotations

from .errors import (
    ErrInternalError,
    ErrInternalServerError,
    ErrJSONSchemaValidationFailed,
    ErrRouteNotFound,
    Error,
    ErrorClass,
    ErrorClassRegistrationError,
    Errors,
    ErrorSerializationError,
    ErrorType,
    configure,
    error_classes,
    freeze_registry,
    lookup_error_class,
    register_error_class,
)

__version__ = "0.1.0"

__all__ = [
    "ErrInternalError",
    "ErrInternalServerError",
    "ErrJSONSchemaValidationFailed",
    "ErrRouteNotFound",
    "Error",
    "ErrorClass",
    "ErrorClassRegistrationError",
    "ErrorSerializationError",
    "ErrorType",
    "Errors",
    "configure",
    "error_classes",
    "freeze_registry",
    "lookup_error_class",
    "register_error_class",
]
