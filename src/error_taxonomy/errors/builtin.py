"""Error classes every service gets out of the box."""

from __future__ import annotations

from http import HTTPStatus

from .registry import register_error_class

_PREFIX = __name__.rsplit(".", 1)[0]

ErrInternalServerError = register_error_class(
    f"{_PREFIX}.ErrInternalServerError",
    HTTPStatus.INTERNAL_SERVER_ERROR,
    "Internal Server Error",
    code="InternalServerError",
    capture_stack=True,
)

ErrInternalError = register_error_class(
    f"{_PREFIX}.ErrInternalError",
    HTTPStatus.INTERNAL_SERVER_ERROR,
    "Internal Error",
    code="InternalError",
    capture_stack=True,
)

ErrJSONSchemaValidationFailed = register_error_class(
    f"{_PREFIX}.ErrJSONSchemaValidationFailed",
    HTTPStatus.BAD_REQUEST,
    "JSON Schema Validation Failed",
    code="JSONSchemaValidationFailed",
)

ErrRouteNotFound = register_error_class(
    f"{_PREFIX}.ErrRouteNotFound",
    HTTPStatus.NOT_FOUND,
    "Route Not Found",
    code="RouteNotFound",
)

ErrHTTPError = register_error_class(
    f"{_PREFIX}.ErrHTTPError",
    HTTPStatus.BAD_REQUEST,
    "HTTP Error",
    code="HTTPError",
)

BUILTIN_ERROR_CLASSES = (
    ErrInternalServerError,
    ErrInternalError,
    ErrJSONSchemaValidationFailed,
    ErrRouteNotFound,
    ErrHTTPError,
)

__all__ = [
    "BUILTIN_ERROR_CLASSES",
    "ErrHTTPError",
    "ErrInternalError",
    "ErrInternalServerError",
    "ErrJSONSchemaValidationFailed",
    "ErrRouteNotFound",
]
