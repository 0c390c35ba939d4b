"""Presentation layer rendering errors for HTTP clients."""

from .jsonapi import (
    JSONAPI_CONTENT_TYPE,
    JSONAPIErrorPresenter,
    error_from_http_exception,
    errors_from_validation,
    register_exception_handlers,
)

__all__ = [
    "JSONAPIErrorPresenter",
    "JSONAPI_CONTENT_TYPE",
    "error_from_http_exception",
    "errors_from_validation",
    "register_exception_handlers",
]
