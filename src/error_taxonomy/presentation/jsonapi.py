"""JSON:API presenter for error responses.

This module turns :class:`~error_taxonomy.errors.Error` and
:class:`~error_taxonomy.errors.Errors` values into JSON:API error responses
and wires FastAPI exception handlers that do so automatically.

Key Responsibilities:
    - Render the end-user safe JSON:API document with the resolved status
    - Map framework level failures (unknown routes, request validation,
      unhandled exceptions) onto the built-in error classes
    - Report rendered errors through the configured reporting adapter

Collaborators:
    - Upstream: FastAPI applications and route handlers
    - Downstream: FastAPI/Starlette response objects

Side Effects:
    - Creates HTTP response objects and sets the correlation header

Thread Safety:
    - Thread-safe: Stateless presenter with no shared mutable state

Example:
    >>> from error_taxonomy.presentation.jsonapi import register_exception_handlers
    >>> register_exception_handlers(app)
"""

# ==============================================================================
# IMPORTS
# ==============================================================================

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from error_taxonomy.errors import (
    Error,
    Errors,
    ErrorType,
    ErrHTTPError,
    ErrInternalServerError,
    ErrJSONSchemaValidationFailed,
    ErrRouteNotFound,
)
from error_taxonomy.utils.logging import get_correlation_id

logger = structlog.get_logger(__name__)

# ==============================================================================
# CONSTANTS
# ==============================================================================

JSONAPI_CONTENT_TYPE = "application/vnd.api+json"


# ==============================================================================
# PRESENTER IMPLEMENTATION
# ==============================================================================


class JSONAPIErrorPresenter:
    """Presenter producing JSON:API error envelopes."""

    media_type = JSONAPI_CONTENT_TYPE

    def __init__(self, *, correlation_header: str = "X-Correlation-ID") -> None:
        self._correlation_header = correlation_header

    def render(
        self,
        errors: ErrorType,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> JSONResponse:
        """Render ``errors`` with the status of its primary error."""
        status_code = errors.get_status()
        response = JSONResponse(
            errors.as_jsonapi_response(),
            status_code=status_code,
            media_type=self.media_type,
            headers=dict(headers or {}),
        )
        correlation_id = get_correlation_id()
        if self._correlation_header and correlation_id:
            response.headers.setdefault(self._correlation_header, correlation_id)
        return response


# ==============================================================================
# EXCEPTION HANDLERS
# ==============================================================================


def _format_location(location: Any) -> str:
    if isinstance(location, (list, tuple)):
        return ".".join(str(part) for part in location)
    return str(location)


def error_from_http_exception(exc: StarletteHTTPException, path: str) -> Error:
    """Map a framework HTTP exception onto a built-in class, keeping its status."""
    if exc.status_code == HTTPStatus.NOT_FOUND:
        return ErrRouteNotFound.new().set_metadata({"path": path})
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = ""
    return ErrHTTPError.new(str(exc.detail or phrase)).set_status(exc.status_code)


def errors_from_validation(exc: RequestValidationError) -> Errors:
    """One schema validation error per failing field, in reported order."""
    errors = Errors()
    for problem in exc.errors():
        location = _format_location(problem.get("loc", ()))
        message = str(problem.get("msg", ""))
        error = ErrJSONSchemaValidationFailed.new(f"{location}: {message}" if location else message)
        error.set_metadata({"location": location, "type": problem.get("type")})
        errors.add_error(error)
    if not errors:
        errors.add_error(ErrJSONSchemaValidationFailed.new())
    return errors


def register_exception_handlers(
    app: FastAPI, presenter: JSONAPIErrorPresenter | None = None
) -> JSONAPIErrorPresenter:
    """Render raised errors and framework failures as JSON:API responses."""
    presenter = presenter or JSONAPIErrorPresenter()

    async def _handle_error(request: Request, exc: Error) -> JSONResponse:
        response = presenter.render(exc)
        exc.report()
        return response

    async def _handle_errors(request: Request, exc: Errors) -> JSONResponse:
        response = presenter.render(exc)
        for error in exc:
            error.report()
        return response

    async def _handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = errors_from_validation(exc)
        return presenter.render(errors)

    async def _handle_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error = error_from_http_exception(exc, request.url.path)
        headers = getattr(exc, "headers", None)
        return presenter.render(error, headers=headers)

    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        error = (
            ErrInternalServerError.new()
            .set_internal(exc)
            .set_internal_metadata({"path": request.url.path, "method": request.method})
        )
        logger.error(
            "errors.unhandled_exception",
            error_id=error.id,
            internal_error=error.internal_error,
            path=request.url.path,
        )
        response = presenter.render(error)
        error.report()
        return response

    app.add_exception_handler(Error, _handle_error)
    app.add_exception_handler(Errors, _handle_errors)
    app.add_exception_handler(RequestValidationError, _handle_validation)
    app.add_exception_handler(StarletteHTTPException, _handle_http)
    app.add_exception_handler(Exception, _handle_unexpected)
    return presenter


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    "JSONAPIErrorPresenter",
    "JSONAPI_CONTENT_TYPE",
    "error_from_http_exception",
    "errors_from_validation",
    "register_exception_handlers",
]
