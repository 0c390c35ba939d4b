"""Error catalog, error instances and their renderings.

Importing this package registers the built-in classes in the default
registry.
"""

from __future__ import annotations

from .builtin import (
    BUILTIN_ERROR_CLASSES,
    ErrHTTPError,
    ErrInternalError,
    ErrInternalServerError,
    ErrJSONSchemaValidationFailed,
    ErrRouteNotFound,
)
from .classes import ErrorClass
from .collection import ErrorType, Errors
from .error import Error
from .exceptions import (
    ErrorClassRegistrationError,
    ErrorSealedError,
    ErrorSerializationError,
    ErrorTaxonomyError,
)
from .internal import SupportsErrorMessage, describe_internal
from .registry import (
    ErrorClassRegistry,
    default_registry,
    error_classes,
    freeze_registry,
    lookup_error_class,
    register_error_class,
)
from .runtime import (
    configure,
    configure_from_settings,
    get_config,
    install_reporting,
    reset_config,
)

__all__ = [
    "BUILTIN_ERROR_CLASSES",
    "ErrHTTPError",
    "ErrInternalError",
    "ErrInternalServerError",
    "ErrJSONSchemaValidationFailed",
    "ErrRouteNotFound",
    "Error",
    "ErrorClass",
    "ErrorClassRegistrationError",
    "ErrorClassRegistry",
    "ErrorSealedError",
    "ErrorSerializationError",
    "ErrorTaxonomyError",
    "ErrorType",
    "Errors",
    "SupportsErrorMessage",
    "configure",
    "configure_from_settings",
    "default_registry",
    "describe_internal",
    "error_classes",
    "freeze_registry",
    "get_config",
    "install_reporting",
    "lookup_error_class",
    "register_error_class",
    "reset_config",
]
