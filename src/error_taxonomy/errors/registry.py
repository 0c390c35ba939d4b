"""Process-wide registry of error classes.

Classes are registered while the host process initialises, typically at
import time of the modules declaring them. Once initialisation is over the
registry is frozen; from then on it is only read, which is safe from any
number of threads without locking.
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from .classes import ErrorClass
from .exceptions import ErrorClassRegistrationError

logger = structlog.get_logger(__name__)


class ErrorClassRegistry:
    """Name keyed mapping of :class:`ErrorClass` descriptors."""

    def __init__(self) -> None:
        self._classes: dict[str, ErrorClass] = {}
        self._frozen = False

    def register(self, error_class: ErrorClass) -> ErrorClass:
        if self._frozen:
            raise ErrorClassRegistrationError(
                f"Cannot register error class '{error_class.name}': registry is frozen"
            )
        if error_class.name in self._classes:
            raise ErrorClassRegistrationError(
                f"Error class '{error_class.name}' is already registered"
            )
        self._classes[error_class.name] = error_class
        logger.debug(
            "errors.registry.registered",
            name=error_class.name,
            code=error_class.code,
            status=error_class.status,
        )
        return error_class

    def lookup(self, name: str) -> ErrorClass | None:
        return self._classes.get(name)

    def error_classes(self) -> list[ErrorClass]:
        """Snapshot of every registered class, in registration order."""
        return list(self._classes.values())

    def freeze(self) -> None:
        if not self._frozen:
            self._frozen = True
            logger.info("errors.registry.frozen", classes=len(self._classes))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[ErrorClass]:
        return iter(self.error_classes())


default_registry = ErrorClassRegistry()


def register_error_class(
    name: str,
    status: int,
    title: str,
    *,
    code: str = "",
    capture_stack: bool = False,
    registry: ErrorClassRegistry | None = None,
) -> ErrorClass:
    """Build an :class:`ErrorClass` and register it in one step."""
    error_class = ErrorClass(
        name=name, status=status, title=title, code=code, capture_stack=capture_stack
    )
    target = registry if registry is not None else default_registry
    return target.register(error_class)


def lookup_error_class(name: str) -> ErrorClass | None:
    return default_registry.lookup(name)


def error_classes() -> list[ErrorClass]:
    return default_registry.error_classes()


def freeze_registry() -> None:
    default_registry.freeze()


__all__ = [
    "ErrorClassRegistry",
    "default_registry",
    "error_classes",
    "freeze_registry",
    "lookup_error_class",
    "register_error_class",
]
