"""Process-wide collaborators used when building and finalizing errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from error_taxonomy.utils.identifiers import DefaultErrorIDGenerator, ErrorIDGenerator

if TYPE_CHECKING:  # pragma: no cover - import hints only
    from error_taxonomy.config.settings import AppSettings
    from error_taxonomy.observability.reporting import ReportingAdapter


@dataclass(slots=True)
class ErrorRuntimeConfig:
    """Pluggable capabilities consumed by error classes and instances."""

    id_generator: ErrorIDGenerator = field(default_factory=DefaultErrorIDGenerator)
    reporting: ReportingAdapter | None = None
    stack_limit: int | None = None


_CONFIG = ErrorRuntimeConfig()


def get_config() -> ErrorRuntimeConfig:
    return _CONFIG


def configure(
    *,
    id_generator: ErrorIDGenerator | None = None,
    reporting: ReportingAdapter | None = None,
    stack_limit: int | None = None,
) -> ErrorRuntimeConfig:
    """Install collaborators; arguments left as ``None`` keep their current value.

    Intended to run during process initialization, alongside class registration.
    Use :func:`install_reporting` with ``None`` to switch reporting off.
    """
    if id_generator is not None:
        _CONFIG.id_generator = id_generator
    if reporting is not None:
        install_reporting(reporting)
    if stack_limit is not None:
        _CONFIG.stack_limit = stack_limit
    return _CONFIG


def install_reporting(reporting: ReportingAdapter | None) -> ErrorRuntimeConfig:
    """Swap the reporting adapter, shutting down the one it replaces.

    Reports already queued on the previous adapter still run; ``None``
    disables reporting.
    """
    previous = _CONFIG.reporting
    _CONFIG.reporting = reporting
    if previous is not None and previous is not reporting:
        previous.shutdown(wait=False)
    return _CONFIG


def configure_from_settings(settings: AppSettings) -> ErrorRuntimeConfig:
    """Apply the ``errors`` settings block: id prefix and stack depth."""
    _CONFIG.id_generator = DefaultErrorIDGenerator(settings.errors.id_prefix)
    _CONFIG.stack_limit = settings.errors.stack_limit
    return _CONFIG


def reset_config() -> ErrorRuntimeConfig:
    """Restore the default ID generator and disable reporting."""
    _CONFIG.id_generator = DefaultErrorIDGenerator()
    install_reporting(None)
    _CONFIG.stack_limit = None
    return _CONFIG


__all__ = [
    "ErrorRuntimeConfig",
    "configure",
    "configure_from_settings",
    "get_config",
    "install_reporting",
    "reset_config",
]
