"""Error class descriptors and the factories producing error instances."""

from __future__ import annotations

from dataclasses import dataclass

from error_taxonomy.observability.metrics import record_error_created

from .error import Error
from .runtime import get_config
from .stack import capture_stack

# Frames between the public factory call site and ``capture_stack``:
# ``_build`` and ``new``/``new_with_stack``.
_FACTORY_FRAMES = 2


@dataclass(frozen=True, slots=True)
class ErrorClass:
    """Immutable template describing one category of failure.

    Attributes:
        name: Globally unique identifier, conventionally the dotted module
            path of the variable holding the class.
        status: Default HTTP status of instances.
        title: Default human readable message.
        code: Public code exposed in rendered documents; defaults to ``name``.
        capture_stack: Whether :meth:`new` snapshots the call stack. Reserve
            it for unexpected failures; validation style classes opt out.
    """

    name: str
    status: int
    title: str
    code: str = ""
    capture_stack: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("error class name must not be empty")
        object.__setattr__(self, "status", int(self.status))
        if not self.code:
            object.__setattr__(self, "code", self.name)

    # Catalog entries are immutable; copies of an error keep pointing at them.
    def __copy__(self) -> ErrorClass:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> ErrorClass:
        return self

    def _build(self, details: str, *, with_stack: bool, skip_frames: int) -> Error:
        config = get_config()
        stack = None
        if with_stack:
            stack = capture_stack(skip_frames + _FACTORY_FRAMES, limit=config.stack_limit)
        error = Error(
            self,
            id=config.id_generator.generate_id(),
            details=details,
            stack_trace=stack,
        )
        record_error_created(self.code)
        return error

    def new(self, details: str = "", *, skip_frames: int = 0) -> Error:
        """Create an instance; the stack is captured only if the class asks for it."""
        return self._build(details, with_stack=self.capture_stack, skip_frames=skip_frames)

    def new_with_stack(self, details: str = "", skip_frames: int = 0) -> Error:
        """Create an instance and always capture the stack.

        ``skip_frames`` drops that many innermost frames above the call site,
        which lets helpers attribute the error to their own caller.
        """
        return self._build(details, with_stack=True, skip_frames=skip_frames)


__all__ = ["ErrorClass"]
