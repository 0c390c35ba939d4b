"""Call stack snapshots attached to error instances."""

from __future__ import annotations

import sys
import traceback
from typing import Any

StackTrace = list[dict[str, Any]]


def capture_stack(skip_frames: int = 0, *, limit: int | None = None) -> StackTrace:
    """Return the current call stack, outermost frame first.

    ``skip_frames=0`` makes the caller of this function the innermost entry;
    every additional skipped frame drops one more level. Skipping past the
    outermost frame keeps the outermost frame only.
    """
    frame = sys._getframe(1)
    for _ in range(max(skip_frames, 0)):
        if frame.f_back is None:
            break
        frame = frame.f_back
    summary = traceback.extract_stack(frame, limit=limit)
    return [
        {
            "file": entry.filename,
            "line": entry.lineno,
            "function": entry.name,
            "code": entry.line or "",
        }
        for entry in summary
    ]


__all__ = ["StackTrace", "capture_stack"]
