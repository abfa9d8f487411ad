"""Internal helpers for development-time diagnostic flags.

Centralizes how opt-in diagnostics are read from the environment so the
semantics stay consistent across the codebase.
"""

from __future__ import annotations

import os

__all__ = ["trace_captures_enabled"]


def trace_captures_enabled(*, override: bool | None = None) -> bool:
    """Return True when captured failures should be logged with tracebacks.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``COMMONEXT_TRACE_CAPTURES`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("COMMONEXT_TRACE_CAPTURES") == "1"
