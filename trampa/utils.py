"""
Utility functions for the trampa library.
"""

from __future__ import annotations

import linecache
import os
import sys
from dataclasses import dataclass


# Environment variable to control debug mode
DEBUG_COMPUTATIONS = os.environ.get("TRAMPA_DEBUG", "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class CreationContext:
    """Where a computation node was built.

    Attributes:
        filename: Source file path.
        line: Line number in the source file.
        function: Function name that built the node.
        code: Source line, when it can be read.
    """

    filename: str
    line: int
    function: str
    code: str | None = None

    def format(self) -> str:
        """Format as 'filename:line in function'."""
        return f"{self.filename}:{self.line} in {self.function}"


def capture_creation_context(skip_frames: int = 2) -> CreationContext | None:
    """
    Capture the caller's location for debugging computation construction.

    Nothing is captured unless ``TRAMPA_DEBUG`` is enabled, so building
    computations never pays for frame inspection by default.

    Args:
        skip_frames: Number of frames to skip (default 2 to skip this function and caller)

    Returns:
        CreationContext for the frame, or None when disabled or unavailable.
    """
    if not DEBUG_COMPUTATIONS:
        return None

    try:
        frame = sys._getframe(skip_frames)
    except (AttributeError, ValueError):
        # sys._getframe is CPython specific, and the stack may be shallower
        return None

    filename = frame.f_code.co_filename
    line = frame.f_lineno
    code = linecache.getline(filename, line).strip() or None
    return CreationContext(
        filename=filename,
        line=line,
        function=frame.f_code.co_name,
        code=code,
    )


__all__ = [
    "DEBUG_COMPUTATIONS",
    "CreationContext",
    "capture_creation_context",
]
