"""Call-site lookup for log records."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import FrameType

_PACKAGE = __name__.partition(".")[0]

# Deep enough for the logger's own frames plus a wrapper or two.
_MAX_DEPTH = 15


@dataclass(frozen=True)
class CallerInfo:
    """Where a log call came from."""

    location: str
    function_name: str


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def _outside_frame() -> FrameType | None:
    frame: FrameType | None = sys._getframe(1)
    depth = 0
    while frame is not None and depth < _MAX_DEPTH:
        if not _is_internal(frame):
            return frame
        frame = frame.f_back
        depth += 1
    return None


def find_caller() -> CallerInfo | None:
    """
    Find the first stack frame outside this package.

    Returns:
        CallerInfo with ``"<path>:<line>"`` and the qualified function name
        (``"Service.fetch"``), or None if every inspected frame is internal
    """
    frame = _outside_frame()
    if frame is None:
        return None
    code = frame.f_code
    return CallerInfo(
        location=f"{code.co_filename}:{frame.f_lineno}",
        function_name=code.co_qualname,
    )


def find_caller_class() -> str | None:
    """
    Name of the class whose method is calling, if any.

    Derived from the qualified name of the first outside frame, so
    ``Service.__init__`` gives ``"Service"`` and module-level code gives None.
    """
    frame = _outside_frame()
    if frame is None:
        return None
    parts = frame.f_code.co_qualname.split(".")
    # "outer.<locals>.inner" is a nested function, not a method.
    if len(parts) < 2 or parts[-2] == "<locals>":
        return None
    return parts[-2]


__all__ = ["CallerInfo", "find_caller", "find_caller_class"]
