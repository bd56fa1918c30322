"""Capture the current call stack as readable text."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from typing import TextIO

from dckit.fmt import raw_print

MAX_FRAMES = 64
_ERROR_TEXT = "<error building the callstack>"


class CallstackError(RuntimeError):
    """Raised when the call stack cannot be captured."""

    def __init__(self, message: str = _ERROR_TEXT) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return _ERROR_TEXT


@dataclass(frozen=True)
class Callstack:
    """The call stack, innermost frame first, one frame per line.

    Each line reads ``  <function> (<file>:<line>)``.
    """

    callstack: str

    def __str__(self) -> str:
        return self.callstack


def _frame_name(frame) -> str:
    code = frame.f_code
    return getattr(code, "co_qualname", code.co_name)


def build_callstack() -> Callstack:
    """Return the call stack of the caller.

    Frames are listed from the caller outwards, at most ``MAX_FRAMES`` of
    them; walking stops after a frame of a function named ``main``.
    """
    current = inspect.currentframe()
    if current is None:
        raise CallstackError()
    frame = current.f_back
    del current

    lines: list[str] = []
    try:
        while frame is not None and len(lines) < MAX_FRAMES:
            name = _frame_name(frame)
            file_line = f"{frame.f_code.co_filename}:{frame.f_lineno}"
            lines.append(f"  {name} ({file_line})")
            if frame.f_code.co_name == "main":
                break
            frame = frame.f_back
    finally:
        del frame

    return Callstack("\n".join(lines))


def print_callstack(stream: TextIO | None = None) -> None:
    """Write the caller's call stack to ``stream`` (standard output by default).

    Nothing is written when the call stack cannot be captured.
    """
    target = sys.stdout if stream is None else stream
    try:
        stack = build_callstack()
    except CallstackError:
        return
    raw_print(target, "Callstack:\n")
    raw_print(target, stack.callstack)
    raw_print(target, "\n")