"""Threaded logging with named sinks, levels and coloured console output."""

from __future__ import annotations

import enum
import inspect
import os
import queue
import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, TextIO

from dckit.fmt import describe_error, format_strict


class Level(enum.IntEnum):
    """Severity of a log message; messages below the logger's level are dropped."""

    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    RAW = 4
    NONE = 5

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Color(enum.IntEnum):
    """ANSI terminal colour codes."""

    GRAY = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    MAGENTA = 95
    TEAL = 96
    WHITE = 97

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    DARK_BLUE = 34
    PURPLE = 35
    BLUE = 36
    BRIGHT_GRAY = 37


def paint(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape codes that show it in ``color``."""
    return f"\033[{int(color)}m{text}\033[0m"


def format_timestamp(
    timestamp: datetime, print_date: bool = False, high_precision: bool = False
) -> str:
    """Return ``HH:MM:SS.sss``, optionally with the date and microseconds."""
    seconds = timestamp.second + timestamp.microsecond / 1_000_000
    if high_precision:
        sec_text = f"{seconds:09.6f}"
    else:
        sec_text = f"{seconds:06.3f}"
    text = f"{timestamp.hour:02d}:{timestamp.minute:02d}:{sec_text}"
    if print_date:
        text = f"{timestamp:%Y-%m-%d} {text}"
    return text


@dataclass
class Payload:
    """One log message and where it came from."""

    file_name: str | None = None
    function_name: str | None = None
    lineno: int = -1
    level: Level = Level.NONE
    timestamp: datetime = field(default_factory=datetime.now)
    msg: str = ""


Sink = Callable[[Payload, Level], Any]

_FILE_WIDTH = 26
_LINE_WIDTH = 3
_FUNCTION_WIDTH = 14
_LEVEL_WIDTH = 7


def _render(payload: Payload) -> str:
    if payload.level is Level.RAW:
        return payload.msg
    prefix = " ".join(
        (
            f"[{format_timestamp(payload.timestamp, True, True)}]",
            f"[{str(payload.level):<{_LEVEL_WIDTH}}]",
            f"[{payload.file_name or '?':<{_FILE_WIDTH}}:{payload.lineno:<{_LINE_WIDTH}}]",
            f"[{payload.function_name or '?':<{_FUNCTION_WIDTH}}]",
        )
    )
    return f"{prefix} {payload.msg}\n"


class ConsoleSink:
    """Writes each payload, with its prefix, to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def _target(self) -> TextIO:
        return sys.stdout if self.stream is None else self.stream

    def __call__(self, payload: Payload, level: Level) -> None:
        target = self._target()
        target.write(_render(payload))
        target.flush()


_LEVEL_COLORS = {
    Level.VERBOSE: Color.GRAY,
    Level.INFO: Color.WHITE,
    Level.WARNING: Color.BRIGHT_YELLOW,
    Level.ERROR: Color.BRIGHT_RED,
}


class ColoredConsoleSink(ConsoleSink):
    """Like ConsoleSink, with each line coloured by its level."""

    def __call__(self, payload: Payload, level: Level) -> None:
        text = _render(payload)
        color = _LEVEL_COLORS.get(payload.level)
        if color is not None:
            body = text[:-1] if text.endswith("\n") else text
            tail = "\n" if text.endswith("\n") else ""
            text = paint(body, color) + tail
        target = self._target()
        target.write(text)
        target.flush()


class Logger:
    """Queues payloads and hands them to its sinks on a background thread.

    A ConsoleSink named ``"default"`` is attached unless another sink is given.
    """

    def __init__(self, sink: Sink | None = None, name: str = "default") -> None:
        self._queue: queue.Queue[Payload] = queue.Queue()
        self._sinks: dict[str, Sink] = {name: sink if sink is not None else ConsoleSink()}
        self._sinks_lock = threading.Lock()
        self._level = Level.VERBOSE
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._dead = threading.Event()
        self._is_active = False

    @property
    def level(self) -> Level:
        """Lowest level that is passed on to the sinks."""
        return self._level

    @level.setter
    def level(self, level: Level) -> None:
        self._level = Level(level)

    @property
    def is_active(self) -> bool:
        """Whether the logger thread is running."""
        return self._is_active

    def start(self) -> None:
        """Start the logger thread; no-op when already running."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._dead.clear()
        self._thread = threading.Thread(target=self._run, name="dckit-logger", daemon=True)
        self._is_active = True
        self._thread.start()

    def stop(self, timeout_us: int = 1_000_000) -> bool:
        """Finish queued work and stop the thread; return whether it ended in time.

        When the thread was never started, queued payloads are delivered here.
        """
        thread = self._thread
        if thread is None:
            self._drain()
            return True
        self._stop_event.set()
        finished = self._dead.wait(timeout_us / 1_000_000)
        if finished:
            thread.join()
            self._thread = None
            self._is_active = False
        return finished

    def enqueue(self, payload: Payload) -> bool:
        """Queue ``payload``; payloads below the logger's level are dropped."""
        if payload.level < self._level:
            return True
        self._queue.put(payload)
        return True

    def approx_payloads_in_queue(self) -> int:
        """Return roughly how many payloads are waiting."""
        return self._queue.qsize()

    def wait_on_logger_dead(self, timeout_us: int) -> bool:
        """Wait until the logger thread has ended, at most ``timeout_us``."""
        return self._dead.wait(timeout_us / 1_000_000)

    def attach_sink(self, sink: Sink, name: str) -> Logger:
        """Send every payload to ``sink`` as well, under ``name``."""
        with self._sinks_lock:
            self._sinks[name] = sink
        return self

    def detach_sink(self, name: str) -> Logger:
        """Stop sending payloads to the sink called ``name``."""
        with self._sinks_lock:
            self._sinks.pop(name, None)
        return self

    def log(self, level: Level, pattern: str, *args: Any) -> Payload:
        """Format a message and queue it, stamped with the caller's location."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                file_name, function_name, lineno = None, None, -1
            else:
                file_name = os.path.basename(caller.f_code.co_filename)
                function_name = caller.f_code.co_name
                lineno = caller.f_lineno
        finally:
            del frame, caller
        return make_payload(file_name, function_name, lineno, level, self, pattern, *args)

    def _dispatch(self, payload: Payload) -> None:
        with self._sinks_lock:
            sinks = list(self._sinks.values())
        for sink in sinks:
            sink(payload, self._level)

    def _drain(self) -> None:
        while True:
            try:
                payload = self._queue.get_nowait()
            except queue.Empty:
                return
            self._dispatch(payload)

    def _run(self) -> None:
        try:
            while True:
                try:
                    payload = self._queue.get(timeout=0.01)
                except queue.Empty:
                    if self._stop_event.is_set():
                        break
                    continue
                self._dispatch(payload)
        finally:
            self._dead.set()


_GLOBAL_LOGGER = Logger()


def get_global_logger() -> Logger:
    """Return the process-wide logger."""
    return _GLOBAL_LOGGER


def init(logger: Logger | None = None) -> None:
    """Start ``logger`` (the global logger by default)."""
    (logger or _GLOBAL_LOGGER).start()


def deinit(timeout_us: int = 1_000_000, logger: Logger | None = None) -> bool:
    """Stop ``logger`` (the global one by default); return whether it finished."""
    return (logger or _GLOBAL_LOGGER).stop(timeout_us)


def set_level(level: Level, logger: Logger | None = None) -> None:
    """Set the level of ``logger`` (the global one by default)."""
    (logger or _GLOBAL_LOGGER).level = level


def make_payload(
    file_name: str | None,
    function_name: str | None,
    lineno: int,
    level: Level,
    logger: Logger,
    pattern: str,
    *args: Any,
) -> Payload:
    """Format ``pattern`` with ``args`` into a payload and queue it on ``logger``.

    Raises ValueError when the pattern cannot be formatted.
    """
    result = format_strict(pattern, *args)
    if result.is_err():
        raise ValueError(
            f"Failed to format, with error [{describe_error(result.err_value(), pattern)}]."
        )
    payload = Payload(
        file_name=file_name,
        function_name=function_name,
        lineno=lineno,
        level=Level(level),
        timestamp=datetime.now(),
        msg=result.value(),
    )
    if not logger.enqueue(payload):
        raise RuntimeError("failed to enqueue log payload")
    return payload