import io
from unittest import mock

import pytest

from dckit.callstack import (
    MAX_FRAMES,
    Callstack,
    CallstackError,
    build_callstack,
    print_callstack,
)


def _outer():
    return _inner()


def _inner():
    return build_callstack()


def test_callstack_lists_caller_frames_innermost_first():
    stack = _outer()
    text = stack.callstack
    assert "_inner" in text
    assert "_outer" in text
    assert text.index("_inner") < text.index("_outer")


def test_callstack_excludes_itself():
    text = build_callstack().callstack
    assert "build_callstack" not in text.splitlines()[0]
    assert "test_callstack_excludes_itself" in text.splitlines()[0]


def test_callstack_line_format_and_no_trailing_newline():
    text = build_callstack().callstack
    lines = text.split("\n")
    assert not text.endswith("\n")
    assert all(line.startswith("  ") and line.endswith(")") for line in lines)
    assert __file__ in lines[0]


def test_callstack_is_bounded():
    def recurse(depth):
        if depth == 0:
            return build_callstack()
        return recurse(depth - 1)

    lines = recurse(MAX_FRAMES + 20).callstack.split("\n")
    assert len(lines) == MAX_FRAMES


def test_callstack_stops_at_main():
    def main():
        return build_callstack()

    lines = main().callstack.split("\n")
    assert len(lines) == 1
    assert "main" in lines[0]


def test_str_of_callstack_is_its_text():
    stack = Callstack("  f (x.py:1)")
    assert str(stack) == "  f (x.py:1)"


def test_error_text():
    assert str(CallstackError()) == "<error building the callstack>"


def test_build_raises_when_frames_unavailable():
    with mock.patch("inspect.currentframe", return_value=None):
        with pytest.raises(CallstackError):
            build_callstack()


def test_print_callstack_writes_header_and_frames():
    stream = io.StringIO()
    print_callstack(stream)
    out = stream.getvalue()
    assert out.startswith("Callstack:\n")
    assert out.endswith("\n")
    assert "test_print_callstack_writes_header_and_frames" in out


def test_print_callstack_writes_nothing_on_failure():
    stream = io.StringIO()
    with mock.patch("inspect.currentframe", return_value=None):
        print_callstack(stream)
    assert stream.getvalue() == ""