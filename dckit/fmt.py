"""Brace-style string formatting that reports failures as values."""

from __future__ import annotations

import builtins
import enum
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TextIO

from dckit.result import Err, Ok, Result


class FormatErrKind(enum.Enum):
    """What went wrong while formatting."""

    INVALID_SPECIFICATION = "InvalidSpecification"
    CANNOT_FORMAT_TYPE = "CannotFormatType"
    CANNOT_WRITE_TO_FILE = "CannotWriteToFile"
    OUT_OF_MEMORY = "OutOfMemory"
    PARSE_RETURNED_BAD_ITERATOR = "ParseReturnedBadIterator"


_MESSAGES = {
    FormatErrKind.INVALID_SPECIFICATION: "Parsed invalid format specification.",
    FormatErrKind.CANNOT_FORMAT_TYPE: (
        "Cannot format type. Specialize the struct Formatter<T> for your type."
    ),
    FormatErrKind.CANNOT_WRITE_TO_FILE: "CannotWriteToFile.",
    FormatErrKind.OUT_OF_MEMORY: (
        "Supplied buffer too small, or memory allocation failed."
    ),
    FormatErrKind.PARSE_RETURNED_BAD_ITERATOR: (
        "Parse returned bad iterator, past end or before begin."
    ),
}


@dataclass(frozen=True)
class FormatErr:
    """A formatting failure and the pattern position where it happened."""

    kind: FormatErrKind
    pos: int = 0


class Presentation(enum.Enum):
    """How an integer is written out."""

    DECIMAL = "d"
    HEX = "x"
    BINARY = "b"


def error_message(kind: FormatErrKind) -> str:
    """Return a human readable message for ``kind``."""
    return _MESSAGES.get(kind, "Internal error.")


def describe_error(err: FormatErr, pattern: str) -> str:
    """Return a full description of ``err`` as it occurred in ``pattern``."""
    return (
        f'Format error: "{error_message(err.kind)}" at pos {err.pos}\n'
        f"Pattern: {pattern}"
    )


_SPEC = re.compile(
    r"(?:(?P<fill>[^{}])?(?P<align>[<>^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<alt>\#)?"
    r"(?P<zero>0)?"
    r"(?P<width>[0-9]+)?"
    r"(?:\.(?P<precision>[0-9]+))?"
    r"(?P<locale>L)?"
    r"(?P<type>[saAbBcdeEfFgGopxX?])?",
    re.DOTALL,
)


class _FieldError(Exception):
    def __init__(self, kind: FormatErrKind) -> None:
        super().__init__(kind)
        self.kind = kind


def _shortest_float(magnitude: float) -> str:
    """Shortest round-trip text of a finite, non-negative float."""
    normalized = Decimal(repr(magnitude)).normalize()
    _, digit_tuple, exponent = normalized.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    if digits == "0":
        return "0"

    if exponent >= 0:
        fixed = digits + "0" * exponent
    else:
        int_len = len(digits) + exponent
        if int_len > 0:
            fixed = f"{digits[:int_len]}.{digits[int_len:]}"
        else:
            fixed = "0." + "0" * (-int_len) + digits

    sci_exp = exponent + len(digits) - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    sci = f"{mantissa}e{'-' if sci_exp < 0 else '+'}{abs(sci_exp):02d}"
    return fixed if len(fixed) <= len(sci) else sci


def _format_float_default(value: float, match: re.Match) -> str:
    negative = math.copysign(1.0, value) < 0
    finite = math.isfinite(value)
    if math.isnan(value):
        body = "nan"
    elif math.isinf(value):
        body = "inf"
    else:
        body = _shortest_float(abs(value))
        if match["alt"] and "." not in body:
            cut = body.find("e")
            body = body + "." if cut < 0 else body[:cut] + "." + body[cut:]

    sign_opt = match["sign"] or "-"
    if negative:
        sign = "-"
    elif sign_opt in "+ ":
        sign = sign_opt
    else:
        sign = ""

    width = int(match["width"]) if match["width"] else 0
    text = sign + body
    if len(text) >= width:
        return text
    padding = width - len(text)
    if match["zero"] and not match["align"] and finite:
        return sign + "0" * padding + body
    fill = match["fill"] or " "
    align = match["align"] or ">"
    if align == "<":
        return text + fill * padding
    if align == ">":
        return fill * padding + text
    left = padding // 2
    return fill * left + text + fill * (padding - left)


def _format_value(value: Any, spec: str) -> str:
    match = _SPEC.fullmatch(spec)
    if match is None:
        raise _FieldError(FormatErrKind.INVALID_SPECIFICATION)

    kind = match["type"] or ""
    if isinstance(value, float) and kind == "" and match["precision"] is None:
        return _format_float_default(value, match)
    if isinstance(value, float) and kind == "":
        kind = "g"

    py_spec = "".join(
        (
            match["fill"] or "",
            match["align"] or "",
            match["sign"] or "",
            "#" if match["alt"] else "",
            "0" if match["zero"] else "",
            match["width"] or "",
            f".{match['precision']}" if match["precision"] is not None else "",
            kind,
        )
    )

    if isinstance(value, bool):
        if kind in ("", "s"):
            value = "true" if value else "false"
        else:
            value = int(value)

    try:
        return builtins.format(value, py_spec)
    except (ValueError, OverflowError) as exc:
        raise _FieldError(FormatErrKind.INVALID_SPECIFICATION) from exc
    except TypeError as exc:
        raise _FieldError(FormatErrKind.CANNOT_FORMAT_TYPE) from exc


def _is_ascii_digits(text: str) -> bool:
    return bool(text) and all(ch in "0123456789" for ch in text)


def format_strict(pattern: str, *args: Any) -> Result[str, FormatErr]:
    """Format ``args`` into ``pattern``; return Ok(text) or Err(FormatErr).

    Replacement fields are ``{}`` or ``{index}``, optionally followed by
    ``:spec``; ``{{`` and ``}}`` stand for literal braces.
    """
    out: list[str] = []
    next_auto = 0
    manual: bool | None = None
    length = len(pattern)
    i = 0

    def fail(kind: FormatErrKind, pos: int) -> Result[str, FormatErr]:
        return Result(Err(FormatErr(kind, pos)))

    while i < length:
        char = pattern[i]
        if char == "{":
            if i + 1 < length and pattern[i + 1] == "{":
                out.append("{")
                i += 2
                continue
            end = pattern.find("}", i + 1)
            if end < 0:
                return fail(FormatErrKind.INVALID_SPECIFICATION, i)
            field = pattern[i + 1 : end]
            if "{" in field:
                return fail(FormatErrKind.INVALID_SPECIFICATION, i)
            arg_id, _, spec = field.partition(":")
            if arg_id:
                if not _is_ascii_digits(arg_id) or manual is False:
                    return fail(FormatErrKind.INVALID_SPECIFICATION, i)
                manual = True
                index = int(arg_id)
            else:
                if manual is True:
                    return fail(FormatErrKind.INVALID_SPECIFICATION, i)
                manual = False
                index = next_auto
                next_auto += 1
            if index >= len(args):
                return fail(FormatErrKind.INVALID_SPECIFICATION, i)
            try:
                out.append(_format_value(args[index], spec))
            except _FieldError as exc:
                return fail(exc.kind, i)
            i = end + 1
        elif char == "}":
            if i + 1 < length and pattern[i + 1] == "}":
                out.append("}")
                i += 2
                continue
            return fail(FormatErrKind.INVALID_SPECIFICATION, i)
        else:
            out.append(char)
            i += 1

    return Result(Ok("".join(out)))


def format(pattern: str, *args: Any) -> str:  # noqa: A001
    """Format ``args`` into ``pattern``; raise ValueError when that fails."""
    result = format_strict(pattern, *args)
    if result.is_err():
        raise ValueError(describe_error(result.err_value(), pattern))
    return result.value()


def int_to_string(value: int, presentation: Presentation = Presentation.DECIMAL) -> str:
    """Write ``value`` in decimal, hexadecimal or binary, without prefix."""
    return builtins.format(int(value), presentation.value)


def raw_print(stream: TextIO, text: str) -> Result[None, FormatErr]:
    """Write ``text`` to ``stream`` unchanged; Err when the write fails."""
    try:
        written = stream.write(text)
    except (OSError, ValueError):
        return Result(Err(FormatErr(FormatErrKind.CANNOT_WRITE_TO_FILE, 0)))
    if written is not None and written != len(text):
        return Result(Err(FormatErr(FormatErrKind.CANNOT_WRITE_TO_FILE, 0)))
    return Result(Ok(None))