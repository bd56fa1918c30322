"""Small numeric helpers: range handling, bit manipulation and FNV-1a hashing."""

from __future__ import annotations

import math

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193
_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x00000100000001B3
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def clamp(val, lo, hi):
    """Clamp ``val`` to the closed range ``[lo, hi]``."""
    if lo <= val <= hi:
        return val
    if val < lo:
        return lo
    return hi


def inside(val, lo, hi) -> bool:
    """Return whether ``val`` lies on or inside the range ``[lo, hi]``."""
    return lo <= val <= hi


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def map_range(val, from_min, from_max, to_min, to_max):
    """Map ``val`` from ``[from_min, from_max]`` onto ``[to_min, to_max]``.

    With integer arguments the division truncates toward zero, as integer
    arithmetic does; otherwise true division is used.
    """
    numerator = (val - from_min) * (to_max - to_min)
    denominator = from_max - from_min
    args = (val, from_min, from_max, to_min, to_max)
    if all(isinstance(arg, int) for arg in args):
        quotient = _trunc_div(numerator, denominator)
    else:
        quotient = numerator / denominator
    return quotient + to_min


def u_safe_subtract(minuend, subtrahend):
    """Subtract without going below zero: 0 when ``subtrahend > minuend``."""
    if minuend < subtrahend:
        return 0
    return minuend - subtrahend


def set_bit(value: int, bit: int, bit_value: bool) -> int:
    """Return ``value`` with bit number ``bit`` set to ``bit_value``."""
    return (value & ~(1 << bit)) | (int(bool(bit_value)) << bit)


def set_bits(value: int, bits: int, offset: int, bits_value: int) -> int:
    """Replace ``bits`` bits of ``value`` starting at ``offset``.

    Only the low ``bits`` bits of ``bits_value`` are used; every other bit of
    ``value`` is kept.
    """
    mask = (1 << bits) - 1
    return (value & ~(mask << offset)) | ((bits_value & mask) << offset)


def log2(n) -> int:
    """Return how many times ``n`` can be halved before it drops below 2."""
    if isinstance(n, float) and not math.isfinite(n):
        raise ValueError(f"log2 is undefined for {n!r}")
    steps = 0
    while n >= 2:
        n = n // 2 if isinstance(n, int) else n / 2
        steps += 1
    return steps


def _as_c_bytes(data) -> bytes:
    if isinstance(data, str):
        data = data.encode("utf-8")
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def hash32_fnv1a(data) -> int:
    """32-bit FNV-1a hash of ``data`` (text is hashed as UTF-8).

    Hashing stops at the first NUL byte, as for a C string.
    """
    value = _FNV32_OFFSET
    for byte in _as_c_bytes(data):
        value = ((value ^ byte) * _FNV32_PRIME) & _MASK32
    return value


def hash64_fnv1a(data) -> int:
    """64-bit FNV-1a hash of ``data`` (text is hashed as UTF-8).

    Hashing stops at the first NUL byte, as for a C string.
    """
    value = _FNV64_OFFSET
    for byte in _as_c_bytes(data):
        value = ((value ^ byte) * _FNV64_PRIME) & _MASK64
    return value