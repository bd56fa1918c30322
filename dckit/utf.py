"""UTF-8 encoding, decoding and validation of single code points."""

from __future__ import annotations

from dckit.option import Option, none, some

_MAX_CODE_POINT = 0x10FFFF


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(code_point: int) -> bytes:
    """Return the UTF-8 bytes of ``code_point``; empty when it is not valid."""
    if not 0 <= code_point <= _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return b""
    if code_point < 0x80:
        return bytes((code_point,))
    if code_point < 0x800:
        return bytes((0xC0 | (code_point >> 6), 0x80 | (code_point & 0x3F)))
    if code_point < 0x10000:
        return bytes(
            (
                0xE0 | (code_point >> 12),
                0x80 | ((code_point >> 6) & 0x3F),
                0x80 | (code_point & 0x3F),
            )
        )
    return bytes(
        (
            0xF0 | (code_point >> 18),
            0x80 | ((code_point >> 12) & 0x3F),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        )
    )


def _lead_info(lead: int):
    """Return (size, low, high) bounds for the second byte, or None."""
    if lead < 0x80:
        return 1, 0, 0
    if 0xC2 <= lead <= 0xDF:
        return 2, 0x80, 0xBF
    if lead == 0xE0:
        return 3, 0xA0, 0xBF
    if 0xE1 <= lead <= 0xEC or 0xEE <= lead <= 0xEF:
        return 3, 0x80, 0xBF
    if lead == 0xED:
        return 3, 0x80, 0x9F
    if lead == 0xF0:
        return 4, 0x90, 0xBF
    if 0xF1 <= lead <= 0xF3:
        return 4, 0x80, 0xBF
    if lead == 0xF4:
        return 4, 0x80, 0x8F
    return None


def validate(data) -> Option[int]:
    """Return the size of the code point encoded at the start of ``data``.

    The option is empty when the bytes are not a valid UTF-8 encoding.
    """
    raw = _as_bytes(data)
    if not raw:
        return none()
    info = _lead_info(raw[0])
    if info is None:
        return none()
    size, low, high = info
    if size == 1:
        return some(1)
    if len(raw) < size or not low <= raw[1] <= high:
        return none()
    if any(not 0x80 <= byte <= 0xBF for byte in raw[2:size]):
        return none()
    return some(size)


def decode(data, offset: int = 0) -> tuple[int, int]:
    """Decode the code point at ``offset``; return ``(code_point, size)``.

    Raises ValueError when the bytes there are not valid UTF-8.
    """
    raw = _as_bytes(data)
    if not 0 <= offset < len(raw):
        raise ValueError(f"offset {offset} is outside data of length {len(raw)}")
    size_opt = validate(raw[offset:])
    if size_opt.is_none():
        raise ValueError(f"invalid UTF-8 sequence at offset {offset}")
    size = size_opt.value()
    chunk = raw[offset : offset + size]
    if size == 1:
        return chunk[0], 1
    code_point = chunk[0] & (0x7F >> size)
    for byte in chunk[1:]:
        code_point = (code_point << 6) | (byte & 0x3F)
    return code_point, size