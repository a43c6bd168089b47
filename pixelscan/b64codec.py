"""Base64 encoding and a lenient decoder that skips noise characters."""

from __future__ import annotations

import base64

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DIGITS = {char: value for value, char in enumerate(_ALPHABET)}


def encode(data: bytes | bytearray) -> str:
    """Encode ``data`` as padded base64 without line breaks."""
    if not data:
        raise ValueError("cannot encode empty input")
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(data: str | bytes | bytearray) -> bytes:
    """Decode base64 text, ignoring line breaks, padding and other noise."""
    if isinstance(data, str):
        data = data.encode("latin-1", errors="ignore")
    digits = (_DIGITS[char] for char in data if char in _DIGITS)
    out = bytearray()
    last = 0
    for position, digit in enumerate(digits):
        phase = position % 4
        if phase == 1:
            out.append(((last << 2) | ((digit & 0x30) >> 4)) & 0xFF)
        elif phase == 2:
            out.append((((last & 0x0F) << 4) | ((digit & 0x3C) >> 2)) & 0xFF)
        elif phase == 3:
            out.append((((last & 0x03) << 6) | digit) & 0xFF)
        last = digit
    return bytes(out)