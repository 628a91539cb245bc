"""UTF-8 <-> codepoint conversion at the host boundary.

Malformed input is rejected, never replaced: a ``CodepointDecodeError``
carries the offset of the first bad byte so the host can report it.
"""

from __future__ import annotations

from .sync import CodepointDecodeError, CodepointError

MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def decode_utf8(data: bytes | bytearray | memoryview) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CodepointDecodeError(
            f"Malformed UTF-8 at byte {exc.start}: {exc.reason}", offset=exc.start
        ) from exc


def ensure_codepoint(value: str | int) -> str:
    """Return ``value`` as a one-codepoint string or raise ``CodepointError``."""

    if isinstance(value, bool):
        raise CodepointError("Booleans are not codepoints")
    if isinstance(value, int):
        if value < 0 or value > MAX_CODEPOINT:
            raise CodepointError(f"Codepoint out of range: {value:#x}")
        if value in _SURROGATES:
            raise CodepointError(f"Surrogate is not a scalar value: {value:#x}")
        return chr(value)
    if not isinstance(value, str) or len(value) != 1:
        raise CodepointError(f"Expected a single codepoint, got {value!r}")
    if ord(value) in _SURROGATES:
        raise CodepointError(f"Surrogate is not a scalar value: {ord(value):#x}")
    return value


def ensure_text(text: str) -> str:
    """Validate that every codepoint of ``text`` is a Unicode scalar value."""

    for index, char in enumerate(text):
        if ord(char) in _SURROGATES:
            raise CodepointError(
                f"Surrogate is not a scalar value at index {index}: {ord(char):#x}"
            )
    return text


def coerce_text(value: str | bytes | bytearray | memoryview) -> str:
    if isinstance(value, str):
        return ensure_text(value)
    return decode_utf8(value)


__all__ = [
    "MAX_CODEPOINT",
    "coerce_text",
    "decode_utf8",
    "ensure_codepoint",
    "ensure_text",
]
