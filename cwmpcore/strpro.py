"""Small string helpers: trimming and hex conversion."""

from __future__ import annotations

_HEX_DIGITS = "0123456789abcdef"


def clean_space(text: str) -> str:
    """Strip leading and trailing space characters (only ' ')."""
    return clean_by_ch(text, " ")


def clean_by_ch(text: str, ch: str) -> str:
    """Strip every leading and trailing occurrence of the character ``ch``."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return text.strip(ch)


def hex2str(data: bytes, out_len: int) -> str:
    """Render ``data`` as lowercase hex.

    ``out_len`` is the room available for the text and its terminator, so it
    must be at least ``2 * len(data) + 1``.
    """
    if not data or out_len <= 0:
        raise ValueError("data must be non-empty and out_len positive")
    if out_len < len(data) * 2 + 1:
        raise ValueError(f"out_len {out_len} too small for {len(data)} bytes")
    return "".join(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 0x0F] for b in data)


def str2hex(text: str, hex_len: int) -> bytes:
    """Parse lowercase hex text into bytes; ``hex_len`` is the room available."""
    if text is None or hex_len <= 0:
        raise ValueError("text must be given and hex_len positive")
    if hex_len * 2 < len(text):
        raise ValueError(f"hex_len {hex_len} too small for {len(text)} hex digits")
    if len(text) % 2 != 0:
        raise ValueError("hex text must have an even length")
    try:
        values = [_HEX_DIGITS.index(c) for c in text]
    except ValueError:
        raise ValueError(f"invalid hex text {text!r}") from None
    return bytes(hi * 16 + lo for hi, lo in zip(values[::2], values[1::2]))