# ============================================================================
# PAYLOAD CODEC
# ============================================================================
# EPOCH: 1 - UDP MONITOR
# STATUS: Core - Mixed text / hex-escape payload encoding
# PURPOSE: Turn the configured payload string into the datagram bytes
# CREATED: 17 OCT 2026
# ============================================================================
"""
Payload Codec

Payloads are configured as text that may embed raw bytes as \\xHH escapes:

    \\xFF\\xFF\\xFF\\xFFTSource Engine Query\\x00
    -> FF FF FF FF 54 53 6F 75 72 63 65 20 ... 79 00

Only a backslash, a lowercase "x" and exactly two hex digits form an escape.
Anything else, including malformed escapes such as \\xZZ or \\x1, is kept as
literal UTF-8 text, so encoding never fails.
"""

import string

ESCAPE_PREFIX = "\\x"
_ESCAPE_LENGTH = 4
_HEX_DIGITS = frozenset(string.hexdigits)


def _escape_at(text: str, index: int) -> bool:
    """True if a complete \\xHH escape starts at index."""
    return (
        text.startswith(ESCAPE_PREFIX, index)
        and index + _ESCAPE_LENGTH <= len(text)
        and text[index + 2] in _HEX_DIGITS
        and text[index + 3] in _HEX_DIGITS
    )


def encode_payload(text: str) -> bytes:
    """
    Encode configured payload text into bytes.

    Single left-to-right pass; escapes are matched leftmost and never
    overlap. Text between escapes is UTF-8 encoded. Lone surrogates, which
    UTF-8 cannot represent, become "?".

    Args:
        text: Payload string from configuration

    Returns:
        The datagram bytes
    """
    encoded = bytearray()
    text_start = 0
    index = 0

    while index < len(text):
        if _escape_at(text, index):
            encoded += text[text_start:index].encode("utf-8", errors="replace")
            encoded.append(int(text[index + 2:index + _ESCAPE_LENGTH], 16))
            index += _ESCAPE_LENGTH
            text_start = index
        else:
            index += 1

    encoded += text[text_start:].encode("utf-8", errors="replace")
    return bytes(encoded)


def render_hex(data: bytes) -> str:
    """Render bytes as space-separated uppercase hex, e.g. "FF 54 00"."""
    return " ".join(f"{byte:02X}" for byte in data)


__all__ = [
    "encode_payload",
    "render_hex",
]
