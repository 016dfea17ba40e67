"""
ASCII byte helpers shared by the credential and challenge codecs.
"""

from rfc7617.constants import ParseMode

__all__ = [
    "OWS",
    "HeaderValue",
    "as_text",
    "is_utf8_encodable",
    "match_prefix",
    "prepare",
    "strip_ows",
    "to_bytes",
]

HeaderValue = bytes | bytearray | memoryview | str
"""Header value as raw ASGI bytes or as a decoded framework string."""

# Leading/trailing characters dropped in lenient mode
_LENIENT_WHITESPACE = b" \t\r\n"

# Optional whitespace inside a parameter list (RFC 7230 §3.2.3 OWS)
OWS = " \t"


def _fold(byte: int) -> int:
    """Lowercase a single ASCII letter, leave every other byte alone."""
    if 0x41 <= byte <= 0x5A:
        return byte | 0x20
    return byte


def match_prefix(data: bytes, literal: bytes) -> tuple[bool, bytes]:
    """
    Match an ASCII literal at the start of data, ignoring letter case.

    Letters are compared case-insensitively byte by byte; every other byte
    (e.g. the SP in ``b"Basic "``) must match exactly.

    Args:
        data: Bytes to inspect
        literal: ASCII literal expected at the start of data

    Returns:
        Tuple of (matched, remainder). On a mismatch the remainder is data unchanged.
    """
    if len(data) < len(literal):
        return (False, data)
    for got, expected in zip(data, literal):
        if _fold(got) != _fold(expected):
            return (False, data)
    return (True, data[len(literal) :])


def to_bytes(value: HeaderValue) -> bytes:
    """Normalize a header value to bytes (str is UTF-8 encoded)."""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def as_text(data: bytes) -> str:
    """Render bytes for error messages without failing on invalid UTF-8."""
    return data.decode("utf-8", errors="replace")


def strip_ows(text: str) -> str:
    """Strip spaces and horizontal tabs (only) from both ends."""
    return text.strip(OWS)


def prepare(value: HeaderValue, mode: ParseMode) -> bytes:
    """Normalize a header value and apply the whitespace policy of mode."""
    data = to_bytes(value)
    if mode is ParseMode.LENIENT:
        data = data.strip(_LENIENT_WHITESPACE)
    return data


def is_utf8_encodable(text: str) -> bool:
    """False for text holding lone surrogates, which UTF-8 cannot represent."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
