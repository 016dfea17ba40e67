"""
Basic challenge carried in the WWW-Authenticate header.

Wire format (RFC 7617 §2, §2.1):

    challenge = "Basic" SP "realm=" quoted-string [ "," SP "charset=" quoted-string ]

Inside a quoted-string, ``"`` and ``\\`` are escaped with a backslash.
Parsing undoes that escaping, so any realm round-trips.
"""

import re
from dataclasses import dataclass

from rfc7617._ascii import (
    OWS,
    HeaderValue,
    as_text,
    is_utf8_encodable,
    match_prefix,
    prepare,
    strip_ows,
)
from rfc7617.constants import (
    CHARSET_UTF8,
    MIN_HEADER_LENGTH,
    PARAM_CHARSET,
    PARAM_REALM,
    SCHEME_PREFIX,
    ParseMode,
)
from rfc7617.exceptions import (
    EmptyInputError,
    InvalidCharsetError,
    InvalidEncodingError,
    InvalidFormatError,
)

__all__ = [
    "Challenge",
    "decode_challenge",
    "encode_challenge",
    "quote_string",
    "unquote_string",
]

_NEEDS_ESCAPE = re.compile(r'(["\\])')
_ESCAPED = re.compile(r"\\(.)", re.DOTALL)


@dataclass(frozen=True, eq=False)
class Challenge:
    """Protection space advertised to the client.

    charset is kept exactly as given; equality and hashing ignore its case.
    """

    realm: str
    charset: str | None = None

    def __post_init__(self) -> None:
        """
        Validate the charset parameter and the realm text.

        Raises:
            InvalidEncodingError: If realm cannot be encoded as UTF-8
            InvalidCharsetError: If charset is set and is not "UTF-8" (any case)
        """
        if self.charset is not None and self.charset.lower() != CHARSET_UTF8.lower():
            raise InvalidCharsetError(self.charset)
        if not is_utf8_encodable(self.realm):
            raise InvalidEncodingError(self.realm, "realm is not encodable as UTF-8")

    def _key(self) -> tuple[str, str | None]:
        return (self.realm, self.charset.lower() if self.charset is not None else None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Challenge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_header(self) -> str:
        """WWW-Authenticate header value as str."""
        return encode_challenge(self).decode("utf-8")

    def __str__(self) -> str:
        return self.to_header()


def quote_string(text: str) -> str:
    """Wrap text in a quoted-string, escaping ``"`` and ``\\`` in a single pass."""
    return '"' + _NEEDS_ESCAPE.sub(r"\\\1", text) + '"'


def unquote_string(value: str) -> str:
    """
    Remove surrounding quotes and undo backslash escapes.

    Values that are not wrapped in a pair of double quotes are returned as-is.
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return _ESCAPED.sub(r"\1", value[1:-1])
    return value


def encode_challenge(challenge: Challenge) -> bytes:
    """
    Serialize a challenge to a WWW-Authenticate header value.

    Args:
        challenge: Validated challenge

    Returns:
        ``b'Basic realm="..."'`` plus ``b', charset="..."'`` when charset is set
    """
    value = f"{PARAM_REALM}={quote_string(challenge.realm)}"
    if challenge.charset is not None:
        # Already validated as UTF-8, nothing to escape
        value += f', {PARAM_CHARSET}="{challenge.charset}"'
    return SCHEME_PREFIX + value.encode("utf-8")


def _split_params(text: str) -> list[str]:
    """
    Split on commas outside quoted-strings, dropping empty components.

    A quoted-string only opens when ``"`` is the first non-OWS character
    after the component's ``=``; a ``"`` anywhere else is an ordinary character.
    """
    components: list[str] = []
    current: list[str] = []
    seen_equals = False
    value_started = False
    in_quotes = False
    escaped = False

    for ch in text:
        if escaped:
            escaped = False
        elif in_quotes:
            if ch == "\\":
                escaped = True
            elif ch == '"':
                in_quotes = False
        elif ch == ",":
            components.append("".join(current))
            current = []
            seen_equals = value_started = False
            continue
        elif not seen_equals:
            seen_equals = ch == "="
        elif not value_started and ch not in OWS:
            value_started = True
            in_quotes = ch == '"'
        current.append(ch)

    components.append("".join(current))
    return [c for c in components if c]



def decode_challenge(value: HeaderValue, *, mode: ParseMode = ParseMode.STRICT) -> Challenge:
    """
    Parse a WWW-Authenticate header value.

    Unknown parameters and components without ``=`` are ignored. When a
    parameter repeats, the last occurrence wins.

    Args:
        value: Header value (bytes from ASGI or str from a framework)
        mode: STRICT requires the value to start with "Basic " exactly and
            takes keys and values around "=" verbatim. LENIENT strips
            surrounding whitespace first and also around each "="

    Returns:
        Parsed Challenge

    Raises:
        EmptyInputError: If value is empty
        InvalidFormatError: If the prefix or length is wrong, or realm is missing
        InvalidEncodingError: If the parameters are not valid UTF-8
        InvalidCharsetError: If charset is present and not UTF-8
    """
    data = prepare(value, mode)
    if not data:
        raise EmptyInputError()

    if len(data) < MIN_HEADER_LENGTH:
        raise InvalidFormatError(as_text(data), "too short")

    matched, rest = match_prefix(data, SCHEME_PREFIX)
    if not matched:
        raise InvalidFormatError(as_text(data), "must start with 'Basic '")

    try:
        params = rest.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(as_text(data), "parameters are not valid UTF-8") from e

    realm: str | None = None
    charset: str | None = None

    for component in _split_params(params):
        key, sep, raw = strip_ows(component).partition("=")
        if not sep:
            continue

        if mode is ParseMode.LENIENT:
            # Tolerate BWS around "=" (RFC 7235 §2.1)
            key, raw = strip_ows(key), strip_ows(raw)

        key = key.lower()
        if key == PARAM_REALM:
            realm = unquote_string(raw)
        elif key == PARAM_CHARSET:
            charset = unquote_string(raw)

    if realm is None:
        raise InvalidFormatError(as_text(data), "realm parameter is required")

    return Challenge(realm, charset)
