"""
Wire constants for the "Basic" HTTP Authentication Scheme.

Reference: RFC 7617 §2, RFC 7235 §2.1
"""

from enum import Enum
from typing import Final

# === Scheme ===

SCHEME: Final = b"Basic"
"""Auth-scheme token as serialized (matched case-insensitively on parse)."""

SCHEME_PREFIX: Final = SCHEME + b" "
"""Scheme token plus the single SP separator (6 bytes)."""

MIN_HEADER_LENGTH: Final = len(SCHEME_PREFIX) + 1
"""Shortest acceptable header value: prefix plus one token character."""

USER_PASS_SEPARATOR: Final = b":"
"""Separator between user-id and password (0x3A). Never allowed in a user-id."""

# === Challenge parameters ===

PARAM_REALM: Final = "realm"
PARAM_CHARSET: Final = "charset"

CHARSET_UTF8: Final = "UTF-8"
"""Only charset value permitted by RFC 7617 §2.1 (case-insensitive)."""

# === HTTP headers ===

HEADER_AUTHORIZATION: Final = "Authorization"
HEADER_WWW_AUTHENTICATE: Final = "WWW-Authenticate"

# === ASGI ===

SCOPE_BASIC_CREDENTIALS: Final = "rfc7617.credentials"
"""ASGI scope key holding the authenticated Credentials."""


class ParseMode(str, Enum):
    """Whitespace policy applied before the "Basic " prefix is matched."""

    STRICT = "strict"
    """Header value must start with the prefix exactly (no surrounding whitespace)."""

    LENIENT = "lenient"
    """Leading/trailing SP, HTAB, CR and LF are stripped before parsing."""
