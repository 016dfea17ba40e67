"""
RFC 7617 "Basic" HTTP Authentication Scheme.

This library encodes and decodes the two header values the Basic scheme
uses: credentials in Authorization and challenges in WWW-Authenticate.
Every value is validated on construction, so a Credentials or Challenge
instance always serializes to a well-formed header.

Usage (credentials):
    from rfc7617 import Credentials, decode_credentials, encode_credentials

    header = encode_credentials(Credentials("Aladdin", "open sesame"))
    # b"Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="
    credentials = decode_credentials(header)

Usage (challenge):
    from rfc7617 import Challenge, decode_challenge, encode_challenge

    header = encode_challenge(Challenge("WallyWorld", charset="UTF-8"))
    # b'Basic realm="WallyWorld", charset="UTF-8"'

Usage (Server - ASGI):
    from rfc7617.middleware.asgi import BasicAuthMiddleware, static_verifier

    app.add_middleware(BasicAuthMiddleware, verifier=static_verifier("admin", "s3cret"), realm="admin")
"""

from rfc7617.challenge import Challenge, decode_challenge, encode_challenge
from rfc7617.constants import CHARSET_UTF8, HEADER_AUTHORIZATION, HEADER_WWW_AUTHENTICATE, ParseMode
from rfc7617.credentials import Credentials, decode_credentials, encode_credentials
from rfc7617.exceptions import (
    BasicAuthError,
    EmptyInputError,
    InvalidCharsetError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidUserIDError,
)

__all__ = [
    # Constants
    "CHARSET_UTF8",
    "HEADER_AUTHORIZATION",
    "HEADER_WWW_AUTHENTICATE",
    "ParseMode",
    # Types
    "Challenge",
    "Credentials",
    # Codec
    "decode_challenge",
    "decode_credentials",
    "encode_challenge",
    "encode_credentials",
    # Exceptions
    "BasicAuthError",
    "EmptyInputError",
    "InvalidCharsetError",
    "InvalidEncodingError",
    "InvalidFormatError",
    "InvalidUserIDError",
]

__version__ = "0.1.0"
