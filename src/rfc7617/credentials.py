"""
Basic credentials carried in the Authorization header.

Wire format (RFC 7617 §2):

    credentials = "Basic" SP token68
    token68     = base64( user-id ":" password )
    user-id     = *( %x00-39 / %x3B-FF )   ; anything except ":"

Usage:
    from rfc7617 import Credentials, decode_credentials, encode_credentials

    header = encode_credentials(Credentials("Aladdin", "open sesame"))
    # b"Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="

    credentials = decode_credentials(request.headers["Authorization"])
"""

import base64
import binascii
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import constant_time

from rfc7617._ascii import HeaderValue, as_text, is_utf8_encodable, match_prefix, prepare
from rfc7617.constants import MIN_HEADER_LENGTH, SCHEME_PREFIX, USER_PASS_SEPARATOR, ParseMode
from rfc7617.exceptions import (
    EmptyInputError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidUserIDError,
)

__all__ = [
    "Credentials",
    "decode_credentials",
    "encode_credentials",
]


@dataclass(frozen=True)
class Credentials:
    """User-id/password pair. The user-id is validated on construction."""

    user_id: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        """
        Validate the user-id and that both fields can be serialized.

        Raises:
            InvalidUserIDError: If user_id contains a colon
            InvalidEncodingError: If either field cannot be encoded as UTF-8
        """
        if ":" in self.user_id:
            raise InvalidUserIDError(self.user_id, "user-id cannot contain colon")
        if not is_utf8_encodable(self.user_id):
            raise InvalidEncodingError(self.user_id, "user-id is not encodable as UTF-8")
        if not is_utf8_encodable(self.password):
            # Value withheld, same as repr
            raise InvalidEncodingError("<password>", "password is not encodable as UTF-8")

    def user_pass(self) -> bytes:
        """UTF-8 ``user-id ":" password`` octets (before Base64)."""
        return f"{self.user_id}:{self.password}".encode()

    def matches(self, other: "Credentials") -> bool:
        """
        Compare against other credentials in constant time.

        Use this (not ==) when checking a presented pair against a stored one.
        """
        return constant_time.bytes_eq(self.user_pass(), other.user_pass())

    def to_header(self) -> str:
        """Authorization header value as str."""
        return encode_credentials(self).decode("ascii")

    def __str__(self) -> str:
        return self.to_header()


def encode_credentials(credentials: Credentials) -> bytes:
    """
    Serialize credentials to an Authorization header value.

    Args:
        credentials: Validated credentials

    Returns:
        ``b"Basic " + base64(user-id ":" password)``
    """
    return SCHEME_PREFIX + base64.b64encode(credentials.user_pass())


def decode_credentials(value: HeaderValue, *, mode: ParseMode = ParseMode.STRICT) -> Credentials:
    """
    Parse an Authorization header value.

    Only the first colon of the decoded token separates user-id from
    password; any later colon belongs to the password.

    The "missing credentials" check cannot fire once the length check and
    the 6-byte prefix match have passed; it stays so each parse step owns
    its failure reason.

    Args:
        value: Header value (bytes from ASGI or str from a framework)
        mode: STRICT requires the value to start with "Basic " exactly,
            LENIENT strips surrounding whitespace first

    Returns:
        Parsed Credentials

    Raises:
        EmptyInputError: If value is empty
        InvalidFormatError: If the prefix, length or colon separator is wrong
        InvalidEncodingError: If the token is not valid Base64 or the
            decoded octets are not valid UTF-8
    """
    data = prepare(value, mode)
    if not data:
        raise EmptyInputError()

    if len(data) < MIN_HEADER_LENGTH:
        raise InvalidFormatError(as_text(data), "too short")

    matched, token = match_prefix(data, SCHEME_PREFIX)
    if not matched:
        raise InvalidFormatError(as_text(data), "must start with 'Basic '")
    # Unreachable after the length check
    if not token:
        raise InvalidFormatError(as_text(data), "missing credentials")

    try:
        decoded = base64.b64decode(token, validate=True)
    except binascii.Error as e:
        raise InvalidEncodingError(as_text(data), "invalid Base64") from e

    user_id, sep, password = decoded.partition(USER_PASS_SEPARATOR)
    if not sep:
        raise InvalidFormatError(as_text(decoded), "credentials must contain colon separator")

    try:
        user_id_text = user_id.decode("utf-8")
        password_text = password.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(as_text(data), "credentials are not valid UTF-8") from e

    # Re-validated by the constructor
    return Credentials(user_id_text, password_text)
