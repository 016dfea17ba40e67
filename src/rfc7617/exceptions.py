"""
Exception hierarchy for rfc7617.

All codec errors inherit from BasicAuthError for easy catching. Every error
is terminal: it describes malformed input, never a transient condition.
"""


class BasicAuthError(ValueError):
    """Base exception for all Basic authentication codec errors.

    Errors compare equal when their type, value and reason match.
    """

    def _fields(self) -> tuple[type, str | None, str | None]:
        return (type(self), getattr(self, "value", None), getattr(self, "reason", None))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicAuthError):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())


class EmptyInputError(BasicAuthError):
    """Header value was empty."""

    def __init__(self) -> None:
        super().__init__("Input cannot be empty")


class InvalidUserIDError(BasicAuthError):
    """User-id contains a colon.

    Per RFC 7617 §2 the user-id is everything before the first colon, so a
    colon inside it could never be recovered on decode.
    """

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid user-id '{value}': {reason}")


class InvalidFormatError(BasicAuthError):
    """Header value doesn't match the RFC 7617 grammar.

    Possible causes:
    - Value too short
    - Missing "Basic " prefix
    - Missing colon separator in the decoded credentials
    - Missing realm parameter in a challenge
    """

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid format '{value}': {reason}")


class InvalidEncodingError(BasicAuthError):
    """Base64 (or UTF-8) decoding of the credentials failed."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid encoding '{value}': {reason}")


class InvalidCharsetError(BasicAuthError):
    """Challenge charset parameter is not UTF-8.

    RFC 7617 §2.1 defines "UTF-8" (case-insensitive) as the only allowed value.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid charset '{value}': only UTF-8 is supported")
