"""
Pure ASGI middleware enforcing HTTP Basic authentication.

Provides:
- Authorization header parsing with the rfc7617 codec
- 401 responses carrying the configured WWW-Authenticate challenge
- Authenticated Credentials exposed in the ASGI scope

Usage:
    from rfc7617.middleware.asgi import BasicAuthMiddleware, static_verifier

    app = Starlette(routes=routes)
    app.add_middleware(
        BasicAuthMiddleware,
        verifier=static_verifier("admin", settings.admin_password),
        realm="admin",
        charset="UTF-8",
    )

    async def whoami(request: Request):
        credentials = request.scope[SCOPE_BASIC_CREDENTIALS]
        return JSONResponse({"user": credentials.user_id})
"""

import json
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from rfc7617._logging import get_logger
from rfc7617.challenge import Challenge, encode_challenge
from rfc7617.constants import (
    HEADER_AUTHORIZATION,
    HEADER_WWW_AUTHENTICATE,
    SCOPE_BASIC_CREDENTIALS,
    ParseMode,
)
from rfc7617.credentials import Credentials, decode_credentials
from rfc7617.exceptions import BasicAuthError

__all__ = [
    "BasicAuthMiddleware",
    "CredentialVerifier",
    "static_verifier",
]

_logger = get_logger(__name__)

# Type alias for credential verification callback
CredentialVerifier = Callable[[Credentials], Awaitable[bool]]
"""
Callback deciding whether presented credentials are accepted.

Args:
    credentials: Parsed Credentials from the Authorization header

Returns:
    True to let the request through, False to answer 401
"""


def static_verifier(user_id: str, password: str) -> CredentialVerifier:
    """
    Build a verifier accepting exactly one user-id/password pair.

    Comparison is constant time (see Credentials.matches).

    Raises:
        InvalidUserIDError: If user_id contains a colon
    """
    expected = Credentials(user_id, password)

    async def verify(credentials: Credentials) -> bool:
        return expected.matches(credentials)

    return verify


class BasicAuthMiddleware:
    """
    Pure ASGI middleware requiring Basic credentials on every HTTP request.

    Requests without a usable Authorization header, or whose credentials the
    verifier rejects, get a 401 with the challenge in WWW-Authenticate.
    Parse errors are never echoed to the client.
    """

    def __init__(
        self,
        app: Any,
        verifier: CredentialVerifier,
        realm: str,
        *,
        charset: str | None = None,
        mode: ParseMode = ParseMode.STRICT,
        exclude_paths: Iterable[str] = (),
    ) -> None:
        """
        Initialize Basic auth middleware.

        Args:
            app: ASGI application
            verifier: Async callback accepting or rejecting parsed credentials
            realm: Protection space advertised in the challenge
            charset: Optional charset advertised in the challenge ("UTF-8" only)
            mode: Whitespace policy for parsing the Authorization header
            exclude_paths: Paths served without authentication (e.g. health checks)

        Raises:
            InvalidCharsetError: If charset is not UTF-8
        """
        self.app = app
        self.verifier = verifier
        self.challenge = Challenge(realm, charset)
        self.mode = mode
        self.exclude_paths = frozenset(exclude_paths)
        self._challenge_header = encode_challenge(self.challenge)
        self._authorization_key = HEADER_AUTHORIZATION.lower().encode()

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[dict[str, Any]], Awaitable[None]],
    ) -> None:
        """ASGI interface."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        method = scope.get("method", "")
        if path in self.exclude_paths:
            _logger.debug("Excluded path, skipping auth: method=%s path=%s", method, path)
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        authorization = headers.get(self._authorization_key)
        if not authorization:
            _logger.debug("Missing Authorization header: method=%s path=%s", method, path)
            await self._send_unauthorized(send, "Authentication required")
            return

        try:
            credentials = decode_credentials(authorization, mode=self.mode)
        except BasicAuthError as e:
            # Error values may contain credential material, log the type only
            _logger.debug("Malformed credentials: method=%s path=%s error_type=%s", method, path, type(e).__name__)
            await self._send_unauthorized(send, "Authentication required")
            return

        if not await self.verifier(credentials):
            _logger.debug("Credentials rejected: method=%s path=%s", method, path)
            await self._send_unauthorized(send, "Invalid credentials")
            return

        _logger.debug("Authenticated request: method=%s path=%s", method, path)
        scope[SCOPE_BASIC_CREDENTIALS] = credentials
        await self.app(scope, receive, send)

    async def _send_unauthorized(
        self,
        send: Callable[[dict[str, Any]], Awaitable[None]],
        message: str,
    ) -> None:
        """Send a 401 response with the challenge."""
        body = json.dumps({"error": message}).encode()
        await send(
            {
                "type": "http.response.start",
                "status": 401,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode()),
                    (HEADER_WWW_AUTHENTICATE.lower().encode(), self._challenge_header),
                ],
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": body,
                "more_body": False,
            }
        )
