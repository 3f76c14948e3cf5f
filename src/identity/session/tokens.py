"""Opaque bearer tokens bound to a user's email."""

import secrets
import threading

from identity.user.user import User

BEARER_SCHEME = "bearer"


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns None for a missing, empty or malformed header.
    """
    if not authorization:
        return None
    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class TokenStore:
    def __init__(self, token_bytes: int = 32) -> None:
        self._token_bytes = token_bytes
        self._tokens: dict[str, str] = {}
        self._lock = threading.Lock()

    def issue(self, user: User) -> str:
        token = secrets.token_urlsafe(self._token_bytes)
        with self._lock:
            self._tokens[token] = user.email
        return token

    def resolve(self, token: str | None) -> str | None:
        """Return the email bound to ``token``, or None."""
        if not token:
            return None
        with self._lock:
            return self._tokens.get(token)

    def reset(self) -> None:
        with self._lock:
            self._tokens.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
