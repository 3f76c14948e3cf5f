"""Token verification port.

The contract the ordering context depends on to identify the caller. The
Auth Service implements it; tests can hand checkout any other implementation.
"""

from abc import ABC, abstractmethod

from identity.user.user import User


class TokenVerifier(ABC):
    @abstractmethod
    def verify_token(self, token: str | None) -> User | None:
        """Return the user bound to ``token``, or None when it is not valid."""
        ...
