"""In-memory user store.

Owned by the service container; one instance per process. ``reset()`` is the
lifecycle hook tests use between runs.
"""

import threading

from shared.errors import DuplicateEmail

from identity.user.user import User


class UserStore:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> User:
        """Insert ``user``, failing if the email is already taken.

        The membership check and the insert happen under one lock so two
        concurrent registrations of the same email cannot both succeed.
        """
        with self._lock:
            if user.email in self._users:
                raise DuplicateEmail()
            self._users[user.email] = user
        return user

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._users.get(email)

    def all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def reset(self) -> None:
        with self._lock:
            self._users.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
