"""User aggregate."""

import secrets
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A registered person, identified by email.

    Users are immutable once registered. The password is kept as supplied;
    only ``public()`` is meant to cross the service boundary.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str = Field(repr=False)
    registered_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def register(cls, name: str, email: str, password: str) -> "User":
        return cls(name=name, email=email, password=password)

    @property
    def id(self) -> str:
        return self.email

    def check_password(self, password: str) -> bool:
        return secrets.compare_digest(self.password.encode("utf-8"), password.encode("utf-8"))

    def public(self) -> dict:
        return {"name": self.name, "email": self.email}
