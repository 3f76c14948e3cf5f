"""Auth Service: registration, credential checks and bearer tokens."""

from shared.errors import InvalidCredentials
from shared.utils.logging import get_logger

from identity.port import TokenVerifier
from identity.session.tokens import TokenStore
from identity.user.repository import UserStore
from identity.user.user import User

logger = get_logger(__name__)


class AuthService(TokenVerifier):
    def __init__(self, users: UserStore, tokens: TokenStore) -> None:
        self.users = users
        self.tokens = tokens

    def register_user(self, name: str, email: str, password: str) -> User:
        """Create a user. Raises ``DuplicateEmail`` if the email is taken."""
        user = self.users.add(User.register(name=name, email=email, password=password))
        logger.info("User registered", email=email)
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        user = self.users.get_by_email(email)
        if user is None or not user.check_password(password):
            return None
        return user

    def issue_token(self, user: User) -> str:
        return self.tokens.issue(user)

    def login(self, email: str, password: str) -> tuple[str, User]:
        """Authenticate and issue a token. Raises ``InvalidCredentials`` on mismatch."""
        user = self.authenticate(email, password)
        if user is None:
            logger.info("Login rejected", email=email)
            raise InvalidCredentials()
        token = self.issue_token(user)
        logger.info("User logged in", email=email)
        return token, user

    def verify_token(self, token: str | None) -> User | None:
        email = self.tokens.resolve(token)
        if email is None:
            return None
        return self.users.get_by_email(email)

    def list_users(self) -> list[User]:
        return self.users.all()
