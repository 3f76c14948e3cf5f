"""Domain error taxonomy shared by every bounded context.

Each error carries the fixed, client-facing message together with a stable
``code`` (used by GraphQL ``extensions``) and the HTTP ``status_code`` the REST
adapter answers with. Messages are part of the public contract.
"""


class DomainError(Exception):
    """Base class for expected, client-visible failures."""

    code = "DOMAIN_ERROR"
    status_code = 400
    default_message = "Requisição inválida"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class DuplicateEmail(DomainError):
    """A user with the same email is already registered."""

    code = "DUPLICATE_EMAIL"
    status_code = 400
    default_message = "Email já cadastrado"


class InvalidCredentials(DomainError):
    """Email/password pair does not match a registered user."""

    code = "INVALID_CREDENTIALS"
    status_code = 401
    default_message = "Credenciais inválidas"


class InvalidToken(DomainError):
    """Bearer token is missing, malformed or unknown."""

    code = "INVALID_TOKEN"
    status_code = 401
    default_message = "Token inválido"


class ProductNotFound(DomainError):
    """A checkout item references a product id absent from the catalog."""

    code = "PRODUCT_NOT_FOUND"
    status_code = 400
    default_message = "Produto não encontrado"

    def __init__(self, product_id: int | None = None, message: str | None = None) -> None:
        self.product_id = product_id
        super().__init__(message)


class InvalidCheckout(DomainError):
    """A checkout line has a negative quantity or the freight is negative."""

    code = "INVALID_CHECKOUT"
    status_code = 400
    default_message = "Quantidade ou frete inválido"
