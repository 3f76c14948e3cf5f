import pytest
from catalog import InMemoryCatalog, Product
from identity.port import TokenVerifier
from identity.user.user import User
from payments.gateway import FakeGateway


class StubVerifier(TokenVerifier):
    """Accepts exactly one token and maps it to a fixed user."""

    def __init__(self, token="token-falso", user=None):
        self.token = token
        self.user = user or User.register(name="Anderson", email="teste@teste.com", password="1234")
        self.seen = []

    def verify_token(self, token):
        self.seen.append(token)
        return self.user if token == self.token else None


@pytest.fixture()
def verifier():
    return StubVerifier()


@pytest.fixture()
def catalog():
    return InMemoryCatalog(
        [
            Product(id=1, name="Produto A", price=100.0),
            Product(id=2, name="Produto B", price=200.0),
            Product(id=3, name="Produto C", price=19.99),
        ]
    )


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def checkout_service(verifier, catalog, gateway):
    from ordering.checkout.service import CheckoutService

    return CheckoutService(auth=verifier, catalog=catalog, gateway=gateway)
