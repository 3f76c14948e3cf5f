"""Checkout Service.

Flow:
    1. Verify the bearer token → InvalidToken
    2. Reject negative quantities or freight → InvalidCheckout;
       resolve every item in the catalog, first miss → ProductNotFound
    3. Price: sum(unit price × quantity) + freight
    4. Hand the order to the payment gateway (card methods forward last4)
    5. Return the CheckoutResult

Nothing is handed to the gateway unless every item resolves.
"""

from collections.abc import Iterable
from uuid import uuid4

from catalog.port import ProductCatalog
from identity.port import TokenVerifier
from payments.gateway.port import PaymentGateway
from payments.methods import card_last4, is_card_payment
from shared.errors import InvalidCheckout, InvalidToken, ProductNotFound
from shared.utils.logging import get_logger

from ordering.checkout.models import CheckoutResult, Item

logger = get_logger(__name__)


class CheckoutService:
    def __init__(self, auth: TokenVerifier, catalog: ProductCatalog, gateway: PaymentGateway) -> None:
        self.auth = auth
        self.catalog = catalog
        self.gateway = gateway

    def price(self, items: Iterable[Item], freight: float) -> float:
        """Total for ``items`` plus ``freight``.

        Raises InvalidCheckout for a negative quantity or freight (NaN included)
        and ProductNotFound on the first unknown id.
        """
        if not freight >= 0:
            raise InvalidCheckout()
        subtotal = 0.0
        for item in items:
            if item.quantity < 0:
                raise InvalidCheckout()
            product = self.catalog.find(item.product_id)
            if product is None:
                raise ProductNotFound(product_id=item.product_id)
            subtotal += product.price * item.quantity
        return round(subtotal + freight, 2)

    def checkout(
        self,
        token: str | None,
        items: list[Item],
        freight: float,
        payment_method: str,
        card_data: dict | None = None,
    ) -> CheckoutResult:
        user = self.auth.verify_token(token)
        if user is None:
            raise InvalidToken()

        try:
            total = self.price(items, freight)
        except ProductNotFound as exc:
            logger.info("Checkout rejected: unknown product", user_id=user.id, product_id=exc.product_id)
            raise
        except InvalidCheckout:
            logger.info("Checkout rejected: negative quantity or freight", user_id=user.id, freight=freight)
            raise

        reference = f"chk-{uuid4().hex[:12]}"
        last4 = card_last4(card_data) if is_card_payment(payment_method) else None
        charge = self.gateway.authorize(
            amount=total,
            payment_method=payment_method,
            last4=last4,
            reference=reference,
        )
        if not charge.success:
            logger.warning(
                "Payment gateway declined authorization",
                reference=reference,
                failure_reason=charge.failure_reason,
            )

        logger.info(
            "Checkout completed",
            user_id=user.id,
            reference=reference,
            item_count=len(items),
            payment_method=payment_method,
            total=total,
            gateway_status=charge.gateway_status,
        )

        return CheckoutResult(
            user_id=user.id,
            items=list(items),
            freight=freight,
            payment_method=payment_method,
            total=total,
        )
