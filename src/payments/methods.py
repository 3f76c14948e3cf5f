"""Payment method branching.

Any payment method string is accepted. Card methods are the only ones whose
card data is forwarded to the gateway, and only as the last four digits.
"""

from enum import Enum


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BOLETO = "boleto"
    PIX = "pix"


CARD_METHODS = frozenset({PaymentMethod.CREDIT_CARD.value, PaymentMethod.DEBIT_CARD.value})


def is_card_payment(payment_method: str) -> bool:
    return payment_method in CARD_METHODS


def card_last4(card_data: dict | None) -> str | None:
    """Last four digits of the card number, or None when there is no usable number."""
    if not card_data:
        return None
    digits = "".join(ch for ch in str(card_data.get("number") or "") if ch.isdigit())
    if len(digits) < 4:
        return None
    return digits[-4:]
