"""Payment gateway port (abstract interface).

Defines the contract every payment gateway adapter implements. Checkout hands
each confirmed order to the gateway; swapping FakeGateway for a real adapter
does not touch ordering code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ChargeResult:
    """Result of a payment authorization attempt."""

    success: bool
    gateway_transaction_id: str | None = None
    gateway_status: str | None = None
    failure_reason: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def authorize(
        self,
        amount: float,
        payment_method: str,
        last4: str | None,
        reference: str,
    ) -> ChargeResult:
        """Authorize ``amount`` with the given payment method."""
        ...
