"""In-process fake payment gateway for development and testing.

Simulates a gateway without any external calls. Every authorization succeeds
and is recorded in ``calls`` so tests can assert on what checkout sent.
"""

from uuid import uuid4

from payments.gateway.port import ChargeResult, PaymentGateway


class FakeGateway(PaymentGateway):
    """Recording fake payment gateway."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def authorize(
        self,
        amount: float,
        payment_method: str,
        last4: str | None,
        reference: str,
    ) -> ChargeResult:
        call = {
            "method": "authorize",
            "amount": amount,
            "payment_method": payment_method,
            "last4": last4,
            "reference": reference,
        }
        self.calls.append(call)

        return ChargeResult(
            success=True,
            gateway_transaction_id=f"fake_txn_{uuid4().hex[:12]}",
            gateway_status="authorized",
        )

    def reset(self) -> None:
        self.calls.clear()
