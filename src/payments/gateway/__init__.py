"""Payment gateway adapters.

- FakeGateway for development and testing (default)
"""

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import ChargeResult, PaymentGateway

__all__ = ["ChargeResult", "FakeGateway", "PaymentGateway"]
