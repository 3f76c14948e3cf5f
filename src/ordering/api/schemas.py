"""Pydantic request/response schemas for the Ordering API.

Wire names are camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ordering.checkout.models import CheckoutResult, Item


class ItemSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId")
    quantity: int = Field(..., ge=0)

    def to_domain(self) -> Item:
        return Item(product_id=self.product_id, quantity=self.quantity)


class CardDataSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    number: str | None = None
    name: str | None = None
    expiry: str | None = None
    cvv: str | None = None


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "items": [{"productId": 1, "quantity": 2}],
                    "freight": 10,
                    "paymentMethod": "credit_card",
                    "cardData": {
                        "number": "4111111111111111",
                        "name": "Anderson",
                        "expiry": "12/30",
                        "cvv": "123",
                    },
                }
            ]
        },
    )

    items: list[ItemSchema]
    freight: float = Field(0.0, ge=0)
    payment_method: str = Field(..., alias="paymentMethod")
    card_data: CardDataSchema | None = Field(None, alias="cardData")


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., serialization_alias="userId")
    valor_final: float = Field(..., serialization_alias="valorFinal")
    payment_method: str = Field(..., serialization_alias="paymentMethod")
    freight: float
    items: list[ItemSchema]

    @classmethod
    def from_domain(cls, result: CheckoutResult) -> CheckoutResponse:
        return cls(
            user_id=result.user_id,
            valor_final=result.total,
            payment_method=result.payment_method,
            freight=result.freight,
            items=[ItemSchema(product_id=i.product_id, quantity=i.quantity) for i in result.items],
        )
