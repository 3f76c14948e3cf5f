"""Checkout value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """One checkout line: a product id and the quantity requested."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class CheckoutResult:
    """Summary of a completed checkout. Built per call, never stored."""

    user_id: str
    items: list[Item] = field(default_factory=list)
    freight: float = 0.0
    payment_method: str = ""
    total: float = 0.0
