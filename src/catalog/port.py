"""Product catalog port (abstract interface).

Checkout only needs to know whether a product id exists and what it costs.
Adapters decide where products come from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A sellable product and its unit price."""

    id: int
    name: str
    price: float


class ProductCatalog(ABC):
    """Abstract product lookup."""

    @abstractmethod
    def find(self, product_id: int) -> Product | None:
        """Return the product with ``product_id``, or None if it does not exist."""
        ...

    @abstractmethod
    def all(self) -> list[Product]:
        """Return every product in the catalog."""
        ...
