"""Catalog backed by a fixed in-memory product list."""

from collections.abc import Iterable

from catalog.port import Product, ProductCatalog


class InMemoryCatalog(ProductCatalog):
    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[int, Product] = {p.id: p for p in products}

    @classmethod
    def from_config(cls, entries: Iterable[dict]) -> "InMemoryCatalog":
        """Build a catalog from ``{id, name, price}`` mappings."""
        return cls(
            Product(id=int(entry["id"]), name=str(entry["name"]), price=float(entry["price"]))
            for entry in entries
        )

    def find(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def all(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.id)
