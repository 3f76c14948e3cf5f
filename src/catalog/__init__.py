"""Product catalog: lookup of product existence and price."""

from catalog.memory_adapter import InMemoryCatalog
from catalog.port import Product, ProductCatalog

__all__ = ["InMemoryCatalog", "Product", "ProductCatalog"]
