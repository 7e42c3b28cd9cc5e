from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """Example entity used across the storage tests."""
    id: Optional[int] = None
    sku: Optional[str] = None
    description: Optional[str] = None


def make_products() -> tuple[Product, Product]:
    return Product(1, 'foo', 'Apple'), Product(2, 'bar', 'Pear')
