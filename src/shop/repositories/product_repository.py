# src/shop/repositories/product_repository.py
from __future__ import annotations

import logging
from collections.abc import Callable

from shop.domain.models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    In-memory product set keyed by product id.

    At most one product per id is stored. Equality of the stored values is
    never consulted, only their ids.
    """

    def __init__(self) -> None:
        # Key: product id, Value: Product
        self._products: dict[str, Product] = {}

    def add(self, product: Product) -> bool:
        if product.id in self._products:
            logger.debug("Product '%s' already stored, discarding new value", product.id)
            return False
        self._products[product.id] = product
        return True

    def remove(self, product: Product) -> Product | None:
        """Removes the entry sharing `product`'s id and returns it, if any."""
        return self._products.pop(product.id, None)

    def find_by_id(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._products.values())

    def filter(self, predicate: Callable[[Product], bool]) -> list[Product]:
        return [p for p in self._products.values() if predicate(p)]

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products
