# src/shop/services/shop_service.py
from __future__ import annotations

import logging
from itertools import islice

from shop.core.metrics import SHOP_OPERATIONS, SHOP_PRODUCTS
from shop.domain.models import Product
from shop.domain.ports import ShopPort
from shop.repositories.product_repository import ProductRepository
from shop.services.name_resolver import NameResolver

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 10


class ShopService(ShopPort):
    """
    In-memory Shop über einem id-basierten ProductRepository.

    Nicht thread-safe: bei gleichzeitigem Zugriff muss der Aufrufer
    den gesamten Shop extern synchronisieren.
    """

    def __init__(
        self,
        repository: ProductRepository,
        name_resolver: NameResolver,
        result_limit: int = DEFAULT_RESULT_LIMIT,
    ) -> None:
        if result_limit < 1:
            raise ValueError("result_limit must be at least 1")
        self._repo = repository
        self._name_resolver = name_resolver
        self._result_limit = result_limit

    def add_new_product(self, product: Product) -> bool:
        added = self._repo.add(product)
        if not added:
            logger.info("Rejected product '%s': id already exists", product.id)
        self._record("add", added)
        if added:
            SHOP_PRODUCTS.inc()
        return added

    def delete_product(self, product_id: str) -> bool:
        removed = self._repo.remove(Product.identity(product_id)) is not None
        if not removed:
            logger.info("Cannot delete product '%s': not found", product_id)
        self._record("delete", removed)
        if removed:
            SHOP_PRODUCTS.dec()
        return removed

    def list_products_by_name(self, search_string: str) -> set[str]:
        filtered = self._repo.filter(lambda p: search_string in p.name)
        names = self._name_resolver.generate_names(filtered)

        # Set order decides which names survive the cut.
        result = set(islice(names, self._result_limit))
        SHOP_OPERATIONS.labels(operation="list_by_name", result="ok").inc()
        logger.debug(
            "Name search '%s' matched %d products, returning %d names",
            search_string,
            len(filtered),
            len(result),
        )
        return result

    def list_products_by_producer(self, search_string: str) -> list[str]:
        filtered = self._repo.filter(lambda p: search_string in p.producer)
        ordered = sorted(filtered, key=lambda p: p.id)

        result = [p.name for p in ordered[: self._result_limit]]
        SHOP_OPERATIONS.labels(operation="list_by_producer", result="ok").inc()
        return result

    def __len__(self) -> int:
        return len(self._repo)

    def _record(self, operation: str, success: bool) -> None:
        SHOP_OPERATIONS.labels(operation=operation, result="ok" if success else "rejected").inc()
