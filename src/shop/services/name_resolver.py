# src/shop/services/name_resolver.py
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from shop.domain.models import Product, ProductStorageData

DEFAULT_SEPARATOR = " - "


class NameResolver:
    """
    Erzeugt Anzeigenamen für Suchergebnisse.
    Teilen sich mehrere Produkte im Ergebnis denselben Namen, wird der
    Hersteller vorangestellt ("<producer> - <name>"), sonst nur "<name>".
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._separator = separator

    def generate_names(self, products: Iterable[Product]) -> set[str]:
        """
        Resolves display names for an already filtered set of products.

        Duplicate counting only sees `products`, so the same product may get
        its short name in one query and its long name in another.
        """
        scope = list(products)
        name_counts = Counter(p.name for p in scope)

        names: set[str] = set()
        for product in scope:
            storage_data = ProductStorageData(product=product, available=name_counts[product.name])
            names.add(self.name_for(storage_data))
        return names

    def name_for(self, storage_data: ProductStorageData) -> str:
        if storage_data.available > 1:
            return self.long_name(storage_data.product)
        return self.short_name(storage_data.product)

    def short_name(self, product: Product) -> str:
        return product.name

    def long_name(self, product: Product) -> str:
        return f"{product.producer}{self._separator}{product.name}"
