# src/shop/domain/ports.py
from abc import ABC, abstractmethod

from shop.domain.models import Product


class ShopPort(ABC):
    """
    Abstrakte Schnittstelle des Shops.
    Fehlschläge werden ausschließlich über Rückgabewerte signalisiert,
    keine Operation wirft eine Exception.
    """

    @abstractmethod
    def add_new_product(self, product: Product) -> bool:
        """
        Adds a new product to the shop.

        Returns:
            False if a product with the same id already exists (the stored
            entry is left unchanged), True otherwise.
        """
        ...

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        """
        Deletes the product with the given id.

        Returns:
            True if a product with that id existed, False otherwise.
        """
        ...

    @abstractmethod
    def list_products_by_name(self, search_string: str) -> set[str]:
        """
        Returns at most `result_limit` (default 10) product names containing
        `search_string`.

        If several matching products share the same name, each of them is
        rendered as "<producer> - <name>", otherwise as "<name>".
        """
        ...

    @abstractmethod
    def list_products_by_producer(self, search_string: str) -> list[str]:
        """
        Returns at most `result_limit` (default 10) names of products whose
        producer contains `search_string`, ordered by product id.
        """
        ...
