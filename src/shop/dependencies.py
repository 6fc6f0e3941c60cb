# src/shop/dependencies.py
from shop.core.config import Settings, get_settings
from shop.repositories.product_repository import ProductRepository
from shop.services.name_resolver import NameResolver
from shop.services.shop_service import ShopService


def get_name_resolver(settings: Settings) -> NameResolver:
    return NameResolver(separator=settings.long_name_separator)


def create_shop(settings: Settings | None = None) -> ShopService:
    """Builds a new, empty shop. Each call returns an independent instance."""
    settings = settings or get_settings()
    return ShopService(
        repository=ProductRepository(),
        name_resolver=get_name_resolver(settings),
        result_limit=settings.result_limit,
    )
