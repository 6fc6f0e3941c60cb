# tests/conftest.py
import pytest

from shop.core.config import Settings
from shop.dependencies import create_shop
from shop.domain.models import Product
from shop.services.shop_service import ShopService


@pytest.fixture
def test_settings() -> Settings:
    return Settings(result_limit=10, long_name_separator=" - ")


@pytest.fixture
def shop(test_settings: Settings) -> ShopService:
    return create_shop(test_settings)


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        Product(id="3", name="Some Product3", producer="Some Producer2"),
        Product(id="4", name="Some Product1", producer="Some Producer3"),
        Product(id="2", name="Some Product2", producer="Some Producer2"),
        Product(id="1", name="Some Product1", producer="Some Producer1"),
    ]
