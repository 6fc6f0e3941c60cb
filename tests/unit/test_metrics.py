from prometheus_client import REGISTRY

from shop.core.config import Settings
from shop.dependencies import create_shop
from shop.domain.models import Product
from shop.services.shop_service import ShopService


def get_count(operation: str, result: str) -> float:
    return (
        REGISTRY.get_sample_value(
            "shop_operations_total", {"operation": operation, "result": result}
        )
        or 0.0
    )


def get_products() -> float:
    return REGISTRY.get_sample_value("shop_products") or 0.0


def test_add_and_delete_metrics(shop: ShopService) -> None:
    initial_ok = get_count("add", "ok")
    initial_rejected = get_count("add", "rejected")
    initial_products = get_products()

    product = Product(id="1", name="Milk", producer="Farm")
    shop.add_new_product(product)
    shop.add_new_product(product)

    assert get_count("add", "ok") == initial_ok + 1
    assert get_count("add", "rejected") == initial_rejected + 1
    assert get_products() == initial_products + 1

    initial_deleted = get_count("delete", "ok")
    shop.delete_product("1")
    shop.delete_product("1")
    assert get_count("delete", "ok") == initial_deleted + 1
    assert get_products() == initial_products


def test_product_gauge_counts_all_shops() -> None:
    initial_products = get_products()
    first = create_shop(Settings())
    second = create_shop(Settings())

    for i in range(3):
        first.add_new_product(Product(id=str(i), name=f"n{i}", producer="p"))
    second.add_new_product(Product(id="0", name="n0", producer="p"))

    assert len(first) == 3
    assert len(second) == 1
    assert get_products() == initial_products + 4

    second.delete_product("0")
    assert get_products() == initial_products + 3


def test_search_metrics(shop: ShopService) -> None:
    initial_name = get_count("list_by_name", "ok")
    initial_producer = get_count("list_by_producer", "ok")

    shop.list_products_by_name("x")
    shop.list_products_by_producer("x")

    assert get_count("list_by_name", "ok") == initial_name + 1
    assert get_count("list_by_producer", "ok") == initial_producer + 1
