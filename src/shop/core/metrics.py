from prometheus_client import Counter, Gauge

SHOP_OPERATIONS = Counter(
    "shop_operations_total",
    "Total number of shop operations",
    ["operation", "result"],
)

SHOP_PRODUCTS = Gauge("shop_products", "Number of products held by all shops in this process")
