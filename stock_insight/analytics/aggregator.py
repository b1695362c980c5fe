"""Ürün koleksiyonu üzerinden dashboard metrikleri."""

from __future__ import annotations

from typing import Iterable, Sequence

from stock_insight.analytics.inventory_math import classify_stock_status, turnover_rate
from stock_insight.models.inventory import CategoryValue, DashboardMetrics, Product, StockStatus

# "LOW" filtresi tükenmiş ürünleri de kapsar
_LOW_FILTER_STATUSES = {StockStatus.LOW, StockStatus.OUT_OF_STOCK}

STOCK_HEALTH_LABELS: dict[StockStatus, str] = {
    StockStatus.OK: "Healthy",
    StockStatus.LOW: "Low",
    StockStatus.OUT_OF_STOCK: "Critical",
    StockStatus.OVERSTOCK: "Overstock",
}


def inventory_value(product: Product) -> float:
    return product.stock_level * product.unit_cost


def total_inventory_value(products: Iterable[Product]) -> float:
    return sum(inventory_value(p) for p in products)


def status_counts(products: Iterable[Product]) -> dict[StockStatus, int]:
    """Her stok durumu için ürün sayısı. Dört anahtar da her zaman bulunur."""
    counts = {status: 0 for status in StockStatus}
    for product in products:
        counts[classify_stock_status(product)] += 1
    return counts


def average_turnover(products: Sequence[Product]) -> float:
    if not products:
        return 0.0
    return sum(turnover_rate(p) for p in products) / len(products)


def dashboard_metrics(products: Sequence[Product]) -> DashboardMetrics:
    counts = status_counts(products)
    return DashboardMetrics(
        total_inventory_value=total_inventory_value(products),
        total_items=len(products),
        low_stock_count=counts[StockStatus.LOW],
        out_of_stock_count=counts[StockStatus.OUT_OF_STOCK],
        average_turnover_rate=average_turnover(products),
    )


def category_values(products: Iterable[Product]) -> list[CategoryValue]:
    """Kategori bazında stok değeri; kategoriler ilk görülme sırasıyla döner."""
    groups: dict[str, CategoryValue] = {}
    for product in products:
        entry = groups.setdefault(product.category, CategoryValue(name=product.category, value=0.0))
        entry.value += inventory_value(product)
    return list(groups.values())


def stock_health(products: Iterable[Product]) -> list[tuple[str, int]]:
    counts = status_counts(products)
    return [(label, counts[status]) for status, label in STOCK_HEALTH_LABELS.items()]


def filter_products(
    products: Iterable[Product],
    search: str = "",
    status: str = "ALL",
) -> list[Product]:
    """Ad/SKU araması ve durum filtresi uygular.

    status: "ALL", bir StockStatus değeri ya da "LOW" (LOW + OUT_OF_STOCK).
    """
    if status == "ALL":
        allowed = None
    elif status == StockStatus.LOW.value:
        allowed = _LOW_FILTER_STATUSES
    else:
        try:
            allowed = {StockStatus(status)}
        except ValueError:
            raise ValueError(f"Bilinmeyen stok durumu filtresi: {status}") from None

    term = search.strip().lower()
    result = []
    for product in products:
        if term and term not in product.name.lower() and term not in product.sku.lower():
            continue
        if allowed is not None and classify_stock_status(product) not in allowed:
            continue
        result.append(product)
    return result
