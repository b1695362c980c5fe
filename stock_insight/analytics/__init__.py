from stock_insight.analytics.aggregator import (
    category_values,
    dashboard_metrics,
    filter_products,
    status_counts,
    stock_health,
    total_inventory_value,
)
from stock_insight.analytics.inventory_math import (
    classify_abc,
    classify_stock_status,
    compute_eoq,
    format_currency,
    product_eoq,
    turnover_rate,
)

__all__ = [
    "category_values",
    "classify_abc",
    "classify_stock_status",
    "compute_eoq",
    "dashboard_metrics",
    "filter_products",
    "format_currency",
    "product_eoq",
    "status_counts",
    "stock_health",
    "total_inventory_value",
    "turnover_rate",
]
