"""Dashboard metrikleri unit testleri."""

import pytest

from stock_insight.analytics.aggregator import (
    average_turnover,
    category_values,
    dashboard_metrics,
    filter_products,
    status_counts,
    stock_health,
    total_inventory_value,
)
from stock_insight.models.inventory import Product, StockStatus


def _scenario() -> list[Product]:
    return [
        Product(product_id="P1", sku="SKU-1", name="Widget", category="Tools",
                stock_level=0, unit_cost=10, demand_rate=1),
        Product(product_id="P2", sku="SKU-2", name="Gadget", category="Electronics",
                stock_level=5, reorder_point=10, safety_stock=2, unit_cost=20, demand_rate=2),
        Product(product_id="P3", sku="SKU-3", name="Gizmo", category="Tools",
                stock_level=500, reorder_point=10, safety_stock=5, unit_cost=1, demand_rate=0),
    ]


class TestStatusCounts:
    def test_three_product_scenario(self):
        counts = status_counts(_scenario())
        assert counts == {
            StockStatus.OUT_OF_STOCK: 1,
            StockStatus.LOW: 1,
            StockStatus.OVERSTOCK: 1,
            StockStatus.OK: 0,
        }

    def test_empty_has_all_keys(self):
        assert status_counts([]) == {status: 0 for status in StockStatus}

    def test_stock_health_labels(self):
        assert stock_health(_scenario()) == [
            ("Healthy", 0),
            ("Low", 1),
            ("Critical", 1),
            ("Overstock", 1),
        ]


class TestDashboardMetrics:
    def test_total_inventory_value(self):
        # 0*10 + 5*20 + 500*1
        assert total_inventory_value(_scenario()) == 600

    def test_average_turnover(self):
        # P1: 365/1, P2: 730/5, P3: 0/500
        expected = (365 + 146 + 0) / 3
        assert average_turnover(_scenario()) == pytest.approx(expected)

    def test_average_turnover_empty(self):
        assert average_turnover([]) == 0.0

    def test_dashboard_metrics(self):
        metrics = dashboard_metrics(_scenario())
        assert metrics.total_items == 3
        assert metrics.low_stock_count == 1
        assert metrics.out_of_stock_count == 1
        assert metrics.total_inventory_value == 600

    def test_category_values_first_seen_order(self):
        rows = category_values(_scenario())
        assert [r.name for r in rows] == ["Tools", "Electronics"]
        assert rows[0].value == 500
        assert rows[1].value == 100


class TestFilterProducts:
    def test_all(self):
        assert len(filter_products(_scenario())) == 3

    def test_search_by_name_case_insensitive(self):
        result = filter_products(_scenario(), search="gadget")
        assert [p.product_id for p in result] == ["P2"]

    def test_search_by_sku(self):
        result = filter_products(_scenario(), search="sku-3")
        assert [p.product_id for p in result] == ["P3"]

    def test_low_filter_includes_out_of_stock(self):
        result = filter_products(_scenario(), status="LOW")
        assert {p.product_id for p in result} == {"P1", "P2"}

    def test_exact_status_filter(self):
        result = filter_products(_scenario(), status="OVERSTOCK")
        assert [p.product_id for p in result] == ["P3"]

    def test_search_and_status_combined(self):
        result = filter_products(_scenario(), search="gad", status="LOW")
        assert [p.product_id for p in result] == ["P2"]

    def test_unknown_status_raises(self):
        with pytest.raises(ValueError):
            filter_products(_scenario(), status="BROKEN")
