"""Ürün kataloğu ve ürün oluşturma unit testleri."""

import pytest

from stock_insight.catalog import InventoryCatalog
from stock_insight.models.inventory import ABCClass, Product, TransactionType, new_product


def _product(product_id: str, sku: str, **fields) -> Product:
    return Product(product_id=product_id, sku=sku, name=f"Product {sku}", **fields)


class TestNewProduct:
    """Ürün ekleme formu varsayılanları."""

    def test_defaults_applied(self):
        product = new_product(name="Desk Lamp", sku="LAMP-01")
        assert product.category == "General"
        assert product.supplier == "Unknown"
        assert product.location == "Unassigned"
        assert product.holding_cost_percent == 0.15
        assert product.stock_level == 0
        assert product.transactions == []
        assert product.product_id.startswith("p-")

    def test_zero_holding_percent_falls_back_to_default(self):
        product = new_product(name="Desk Lamp", sku="LAMP-01", holding_cost_percent=0)
        assert product.holding_cost_percent == 0.15

    def test_given_values_kept(self):
        product = new_product(name="Desk Lamp", sku="LAMP-01", stock_level=12, category="Lighting")
        assert product.stock_level == 12
        assert product.category == "Lighting"

    def test_missing_name_or_sku_raises(self):
        with pytest.raises(ValueError):
            new_product(name="", sku="LAMP-01")
        with pytest.raises(ValueError):
            new_product(name="Desk Lamp")


class TestInventoryCatalog:
    def test_add_and_get(self):
        catalog = InventoryCatalog()
        catalog.add_product(_product("p-1", "SKU-1"))
        assert catalog.get_product("p-1").sku == "SKU-1"
        assert catalog.get_product("missing") is None

    def test_newest_first(self):
        catalog = InventoryCatalog()
        catalog.add_product(_product("p-1", "SKU-1"))
        catalog.add_product(_product("p-2", "SKU-2"))
        assert [p.product_id for p in catalog.list_products()] == ["p-2", "p-1"]

    def test_initial_products_keep_order(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1"), _product("p-2", "SKU-2")])
        assert [p.product_id for p in catalog] == ["p-1", "p-2"]
        assert len(catalog) == 2

    def test_duplicate_id_rejected(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1")])
        with pytest.raises(ValueError):
            catalog.add_product(_product("p-1", "SKU-9"))

    def test_duplicate_sku_rejected(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1")])
        with pytest.raises(ValueError):
            catalog.add_product(_product("p-2", "SKU-1"))

    def test_negative_stock_rejected(self):
        catalog = InventoryCatalog()
        with pytest.raises(ValueError):
            catalog.add_product(_product("p-1", "SKU-1", stock_level=-5))

    @pytest.mark.parametrize("field_name", ["stock_level", "unit_cost"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_values_rejected(self, field_name, value):
        catalog = InventoryCatalog()
        with pytest.raises(ValueError, match="sonlu"):
            catalog.add_product(_product("p-1", "SKU-1", **{field_name: value}))
        assert len(catalog) == 0

    def test_get_by_sku_case_insensitive(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1")])
        assert catalog.get_by_sku("sku-1").product_id == "p-1"


class TestTransactions:
    """Stok hareketleri kaydedilir ama stok seviyesine uygulanmaz."""

    def test_record_transaction_appends(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1", stock_level=10)])
        catalog.record_transaction("p-1", TransactionType.IN, 5, "PO-1")
        catalog.record_transaction("p-1", TransactionType.OUT, 3)
        product = catalog.get_product("p-1")
        assert [t.type for t in product.transactions] == [TransactionType.IN, TransactionType.OUT]
        assert product.stock_level == 10

    def test_string_type_accepted(self):
        catalog = InventoryCatalog([_product("p-1", "SKU-1")])
        transaction = catalog.record_transaction("p-1", "ADJUSTMENT", -2)
        assert transaction.type == TransactionType.ADJUSTMENT

    def test_unknown_product_raises(self):
        catalog = InventoryCatalog()
        with pytest.raises(KeyError):
            catalog.record_transaction("missing", TransactionType.IN, 1)


class TestDerivedViews:
    """Türetilmiş değerler her çağrıda yeniden hesaplanır."""

    def test_abc_recomputed_after_change(self):
        big = _product("p-1", "SKU-1", demand_rate=1, unit_cost=90)
        small = _product("p-2", "SKU-2", demand_rate=1, unit_cost=10)
        catalog = InventoryCatalog([big, small])
        assert catalog.abc_classes()["p-1"] == ABCClass.A

        big.unit_cost = 1
        small.unit_cost = 99
        classes = catalog.abc_classes()
        assert classes["p-2"] == ABCClass.A
        assert classes["p-1"] == ABCClass.C

    def test_dashboard_reflects_stock_change(self):
        product = _product("p-1", "SKU-1", stock_level=20, reorder_point=10, safety_stock=5)
        catalog = InventoryCatalog([product])
        assert catalog.dashboard().low_stock_count == 0
        product.stock_level = 4
        assert catalog.dashboard().low_stock_count == 1

    def test_search(self):
        catalog = InventoryCatalog([_product("p-1", "LAMP-1"), _product("p-2", "DESK-1")])
        assert [p.product_id for p in catalog.search("lamp")] == ["p-1"]
