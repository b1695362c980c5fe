"""Bellek içi ürün kataloğu.

- Ürünleri oturum boyunca bellekte tutar (kalıcılık yok)
- Veri girişi validasyonu (negatif stok/maliyet reddi) burada yapılır
- Stok hareketleri yalnızca kayıt altına alınır, stock_level'a uygulanmaz
- Türetilmiş değerler (durum, ABC, metrikler) her çağrıda yeniden hesaplanır
"""

from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime
from typing import Iterator, Optional

from stock_insight.analytics.aggregator import dashboard_metrics, filter_products
from stock_insight.analytics.inventory_math import classify_abc
from stock_insight.models.inventory import (
    ABCClass,
    DashboardMetrics,
    Product,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

_NON_NEGATIVE_FIELDS = (
    "stock_level",
    "safety_stock",
    "reorder_point",
    "unit_cost",
    "unit_price",
    "ordering_cost",
    "demand_rate",
)


class InventoryCatalog:
    """Ürün koleksiyonunu yöneten bellek içi katalog."""

    def __init__(self, products: Optional[list[Product]] = None) -> None:
        # En yeni ürün başta
        self._products: list[Product] = []
        for product in reversed(products or []):
            self.add_product(product)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    # --- Ürün ekleme ve validasyon ---

    def validate_product(self, product: Product) -> list[str]:
        """Ürünün kataloğa eklenebilirliğini kontrol eder, hata listesini döndürür."""
        errors = []
        for name in _NON_NEGATIVE_FIELDS:
            value = getattr(product, name)
            if not math.isfinite(value):
                errors.append(f"{name} sonlu bir sayı olmalı: {value}")
            elif value < 0:
                errors.append(f"{name} negatif olamaz: {value}")

        for existing in self._products:
            if existing.product_id == product.product_id:
                errors.append(f"Ürün ID zaten kayıtlı: {product.product_id}")
            if existing.sku == product.sku:
                errors.append(f"SKU zaten kayıtlı: {product.sku}")
        return errors

    def add_product(self, product: Product) -> Product:
        errors = self.validate_product(product)
        if errors:
            raise ValueError("; ".join(errors))
        self._products.insert(0, product)
        logger.info("Ürün eklendi: %s (%s)", product.sku, product.product_id)
        return product

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None

    def get_by_sku(self, sku: str) -> Optional[Product]:
        sku = sku.strip().lower()
        for product in self._products:
            if product.sku.lower() == sku:
                return product
        return None

    def list_products(self) -> list[Product]:
        return list(self._products)

    # --- Stok hareketleri (append-only) ---

    def record_transaction(
        self,
        product_id: str,
        transaction_type: TransactionType,
        quantity: int,
        note: str = "",
    ) -> Transaction:
        """Ürüne stok hareketi ekler. stock_level değiştirilmez."""
        product = self.get_product(product_id)
        if product is None:
            raise KeyError(f"Ürün bulunamadı: {product_id}")

        transaction = Transaction(
            transaction_id=str(uuid.uuid4()),
            date=datetime.utcnow().isoformat(),
            type=TransactionType(transaction_type),
            quantity=quantity,
            note=note,
        )
        product.transactions.append(transaction)
        logger.debug("Hareket kaydedildi: %s %s %d", product.sku, transaction.type.value, quantity)
        return transaction

    # --- Türetilmiş görünümler ---

    def abc_classes(self) -> dict[str, ABCClass]:
        return classify_abc(self._products)

    def dashboard(self) -> DashboardMetrics:
        return dashboard_metrics(self._products)

    def search(self, term: str = "", status: str = "ALL") -> list[Product]:
        return filter_products(self._products, search=term, status=status)
