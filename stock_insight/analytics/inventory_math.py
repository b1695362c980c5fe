"""Envanter hesaplamaları - EOQ, stok durumu ve ABC sınıflandırması.

Buradaki tüm fonksiyonlar saftır: girdiyi değiştirmez, durum saklamaz.
Stok durumu ve ABC sınıfı Product üzerinde alan olarak tutulmaz, her
çağrıda güncel alan değerlerinden yeniden hesaplanır.
"""

from __future__ import annotations

import math
from typing import Iterable

from stock_insight.models.inventory import ABCClass, Product, StockStatus

DAYS_PER_YEAR = 365

# Stok durumu politikası: reorder_point * 3 + safety_stock üstü fazla stoktur
OVERSTOCK_MULTIPLIER = 3

# ABC eşikleri (kümülatif değer oranı)
A_CLASS_THRESHOLD = 0.80
B_CLASS_THRESHOLD = 0.95

# Devir hızı hesabında stok paydası en az 1 alınır
MIN_TURNOVER_DIVISOR = 1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# --- EOQ ---

def compute_eoq(
    demand_rate: float,
    ordering_cost: float,
    holding_cost_percent: float,
    unit_cost: float,
) -> int:
    """Ekonomik sipariş miktarını hesaplar.

    EOQ = sqrt(2 * D * S / H), D = yıllık talep, S = sipariş maliyeti,
    H = birim başına yıllık elde tutma maliyeti.

    H == 0 ise formül tanımsızdır ve 0 döner. Negatif girdiler hata
    vermez; kök mutlak değer üzerinden alınır ve işaret korunur.
    Taşan ya da tanımsız (inf/nan) ara sonuçlarda da 0 döner.
    """
    annual_demand = demand_rate * DAYS_PER_YEAR
    holding_cost = holding_cost_percent * unit_cost
    if holding_cost == 0:
        return 0

    radicand = (2 * annual_demand * ordering_cost) / holding_cost
    root = math.copysign(math.sqrt(abs(radicand)), radicand)
    if not math.isfinite(root):
        return 0
    return _round_half_up(root)


def product_eoq(product: Product) -> int:
    return compute_eoq(
        product.demand_rate,
        product.ordering_cost,
        product.holding_cost_percent,
        product.unit_cost,
    )


# --- Stok durumu ---

def classify_stock_status(product: Product) -> StockStatus:
    """Ürünün stok durumunu döndürür. Kontrol sırası önemlidir, ilk eşleşen kazanır."""
    if product.stock_level == 0:
        return StockStatus.OUT_OF_STOCK
    if product.stock_level <= product.reorder_point:
        return StockStatus.LOW
    if product.stock_level > product.reorder_point * OVERSTOCK_MULTIPLIER + product.safety_stock:
        return StockStatus.OVERSTOCK
    return StockStatus.OK


# --- ABC sınıflandırması ---

def annual_usage_value(product: Product) -> float:
    return product.demand_rate * DAYS_PER_YEAR * product.unit_cost


def classify_abc(products: Iterable[Product]) -> dict[str, ABCClass]:
    """Ürünleri yıllık kullanım değerine göre A/B/C sınıflarına ayırır.

    Sıralama stabildir: eşit değerli ürünler girdi sırasını korur.
    Toplam değer sıfırsa oran tanımsızdır ve tüm ürünler C olur.
    Aksi halde sıralamadaki ilk ürün her zaman A'dır.
    """
    ranked = sorted(
        ((p.product_id, annual_usage_value(p)) for p in products),
        key=lambda item: item[1],
        reverse=True,
    )
    total_value = sum(value for _, value in ranked)

    classification: dict[str, ABCClass] = {}
    if total_value == 0:
        for product_id, _ in ranked:
            classification[product_id] = ABCClass.C
        return classification

    accumulated = 0.0
    for index, (product_id, value) in enumerate(ranked):
        accumulated += value
        percentage = accumulated / total_value
        # En yüksek değerli ürün tek başına eşiği aşsa da A sınıfı boş kalmaz
        if percentage <= A_CLASS_THRESHOLD or index == 0:
            classification[product_id] = ABCClass.A
        elif percentage <= B_CLASS_THRESHOLD:
            classification[product_id] = ABCClass.B
        else:
            classification[product_id] = ABCClass.C

    return classification


# --- Devir hızı ---

def turnover_rate(product: Product) -> float:
    """Yıllık talep / eldeki stok. Stok sıfırsa payda 1 alınır."""
    return product.demand_rate * DAYS_PER_YEAR / max(MIN_TURNOVER_DIVISOR, product.stock_level)


# --- Biçimlendirme ---

def format_currency(amount: float) -> str:
    """USD, iki ondalık, binlik ayraçlı: 1234.5 -> '$1,234.50'."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"
