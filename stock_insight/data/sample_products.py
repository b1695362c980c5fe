"""Örnek katalog verisi - chat ve MCP server başlangıç verisi olarak kullanılır.

Senaryolar: tükenmiş ürün, yeniden sipariş noktası altı, fazla stok,
yüksek değerli A sınıfı ürünler.
"""

from __future__ import annotations

from stock_insight.models.inventory import Product, Transaction, TransactionType


def sample_products() -> list[Product]:
    return [
        Product(
            product_id="p-1001",
            sku="ELEC-LAP-15",
            name="Laptop 15.6 inch",
            category="Electronics",
            description="Business laptop, 16GB RAM",
            stock_level=42,
            safety_stock=10,
            reorder_point=25,
            unit_cost=620.0,
            unit_price=899.0,
            lead_time_days=14,
            demand_rate=3.5,
            holding_cost_percent=0.2,
            ordering_cost=150.0,
            supplier="TechSource Ltd",
            location="A-01-03",
            last_count_date="2024-05-02",
            transactions=[
                Transaction("t-1", "2024-04-20", TransactionType.IN, 50, "PO-7781"),
                Transaction("t-2", "2024-04-28", TransactionType.OUT, 8, "Web orders"),
            ],
        ),
        Product(
            product_id="p-1002",
            sku="ELEC-HP-BT",
            name="Wireless Headphones",
            category="Electronics",
            description="Noise cancelling, over-ear",
            stock_level=0,
            safety_stock=15,
            reorder_point=30,
            unit_cost=45.0,
            unit_price=99.0,
            lead_time_days=10,
            demand_rate=6.0,
            holding_cost_percent=0.18,
            ordering_cost=60.0,
            supplier="SoundWave Inc",
            location="A-02-01",
            last_count_date="2024-05-01",
        ),
        Product(
            product_id="p-1003",
            sku="OFF-PAP-A4",
            name="A4 Copy Paper (box)",
            category="Office Supplies",
            description="5 reams, 80gsm",
            stock_level=900,
            safety_stock=40,
            reorder_point=80,
            unit_cost=18.0,
            unit_price=29.0,
            lead_time_days=5,
            demand_rate=12.0,
            holding_cost_percent=0.1,
            ordering_cost=25.0,
            supplier="PaperCo",
            location="C-10-02",
            last_count_date="2024-04-15",
        ),
        Product(
            product_id="p-1004",
            sku="FURN-CHR-ERG",
            name="Ergonomic Office Chair",
            category="Furniture",
            description="Mesh back, adjustable lumbar",
            stock_level=18,
            safety_stock=5,
            reorder_point=20,
            unit_cost=140.0,
            unit_price=259.0,
            lead_time_days=21,
            demand_rate=1.2,
            holding_cost_percent=0.25,
            ordering_cost=90.0,
            supplier="SitWell Furniture",
            location="D-01-01",
            last_count_date="2024-04-30",
        ),
        Product(
            product_id="p-1005",
            sku="OFF-PEN-BLU",
            name="Ballpoint Pens (12 pack)",
            category="Office Supplies",
            description="Blue ink, medium point",
            stock_level=160,
            safety_stock=30,
            reorder_point=60,
            unit_cost=3.5,
            unit_price=7.99,
            lead_time_days=4,
            demand_rate=5.0,
            holding_cost_percent=0.12,
            ordering_cost=15.0,
            supplier="PaperCo",
            location="C-11-04",
            last_count_date="2024-05-03",
        ),
        Product(
            product_id="p-1006",
            sku="ELEC-MON-27",
            name="27 inch 4K Monitor",
            category="Electronics",
            description="IPS panel, USB-C",
            stock_level=35,
            safety_stock=8,
            reorder_point=15,
            unit_cost=280.0,
            unit_price=429.0,
            lead_time_days=12,
            demand_rate=2.0,
            holding_cost_percent=0.2,
            ordering_cost=110.0,
            supplier="TechSource Ltd",
            location="A-01-07",
            last_count_date="2024-05-02",
        ),
    ]
