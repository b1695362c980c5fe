"""Stok yönetimi veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class TransactionType(str, Enum):
    IN = "IN"
    OUT = "OUT"
    ADJUSTMENT = "ADJUSTMENT"


class StockStatus(str, Enum):
    OK = "OK"
    LOW = "LOW"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    OVERSTOCK = "OVERSTOCK"


class ABCClass(str, Enum):
    A = "A"  # yüksek değer, sıkı kontrol
    B = "B"
    C = "C"  # düşük değer, gevşek kontrol


class SummaryStatus(str, Enum):
    CRITICAL_LOW = "CRITICAL_LOW"
    OK = "OK"


@dataclass(frozen=True)
class Transaction:
    transaction_id: str
    date: str
    type: TransactionType
    quantity: int
    note: str = ""


@dataclass
class Product:
    product_id: str
    sku: str
    name: str
    category: str = "General"
    description: str = ""
    stock_level: int = 0
    safety_stock: int = 0
    reorder_point: int = 0
    unit_cost: float = 0.0
    unit_price: float = 0.0
    lead_time_days: int = 0
    demand_rate: float = 0.0  # günlük ortalama talep
    holding_cost_percent: float = 0.15  # yıllık, birim maliyetin oranı
    ordering_cost: float = 0.0  # sipariş başına sabit maliyet
    supplier: str = "Unknown"
    location: str = "Unassigned"
    last_count_date: str = field(default_factory=lambda: date.today().isoformat())
    transactions: list[Transaction] = field(default_factory=list)


@dataclass
class DashboardMetrics:
    total_inventory_value: float
    total_items: int
    low_stock_count: int
    out_of_stock_count: int
    average_turnover_rate: float


@dataclass
class CategoryValue:
    name: str
    value: float


@dataclass
class ProductSummary:
    sku: str
    name: str
    stock: int
    status: SummaryStatus
    value: float
    turnover_potential: float

    def to_dict(self) -> dict:
        return {
            "sku": self.sku,
            "name": self.name,
            "stock": self.stock,
            "status": self.status.value,
            "value": self.value,
            "turnoverPotential": self.turnover_potential,
        }


@dataclass
class AgentDecision:
    decision_id: str
    agent_name: str
    decision_type: str
    input_data: dict
    output_data: dict
    reasoning: str
    timestamp: str = field(default_factory=lambda: datetime.utcnow().isoformat())


# Form alanı -> varsayılan değer. Boş/sıfır gelen değerler bunlarla doldurulur.
_FORM_DEFAULTS: dict[str, object] = {
    "category": "General",
    "description": "",
    "stock_level": 0,
    "safety_stock": 0,
    "reorder_point": 0,
    "unit_cost": 0.0,
    "unit_price": 0.0,
    "lead_time_days": 0,
    "demand_rate": 0.0,
    "holding_cost_percent": 0.15,
    "ordering_cost": 0.0,
    "supplier": "Unknown",
    "location": "Unassigned",
}


def new_product(**form: object) -> Product:
    """Ürün ekleme formundan gelen kısmi veriden yeni bir Product oluşturur.

    `name` ve `sku` zorunludur. Diğer alanlar boş ya da sıfır ise
    varsayılanlarla doldurulur; ID verilmemişse `p-<epoch ms>` üretilir.
    """
    name = str(form.get("name") or "").strip()
    sku = str(form.get("sku") or "").strip()
    if not name or not sku:
        raise ValueError("Ürün adı ve SKU zorunludur")

    values = {key: form.get(key) or default for key, default in _FORM_DEFAULTS.items()}
    product_id = form.get("product_id") or f"p-{int(datetime.utcnow().timestamp() * 1000)}"

    return Product(
        product_id=str(product_id),
        sku=sku,
        name=name,
        last_count_date=str(form.get("last_count_date") or date.today().isoformat()),
        transactions=[],
        **values,
    )
