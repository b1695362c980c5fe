"""
Inventory Analytics MCP Server

Provides tools for stock status, EOQ, ABC classification and dashboard metrics.
Works on an in-memory catalog seeded with sample products.
"""

import asyncio
import json
import logging
from typing import Dict, List, Optional

from mcp.server import Server
from mcp.types import TextContent, Tool

from stock_insight.analytics.aggregator import category_values, stock_health
from stock_insight.analytics.inventory_math import (
    classify_stock_status,
    compute_eoq,
    format_currency as _format_currency,
    product_eoq,
)
from stock_insight.catalog import InventoryCatalog
from stock_insight.data.sample_products import sample_products

logger = logging.getLogger(__name__)

app = Server("inventory-analytics")

catalog = InventoryCatalog(sample_products())


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))]


def _product_row(product) -> Dict:
    return {
        "product_id": product.product_id,
        "sku": product.sku,
        "name": product.name,
        "category": product.category,
        "stock_level": product.stock_level,
        "reorder_point": product.reorder_point,
        "safety_stock": product.safety_stock,
        "status": classify_stock_status(product).value,
    }


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="list_products", description="List all products in the catalog with their stock status",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_stock_status", description="Get stock status (OK, LOW, OUT_OF_STOCK, OVERSTOCK) for a SKU",
             inputSchema={"type": "object", "properties": {"sku": {"type": "string"}}, "required": ["sku"]}),
        Tool(name="calculate_eoq", description="Calculate Economic Order Quantity for a SKU or for explicit parameters",
             inputSchema={"type": "object", "properties": {
                 "sku": {"type": "string", "description": "Optional: use the product's own parameters"},
                 "demand_rate": {"type": "number", "description": "Units per day"},
                 "ordering_cost": {"type": "number"},
                 "holding_cost_percent": {"type": "number", "description": "Fraction of unit cost per year"},
                 "unit_cost": {"type": "number"}
             }}),
        Tool(name="classify_abc", description="ABC classification of all products by annual usage value",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_dashboard_metrics", description="Total inventory value, stock counts and average turnover",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_category_values", description="Inventory value grouped by category",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="search_products", description="Search products by name/SKU and filter by stock status",
             inputSchema={"type": "object", "properties": {
                 "term": {"type": "string", "default": ""},
                 "status": {"type": "string", "default": "ALL",
                            "enum": ["ALL", "OK", "LOW", "OUT_OF_STOCK", "OVERSTOCK"]}
             }}),
        Tool(name="format_currency", description="Format an amount as USD",
             inputSchema={"type": "object", "properties": {"amount": {"type": "number"}}, "required": ["amount"]}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    return _result(dispatch(name, arguments or {}))


def dispatch(name: str, arguments: dict) -> Dict:
    handlers = {
        "list_products": lambda a: list_products(),
        "get_stock_status": lambda a: get_stock_status(a["sku"]),
        "calculate_eoq": lambda a: calculate_eoq(
            a.get("sku"), a.get("demand_rate"), a.get("ordering_cost"),
            a.get("holding_cost_percent"), a.get("unit_cost")),
        "classify_abc": lambda a: classify_abc(),
        "get_dashboard_metrics": lambda a: get_dashboard_metrics(),
        "get_category_values": lambda a: get_category_values(),
        "search_products": lambda a: search_products(a.get("term", ""), a.get("status", "ALL")),
        "format_currency": lambda a: format_currency(a["amount"]),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    try:
        return handler(arguments)
    except (KeyError, TypeError, ValueError, ArithmeticError) as e:
        logger.warning("Tool hatası [%s]: %s", name, e)
        return {"success": False, "error": str(e)}


# --- Implementation ---

def list_products() -> Dict:
    products = [_product_row(p) for p in catalog.list_products()]
    return {"success": True, "count": len(products), "products": products}


def get_stock_status(sku: str) -> Dict:
    product = catalog.get_by_sku(sku)
    if product is None:
        return {"success": False, "error": f"Product not found: {sku}"}
    return {"success": True, "sku": product.sku, "status": classify_stock_status(product).value}


def calculate_eoq(
    sku: Optional[str] = None,
    demand_rate: Optional[float] = None,
    ordering_cost: Optional[float] = None,
    holding_cost_percent: Optional[float] = None,
    unit_cost: Optional[float] = None,
) -> Dict:
    if sku:
        product = catalog.get_by_sku(sku)
        if product is None:
            return {"success": False, "error": f"Product not found: {sku}"}
        return {"success": True, "sku": product.sku, "eoq": product_eoq(product)}

    params = [demand_rate, ordering_cost, holding_cost_percent, unit_cost]
    if any(p is None for p in params):
        return {"success": False, "error": "Either sku or all four EOQ parameters are required"}
    return {"success": True, "eoq": compute_eoq(*(float(p) for p in params))}


def classify_abc() -> Dict:
    classes = catalog.abc_classes()
    by_sku = {}
    for product in catalog.list_products():
        by_sku[product.sku] = classes[product.product_id].value
    summary = {cls: sum(1 for v in by_sku.values() if v == cls) for cls in ("A", "B", "C")}
    return {"success": True, "classes": by_sku, "summary": summary}


def get_dashboard_metrics() -> Dict:
    metrics = catalog.dashboard()
    return {
        "success": True,
        "total_inventory_value": round(metrics.total_inventory_value, 2),
        "total_inventory_value_display": _format_currency(metrics.total_inventory_value),
        "total_items": metrics.total_items,
        "low_stock_count": metrics.low_stock_count,
        "out_of_stock_count": metrics.out_of_stock_count,
        "average_turnover_rate": round(metrics.average_turnover_rate, 1),
        "stock_health": dict(stock_health(catalog.list_products())),
    }


def get_category_values() -> Dict:
    rows = [{"name": c.name, "value": round(c.value, 2)} for c in category_values(catalog.list_products())]
    return {"success": True, "categories": rows}


def search_products(term: str = "", status: str = "ALL") -> Dict:
    products = [_product_row(p) for p in catalog.search(term, status)]
    return {"success": True, "term": term, "status": status, "count": len(products), "products": products}


def format_currency(amount: float) -> Dict:
    return {"success": True, "amount": amount, "formatted": _format_currency(float(amount))}


def main() -> None:
    from mcp.server.stdio import stdio_server

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    logging.getLogger("mcp").setLevel(logging.WARNING)

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())


if __name__ == "__main__":
    main()
