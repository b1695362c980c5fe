"""
Envanter asistanı ile interaktif sohbet arayüzü.

Kullanim:
    stock-insight-chat
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from stock_insight.agents.inventory_advisor import AdvisorSession, InventoryAdvisorAgent
from stock_insight.analytics.aggregator import category_values, stock_health
from stock_insight.analytics.inventory_math import format_currency, product_eoq
from stock_insight.catalog import InventoryCatalog
from stock_insight.config import load_settings
from stock_insight.data.sample_products import sample_products

logger = logging.getLogger("chat")

HELP_TEXT = """
Commands:
  dashboard         inventory value, stock health, turnover
  abc               ABC classification of all SKUs
  eoq <SKU>         economic order quantity for a SKU
  optimize <SKU>    AI optimization analysis for a SKU
  help              show this help
  exit              quit
Anything else is sent to the AI inventory analyst.
"""


def render_dashboard(catalog: InventoryCatalog) -> str:
    metrics = catalog.dashboard()
    lines = [
        f"Total Inventory Value: {format_currency(metrics.total_inventory_value)}",
        f"Total SKUs: {metrics.total_items}",
        f"Low Stock Items: {metrics.low_stock_count} ({metrics.out_of_stock_count} out of stock)",
        f"Avg Turnover Rate: {metrics.average_turnover_rate:.1f}x",
        "Stock Health:",
    ]
    for label, count in stock_health(catalog.list_products()):
        lines.append(f"  {label}: {count} SKUs")
    lines.append("Value by Category:")
    for entry in category_values(catalog.list_products()):
        lines.append(f"  {entry.name}: {format_currency(entry.value)}")
    return "\n".join(lines)


def render_abc(catalog: InventoryCatalog) -> str:
    classes = catalog.abc_classes()
    return "\n".join(
        f"  {p.sku:<14} {classes[p.product_id].value}  {p.name}" for p in catalog.list_products()
    )


def handle_command(cmd: str, catalog: InventoryCatalog, agent: InventoryAdvisorAgent) -> Optional[str]:
    """Yerel komutları işler; komut değilse None döner."""
    parts = cmd.split(maxsplit=1)
    keyword = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""

    if keyword == "dashboard":
        return render_dashboard(catalog)
    if keyword == "abc":
        return render_abc(catalog)
    if keyword in ("eoq", "optimize"):
        if not arg:
            return f"Usage: {keyword} <SKU>"
        product = catalog.get_by_sku(arg)
        if product is None:
            return f"SKU not found: {arg}"
        if keyword == "eoq":
            return f"{product.sku} EOQ: {product_eoq(product)} units"
        return agent.optimize_product(product)
    return None


def process_turn(
    user_input: str,
    catalog: InventoryCatalog,
    agent: InventoryAdvisorAgent,
    session: AdvisorSession,
) -> str:
    """Tek bir kullanıcı girdisini yanıtlar. Hatalar sohbeti sonlandırmaz."""
    try:
        cmd_result = handle_command(user_input, catalog, agent)
        if cmd_result is not None:
            return cmd_result
        return f"AI: {session.ask(user_input)}"
    except Exception as e:
        logger.error("Sohbet turu hatası: %s", e)
        return f"Error: {e}"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    logging.getLogger("botocore").setLevel(logging.WARNING)

    print("Stock Insight - Inventory Assistant")
    print("=" * 36)

    settings = load_settings()
    catalog = InventoryCatalog(sample_products())
    try:
        agent = InventoryAdvisorAgent(
            region_name=settings.region_name,
            model_id=settings.model_id,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )
    except Exception as e:
        logger.error("Agent başlatılamadı: %s", e)
        print(f"Startup error: {e}")
        sys.exit(1)

    session = AdvisorSession(agent, catalog.list_products)
    print(f"Context: {len(catalog)} SKUs loaded")
    print(HELP_TEXT)
    print(f"AI: {session.messages[0].text}")

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not user_input:
            continue

        if user_input.lower() in ("exit", "quit", "q"):
            print("Bye!")
            break

        if user_input.lower() in ("help", "h"):
            print(HELP_TEXT)
            continue

        print(f"\n{process_turn(user_input, catalog, agent, session)}")


if __name__ == "__main__":
    main()
