"""Inventory Advisor Agent - Envanter verisi üzerinden doğal dil içgörüleri.

- Ürün koleksiyonunun özetini (en fazla 15 ürün) modele gönderir
- Kullanıcı sorusunu ya da sabit analiz talimatını yanıtlar
- Ürün bazında EOQ / yeniden sipariş noktası optimizasyon önerisi üretir
- Model hatalarında sabit, kullanıcıya uygun bir mesaj döndürür
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

from stock_insight.agents.base_agent import BaseAgent, EmptyGenerationError, GenerationServiceError
from stock_insight.analytics.inventory_math import DAYS_PER_YEAR, product_eoq
from stock_insight.models.inventory import Product, ProductSummary, SummaryStatus

logger = logging.getLogger(__name__)

SUMMARY_PRODUCT_LIMIT = 15

ANALYSIS_FALLBACK = (
    "I encountered an error analyzing your inventory. "
    "Please check your API key or try again later."
)
OPTIMIZATION_FALLBACK = "Optimization analysis unavailable."
ANALYSIS_EMPTY_REPLY = "Unable to generate analysis at this time."
OPTIMIZATION_EMPTY_REPLY = "Unable to generate optimization strategy."

DEFAULT_ANALYSIS_QUERY = (
    "Give me an overview of inventory health: stockouts, overstock, "
    "and the highest-value items that need attention."
)

WELCOME_MESSAGE = (
    "Hello! I'm your Inventory Intelligence Agent. I have access to your full SKU "
    "catalog, stock levels, and valuation data. How can I help you optimize your "
    "inventory today?"
)

_ANALYST_ROLE = (
    "You are an expert Inventory Manager and Supply Chain Analyst (CPIM certified).\n"
    "Analyze the following inventory data summary and answer the user's query."
)


def summarize_product(product: Product) -> ProductSummary:
    status = (
        SummaryStatus.CRITICAL_LOW
        if product.stock_level <= product.safety_stock
        else SummaryStatus.OK
    )
    return ProductSummary(
        sku=product.sku,
        name=product.name,
        stock=product.stock_level,
        status=status,
        value=product.stock_level * product.unit_cost,
        turnover_potential=product.demand_rate * DAYS_PER_YEAR,
    )


class InventoryAdvisorAgent(BaseAgent):
    """Envanter özetini modele gönderip içgörü üreten agent."""

    def __init__(self, region_name: str = "us-west-2", **kwargs: Any):
        kwargs.setdefault("model_id", "us.amazon.nova-lite-v1:0")
        super().__init__(
            agent_name="InventoryAdvisorAgent",
            region_name=region_name,
            **kwargs,
        )

    def build_summary(self, products: Iterable[Product]) -> list[ProductSummary]:
        """Modele gönderilecek özet; ilk SUMMARY_PRODUCT_LIMIT ürünle sınırlı."""
        summary = []
        for product in products:
            if len(summary) >= SUMMARY_PRODUCT_LIMIT:
                break
            summary.append(summarize_product(product))
        return summary

    def build_analysis_context(self, products: Iterable[Product]) -> str:
        digest = [row.to_dict() for row in self.build_summary(products)]
        return (
            f"{_ANALYST_ROLE}\n\n"
            f"Data Summary:\n{json.dumps(digest)}"
        )

    # --- Koleksiyon analizi ---

    def analyze_inventory(self, products: Iterable[Product], query: str) -> str:
        """Envanter özeti + kullanıcı sorusu ile model yanıtı döndürür. Hata yükseltmez."""
        products = list(products)
        context = self.build_analysis_context(products)
        prompt = (
            f'User Query: "{query}"\n\n'
            "Provide a concise, actionable, and professional response. Use markdown formatting.\n"
            "If suggesting actions, prioritize by financial impact (High Value items or Stockouts)."
        )

        try:
            text = self.generate(context, prompt)
        except EmptyGenerationError:
            logger.warning("Envanter analizi boş yanıt döndü")
            return ANALYSIS_EMPTY_REPLY
        except GenerationServiceError as e:
            logger.error("Envanter analizi hatası: %s", e)
            return ANALYSIS_FALLBACK

        self.log_decision(
            decision_type="inventory_analysis",
            input_data={"product_count": len(products), "query": query},
            output_data={"response_length": len(text)},
            reasoning="Envanter özeti ile model analizi yapıldı.",
        )
        return text

    # --- Ürün optimizasyonu ---

    def build_optimization_prompt(self, product: Product) -> str:
        return (
            "Perform a deep dive inventory optimization analysis for this product:\n"
            f"Name: {product.name}\n"
            f"SKU: {product.sku}\n"
            f"Unit Cost: ${product.unit_cost}\n"
            f"Holding Cost %: {product.holding_cost_percent * 100:g}%\n"
            f"Ordering Cost: ${product.ordering_cost}\n"
            f"Avg Daily Demand: {product.demand_rate}\n"
            f"Lead Time: {product.lead_time_days} days\n"
            f"Current Stock: {product.stock_level}\n"
            f"Safety Stock: {product.safety_stock}\n"
            f"Calculated EOQ: {product_eoq(product)} units\n\n"
            "Explain the Economic Order Quantity (EOQ) above.\n"
            f"Analyze if the current Reorder Point ({product.reorder_point}) is sufficient.\n"
            "Suggest strategies to reduce carrying costs or stockout risks.\n"
            "Keep it professional and structured."
        )

    def optimize_product(self, product: Product) -> str:
        try:
            text = self.generate("", self.build_optimization_prompt(product))
        except EmptyGenerationError:
            logger.warning("Ürün optimizasyonu boş yanıt döndü [%s]", product.sku)
            return OPTIMIZATION_EMPTY_REPLY
        except GenerationServiceError as e:
            logger.error("Ürün optimizasyon hatası [%s]: %s", product.sku, e)
            return OPTIMIZATION_FALLBACK

        self.log_decision(
            decision_type="product_optimization",
            input_data={"sku": product.sku, "eoq": product_eoq(product)},
            output_data={"response_length": len(text)},
            reasoning=f"{product.sku} için optimizasyon önerisi üretildi.",
        )
        return text

    def process(self, products: Iterable[Product], query: Optional[str] = None) -> str:
        """Ana işlem: soru verilmemişse sabit analiz talimatı kullanılır."""
        return self.analyze_inventory(products, query or DEFAULT_ANALYSIS_QUERY)


@dataclass
class AdvisorMessage:
    sender: str  # "user" | "ai"
    text: str
    timestamp: str = field(default_factory=lambda: datetime.utcnow().isoformat())


class AdvisorSession:
    """Sohbet geçmişi. Her soru ürünlerin o anki hali ile yanıtlanır."""

    def __init__(self, agent: InventoryAdvisorAgent, products_provider) -> None:
        self.agent = agent
        self._products_provider = products_provider
        self.messages: list[AdvisorMessage] = [AdvisorMessage(sender="ai", text=WELCOME_MESSAGE)]

    def ask(self, query: str) -> Optional[str]:
        query = query.strip()
        if not query:
            return None

        self.messages.append(AdvisorMessage(sender="user", text=query))
        reply = self.agent.analyze_inventory(self._products_provider(), query)
        self.messages.append(AdvisorMessage(sender="ai", text=reply))
        return reply
