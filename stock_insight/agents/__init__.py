from stock_insight.agents.base_agent import BaseAgent, EmptyGenerationError, GenerationServiceError
from stock_insight.agents.inventory_advisor import AdvisorSession, InventoryAdvisorAgent

__all__ = [
    "AdvisorSession",
    "BaseAgent",
    "EmptyGenerationError",
    "GenerationServiceError",
    "InventoryAdvisorAgent",
]
