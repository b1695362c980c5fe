"""Tüm agentlar için temel sınıf - Bedrock metin üretimi entegrasyonu."""

from __future__ import annotations

import json
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

from stock_insight.models.inventory import AgentDecision

logger = logging.getLogger(__name__)


class GenerationServiceError(Exception):
    """Metin üretim servisi çağrısı başarısız oldu ya da boş yanıt döndü."""


class EmptyGenerationError(GenerationServiceError):
    """Model yanıt verdi ama kullanılabilir metin yok."""


class BaseAgent(ABC):
    """AWS Bedrock tabanlı agent temel sınıfı."""

    def __init__(
        self,
        agent_name: str,
        model_id: str,
        region_name: str = "us-west-2",
        bedrock_runtime_client: Optional[Any] = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ):
        self.agent_name = agent_name
        self.model_id = model_id
        self.region_name = region_name
        self.max_tokens = max_tokens
        self.temperature = temperature

        # Bedrock istemcisi - dependency injection destekli
        self.bedrock_runtime = bedrock_runtime_client or boto3.client(
            "bedrock-runtime", region_name=region_name
        )

        self._decisions: list[AgentDecision] = []

        logger.info("Agent başlatıldı: %s (model: %s)", agent_name, model_id)

    def invoke_model(self, prompt: str, max_tokens: int = 1000, temperature: float = 0.7) -> str:
        """Bedrock Nova modelini çağırır (inference profile kullanarak)."""
        try:
            response = self.bedrock_runtime.invoke_model(
                modelId=self.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(
                    {
                        "messages": [{"role": "user", "content": [{"text": prompt}]}],
                        "inferenceConfig": {
                            "max_new_tokens": max_tokens,
                            "temperature": temperature,
                        },
                    }
                ),
            )
            result = json.loads(response["body"].read())
            return result.get("output", {}).get("message", {}).get("content", [{}])[0].get("text", "")
        except ClientError as e:
            logger.error("Bedrock API hatası [%s]: %s", self.agent_name, e)
            raise

    def generate(self, context: str, prompt: str) -> str:
        """Bağlam + talimat ile metin üretir.

        Her türlü servis hatası GenerationServiceError, boş ya da metin
        olmayan yanıt EmptyGenerationError olarak yükseltilir; çağıran taraf
        bunu kullanıcıya uygun bir mesaja çevirir.
        """
        full_prompt = f"{context.strip()}\n\n{prompt.strip()}" if context else prompt
        try:
            text = self.invoke_model(
                full_prompt, max_tokens=self.max_tokens, temperature=self.temperature
            )
        except Exception as e:
            logger.error("Metin üretim hatası [%s]: %s", self.agent_name, e)
            raise GenerationServiceError(str(e)) from e

        if not isinstance(text, str) or not text.strip():
            raise EmptyGenerationError("Model boş yanıt döndürdü")
        return text

    def log_decision(
        self,
        decision_type: str,
        input_data: dict,
        output_data: dict,
        reasoning: str,
    ) -> AgentDecision:
        """Agent kararını bellekte saklar ve loglar."""
        decision = AgentDecision(
            decision_id=str(uuid.uuid4()),
            agent_name=self.agent_name,
            decision_type=decision_type,
            input_data=input_data,
            output_data=output_data,
            reasoning=reasoning,
        )
        self._decisions.append(decision)
        logger.info("Karar [%s] %s: %s", self.agent_name, decision_type, reasoning)
        return decision

    def get_decisions(self) -> list[AgentDecision]:
        return list(self._decisions)

    @abstractmethod
    def process(self, *args: Any, **kwargs: Any) -> Any:
        """Her agent kendi iş mantığını implement eder."""
        ...
