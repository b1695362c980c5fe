"""Merkezi yapılandırma. .env dosyası ve environment değişkenlerinden okunur."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Proje kökündeki .env dosyası; mevcut environment değerleri ezilmez
_env_path = Path(__file__).resolve().parent.parent / ".env"

DEFAULT_REGION = "us-west-2"
DEFAULT_MODEL_ID = "us.amazon.nova-lite-v1:0"


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Geçersiz sayı değeri: {name}={raw!r}") from None


@dataclass
class Settings:
    region_name: str = DEFAULT_REGION
    model_id: str = DEFAULT_MODEL_ID
    max_tokens: int = 1000
    temperature: float = 0.7


def load_settings(env_file: Optional[Path] = None) -> Settings:
    load_dotenv(env_file or _env_path, override=False)
    return Settings(
        region_name=os.environ.get("AWS_DEFAULT_REGION", DEFAULT_REGION),
        model_id=os.environ.get("STOCK_INSIGHT_MODEL_ID", DEFAULT_MODEL_ID),
        max_tokens=_env_number("STOCK_INSIGHT_MAX_TOKENS", 1000, int),
        temperature=_env_number("STOCK_INSIGHT_TEMPERATURE", 0.7, float),
    )
