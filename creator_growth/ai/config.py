from __future__ import annotations

import os
from dataclasses import dataclass

from creator_growth.ai.types import ProviderConfig

# (provider name, key variable, model variable, default model)
_PROVIDER_ENV: tuple[tuple[str, str, str, str], ...] = (
    ("openai", "OPENAI_API_KEY", "OPENAI_MODEL", "gpt-4o-mini"),
    ("anthropic", "ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929"),
    ("google", "GOOGLE_API_KEY", "GOOGLE_MODEL", "gemini-2.5-flash"),
)


@dataclass(frozen=True)
class GenerationConfig:
    timeout_s: float
    max_retries: int
    temperature: float
    max_output_tokens: int


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def get_available_providers() -> list[ProviderConfig]:
    providers: list[ProviderConfig] = []
    for name, key_var, model_var, default_model in _PROVIDER_ENV:
        api_key = (os.getenv(key_var) or "").strip()
        if not api_key or _looks_like_placeholder(api_key):
            continue
        model = (os.getenv(model_var) or default_model).strip()
        providers.append(ProviderConfig(name=name, api_key=api_key, model=model))
    return providers


def load_generation_config() -> GenerationConfig:
    return GenerationConfig(
        timeout_s=float(os.getenv("AI_TIMEOUT_S", "30")),
        max_retries=int(os.getenv("AI_MAX_RETRIES", "2")),
        temperature=float(os.getenv("AI_TEMPERATURE", "0.7")),
        max_output_tokens=int(os.getenv("AI_MAX_OUTPUT_TOKENS", "2000")),
    )
