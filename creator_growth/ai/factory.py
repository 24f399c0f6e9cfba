from typing import Sequence

from creator_growth.ai.config import load_generation_config
from creator_growth.ai.errors import NoProviderConfigured
from creator_growth.ai.types import AIClient, ProviderConfig

from creator_growth.ai.providers.openai_provider import OpenAIProvider
from creator_growth.ai.providers.claude_provider import ClaudeProvider
from creator_growth.ai.providers.gemini_provider import GeminiProvider

PREFERRED_ORDER = ("openai", "anthropic", "google")


def select_provider(providers: Sequence[ProviderConfig]) -> ProviderConfig:
    if not providers:
        raise NoProviderConfigured()

    for preferred in PREFERRED_ORDER:
        for provider in providers:
            if provider.name == preferred:
                return provider

    return providers[0]


def get_ai_client(provider: ProviderConfig) -> AIClient:
    cfg = load_generation_config()

    if provider.name == "openai":
        return OpenAIProvider(model=provider.model, api_key=provider.api_key, config=cfg)

    if provider.name == "anthropic":
        return ClaudeProvider(model=provider.model, api_key=provider.api_key, config=cfg)

    if provider.name == "google":
        return GeminiProvider(model=provider.model, api_key=provider.api_key, config=cfg)

    raise ValueError(f"Unsupported AI provider '{provider.name}'")
