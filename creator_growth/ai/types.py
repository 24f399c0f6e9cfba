from dataclasses import dataclass
from typing import Protocol


RESEARCH_SYSTEM_PROMPT = (
    "You are an expert market research analyst specializing in creator economy, "
    "social media trends, and influencer monetization strategies. Provide data-driven, "
    "actionable insights based on current market trends."
)


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    api_key: str
    model: str


class AIClient(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str) -> str: ...
