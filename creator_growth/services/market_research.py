from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Union

from creator_growth.ai.config import get_available_providers
from creator_growth.ai.errors import ProviderCallFailed
from creator_growth.ai.factory import get_ai_client, select_provider
from creator_growth.ai.types import RESEARCH_SYSTEM_PROMPT, AIClient
from creator_growth.reference import (
    DEFAULT_COMPETITORS,
    DEFAULT_INSIGHTS,
    DEFAULT_TRENDS,
    FALLBACK_INSIGHTS,
    FALLBACK_OPPORTUNITIES,
    CannedOpportunity,
    default_opportunities,
)
from creator_growth.schemas.analysis import (
    Competitor,
    CompetitorAnalysis,
    MarketResearchData,
    MonetizationOpportunity,
)

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_MAX_COMPETITORS = 5


@dataclass(frozen=True)
class ResearchQuery:
    topic: str
    context: str
    required_data: tuple[str, ...]


@dataclass(frozen=True)
class StructuredResponse:
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UnstructuredResponse:
    raw_text: str


ParsedResponse = Union[StructuredResponse, UnstructuredResponse]


def market_position_query(niche: str, platform: str) -> ResearchQuery:
    return ResearchQuery(
        topic=f"Creator market analysis for {niche} niche on {platform}",
        context=(
            f"Analyzing market trends and positioning for a creator in the {niche} niche who primarily "
            f"uses {platform}. Need to understand current market saturation, opportunities, and "
            "competitive landscape."
        ),
        required_data=(
            "Current market demand for content in this niche",
            "Saturation levels and growth potential",
            "Most successful content formats",
            "Audience growth trends",
            "Engagement benchmarks",
        ),
    )


def monetization_query(niche: str, platform: str, followers: int) -> ResearchQuery:
    return ResearchQuery(
        topic=f"Monetization opportunities for {niche} creators on {platform}",
        context=(
            f"Creator with {followers} followers looking to monetize their {niche} content on {platform}. "
            "Need comprehensive monetization strategy."
        ),
        required_data=(
            f"Average CPM/RPM rates for {niche} content on {platform}",
            "Sponsorship opportunities and typical rates",
            "Affiliate program opportunities",
            "Product/service sale strategies",
            "Brand collaboration rates and requirements",
        ),
    )


def competitor_query(niche: str, platform: str) -> ResearchQuery:
    return ResearchQuery(
        topic=f"Competitive analysis for {niche} creators on {platform}",
        context=f"Understanding the competitive landscape for creators in the {niche} niche on {platform}.",
        required_data=(
            "Top 10 creators in this niche and their strategies",
            "Their growth rates and engagement patterns",
            "Content themes that perform best",
            "Unique differentiators of top creators",
            "Market gaps and opportunities",
        ),
    )


def platform_trends_query(platform: str) -> ResearchQuery:
    return ResearchQuery(
        topic=f"{platform} trends and algorithm updates",
        context=(
            f"Current trends and algorithm behavior on {platform} to help creators optimize their "
            "content strategy."
        ),
        required_data=(
            "Recent algorithm changes on this platform",
            "Content features that are being promoted",
            "Best times to post",
            "Trending sounds, hashtags, and formats",
            "Future platform direction and opportunities",
        ),
    )


def build_research_prompt(query: ResearchQuery, agent_id: str) -> str:
    required = "\n".join(f"- {item}" for item in query.required_data)
    return (
        "You are analyzing market trends for a creator in the following context:\n"
        f"Topic: {query.topic}\n"
        f"Context: {query.context}\n\n"
        "Required data to research and analyze:\n"
        f"{required}\n\n"
        "Please provide comprehensive, data-driven insights about:\n"
        "1. Current market trends in this niche\n"
        "2. What's working now (based on current algorithm changes)\n"
        "3. Monetization opportunities\n"
        "4. Competitive landscape\n"
        "5. Growth strategies\n\n"
        "Format your response as structured JSON with these keys:\n"
        "- trends: array of current trends\n"
        "- opportunities: array of monetization opportunities with type, earnings and requirements\n"
        "- top_creators: array of competitors with name, followers, engagement and strategy\n"
        "- insights: array of industry insights\n"
        "- recommendations: actionable recommendations\n\n"
        f"Agent ID: {agent_id} (for tracking unique analysis)\n"
    )


async def execute_market_research(
    query: ResearchQuery,
    agent_id: str,
    *,
    client: AIClient | None = None,
) -> str:
    provider_name = getattr(client, "name", "injected")
    if client is None:
        provider = select_provider(get_available_providers())
        provider_name = provider.name
        client = get_ai_client(provider)

    prompt = build_research_prompt(query, agent_id)
    try:
        return await client.generate(RESEARCH_SYSTEM_PROMPT, prompt)
    except Exception as exc:  # noqa: BLE001 - any SDK failure becomes a provider failure
        logger.warning("research_call_failed provider=%s topic=%s: %s", provider_name, query.topic, exc)
        raise ProviderCallFailed(provider_name, str(exc)) from exc


def parse_provider_response(text: str) -> ParsedResponse:
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        return UnstructuredResponse(raw_text=text or "")
    try:
        decoded = json.loads(match.group(0))
    except json.JSONDecodeError:
        return UnstructuredResponse(raw_text=text)
    if not isinstance(decoded, dict):
        return UnstructuredResponse(raw_text=text)
    return StructuredResponse(fields=decoded)


def _fields(parsed: ParsedResponse) -> dict[str, Any]:
    if isinstance(parsed, StructuredResponse):
        return parsed.fields
    return {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_int(value: Any, default: int) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _opportunity(item: CannedOpportunity) -> MonetizationOpportunity:
    return MonetizationOpportunity(
        type=item.type,
        estimated_earnings=item.estimated_earnings,
        requirements=list(item.requirements),
    )


def _default_competitors() -> list[Competitor]:
    return [
        Competitor(
            name=item.name,
            followers=item.followers,
            avg_engagement=item.avg_engagement,
            monetization_strategy=item.monetization_strategy,
        )
        for item in DEFAULT_COMPETITORS
    ]


def extract_trends(market: ParsedResponse, trend: ParsedResponse) -> list[str]:
    trends: list[str] = []
    for parsed in (market, trend):
        for item in _as_list(_fields(parsed).get("trends")):
            text = str(item).strip()
            if text and text not in trends:
                trends.append(text)
    return trends or list(DEFAULT_TRENDS)


def extract_competitors(competitor: ParsedResponse) -> list[Competitor]:
    raw = [item for item in _as_list(_fields(competitor).get("top_creators")) if isinstance(item, dict)]
    if not raw:
        return _default_competitors()
    return [
        Competitor(
            name=str(item.get("name") or "Top Creator"),
            followers=_as_int(item.get("followers"), 100000),
            avg_engagement=_as_float(item.get("engagement"), 5.0),
            monetization_strategy=str(item.get("strategy") or "Brand partnerships + Sponsorships"),
        )
        for item in raw[:_MAX_COMPETITORS]
    ]


def extract_monetization_opportunities(monetization: ParsedResponse, followers: int) -> list[MonetizationOpportunity]:
    raw = [item for item in _as_list(_fields(monetization).get("opportunities")) if isinstance(item, dict)]
    if not raw:
        return [_opportunity(item) for item in default_opportunities(followers)]
    return [
        MonetizationOpportunity(
            type=str(item.get("type") or "Unknown"),
            estimated_earnings=str(item.get("earnings") or item.get("estimated_earnings") or "Depends on engagement"),
            requirements=[str(req) for req in _as_list(item.get("requirements"))],
        )
        for item in raw
    ]


def extract_insights(market: ParsedResponse) -> list[str]:
    insights = [str(item).strip() for item in _as_list(_fields(market).get("insights"))]
    insights = [item for item in insights if item]
    return insights or list(DEFAULT_INSIGHTS)


def fallback_market_research() -> MarketResearchData:
    return MarketResearchData(
        trends=list(DEFAULT_TRENDS),
        competitor_analysis=CompetitorAnalysis(top_competitors=_default_competitors()),
        monetization_opportunities=[_opportunity(item) for item in FALLBACK_OPPORTUNITIES],
        industry_insights=list(FALLBACK_INSIGHTS),
    )


async def compile_market_research(
    niche: str,
    platform: str,
    followers: int,
    agent_id: str,
    *,
    client: AIClient | None = None,
) -> MarketResearchData:
    try:
        market_raw, monetization_raw, competitor_raw, trend_raw = await asyncio.gather(
            execute_market_research(market_position_query(niche, platform), agent_id, client=client),
            execute_market_research(monetization_query(niche, platform, followers), agent_id, client=client),
            execute_market_research(competitor_query(niche, platform), agent_id, client=client),
            execute_market_research(platform_trends_query(platform), agent_id, client=client),
        )
    except Exception as exc:  # noqa: BLE001 - canned research replaces any failed round
        logger.warning("market_research_failed niche=%s platform=%s: %s", niche, platform, exc)
        return fallback_market_research()

    market = parse_provider_response(market_raw)
    monetization = parse_provider_response(monetization_raw)
    competitor = parse_provider_response(competitor_raw)
    trend = parse_provider_response(trend_raw)

    unstructured = sum(
        1 for parsed in (market, monetization, competitor, trend) if isinstance(parsed, UnstructuredResponse)
    )
    if unstructured:
        logger.info("market_research_unstructured count=%s agent_id=%s", unstructured, agent_id)

    return MarketResearchData(
        trends=extract_trends(market, trend),
        competitor_analysis=CompetitorAnalysis(top_competitors=extract_competitors(competitor)),
        monetization_opportunities=extract_monetization_opportunities(monetization, followers),
        industry_insights=extract_insights(market),
    )
