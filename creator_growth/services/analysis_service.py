from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from creator_growth.ai.config import get_available_providers
from creator_growth.ai.errors import NoProviderConfigured
from creator_growth.ai.factory import get_ai_client, select_provider
from creator_growth.ai.types import AIClient, ProviderConfig
from creator_growth.analytics.db import log_analysis_run
from creator_growth.core.config import settings
from creator_growth.schemas.analysis import (
    AnalysisBody,
    AnalysisRequest,
    AnalysisResult,
    PersonalizationProfile,
)
from creator_growth.services.market_research import compile_market_research
from creator_growth.services.pdf_report import DocumentRenderFailed, render_analysis_pdf, to_data_url
from creator_growth.services.personalization import (
    calculate_adaptation_factors,
    calculate_fame_score,
    generate_market_position,
    generate_personality_fingerprint,
    generate_unique_agent_id,
)
from creator_growth.services.recommendations import (
    describe_competitive_advantage,
    describe_monetization_strategy,
    generate_personalized_growth_plan,
    generate_personalized_recommendations,
)

logger = logging.getLogger(__name__)

_KEY_INSIGHTS = 5
_TREND_SUMMARY = 3


def _resolve_client(client: AIClient | None, providers: Sequence[ProviderConfig] | None) -> AIClient:
    if client is not None:
        return client
    available = list(providers) if providers is not None else get_available_providers()
    if not available:
        logger.error("analysis_rejected: no AI providers configured")
        raise NoProviderConfigured()
    return get_ai_client(select_provider(available))


def _attach_pdf(result: AnalysisResult) -> AnalysisResult:
    try:
        document = render_analysis_pdf(result)
    except DocumentRenderFailed as exc:
        logger.warning("pdf_skipped agent_id=%s code=%s", result.agent_id, exc.code)
        return result
    return result.model_copy(update={"pdf_url": to_data_url(document)})


def _record_run(request: AnalysisRequest, result: AnalysisResult) -> None:
    try:
        log_analysis_run(
            agent_id=result.agent_id,
            user_id=result.user_id,
            niche=request.creator_profile.niche,
            platform=request.creator_profile.platform,
            fame_score=result.analysis.fame_score,
            result=result.model_dump(mode="json", exclude={"pdf_url"}),
        )
    except Exception as exc:  # noqa: BLE001 - storage failures never fail an analysis
        logger.warning("analysis_record_failed agent_id=%s: %s", result.agent_id, exc)


async def run_analysis(
    request: AnalysisRequest,
    *,
    client: AIClient | None = None,
    providers: Sequence[ProviderConfig] | None = None,
    render_pdf: bool | None = None,
) -> AnalysisResult:
    research_client = _resolve_client(client, providers)
    profile = request.creator_profile

    agent_id = generate_unique_agent_id(request.user_id)
    fingerprint = generate_personality_fingerprint(request.user_id, profile, agent_id)
    factors = calculate_adaptation_factors(profile)
    logger.info(
        "analysis_started agent_id=%s niche=%s platform=%s type=%s",
        agent_id,
        profile.niche,
        profile.platform,
        request.analysis_type,
    )

    market_data = await compile_market_research(
        profile.niche,
        profile.platform,
        profile.followers,
        agent_id,
        client=research_client,
    )

    fame_score = calculate_fame_score(profile, market_data, fingerprint)
    personalization = PersonalizationProfile(
        user_id=request.user_id,
        agent_id=agent_id,
        creator_profile=profile,
        personality_score=fingerprint,
        adaptation_factors=factors,
    )

    result = AnalysisResult(
        agent_id=agent_id,
        user_id=request.user_id,
        analysis=AnalysisBody(
            fame_score=fame_score,
            market_position=generate_market_position(profile, market_data, fame_score),
            key_insights=market_data.industry_insights[:_KEY_INSIGHTS],
            recommendations=generate_personalized_recommendations(market_data, personalization),
            trend_analysis=" | ".join(market_data.trends[:_TREND_SUMMARY]),
            competitive_advantage=describe_competitive_advantage(profile, factors),
            monetization_strategy=describe_monetization_strategy(factors),
        ),
        market_research=market_data,
        growth_plan=generate_personalized_growth_plan(profile, market_data),
        generated_at=datetime.now(timezone.utc),
    )

    if settings.pdf_enabled if render_pdf is None else render_pdf:
        result = _attach_pdf(result)

    _record_run(request, result)
    logger.info("analysis_completed agent_id=%s fame_score=%s", agent_id, fame_score)
    return result
