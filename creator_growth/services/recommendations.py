from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from creator_growth.core.scoring import get_scoring_value
from creator_growth.schemas.analysis import (
    AdaptationFactors,
    CreatorProfile,
    GrowthPlan,
    MarketResearchData,
    PersonalizationProfile,
)
from creator_growth.services.personalization import calculate_adaptation_factors

_TREND_SLICE = 2


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    applies: Callable[[CreatorProfile, AdaptationFactors], bool]
    render: Callable[[CreatorProfile, MarketResearchData], list[str]]


def _threshold(key: str, default: float) -> float:
    return float(get_scoring_value(f"recommendations.{key}", default))


def _strong_community(factors: AdaptationFactors) -> bool:
    return factors.community_engagement >= _threshold("strong_community", 7)


def _mentions(profile: CreatorProfile, keyword: str) -> bool:
    return keyword in (profile.challenges or "").lower()


def _market_rate_line(profile: CreatorProfile, market: MarketResearchData) -> list[str]:
    opportunities = market.monetization_opportunities
    earnings = opportunities[0].estimated_earnings if opportunities else "varies"
    return [
        "Start with affiliate marketing of products you genuinely use - lowest barrier to entry for monetization.",
        f"Current market rate for {profile.niche} creators: {earnings}. Track performance metrics to justify rates.",
    ]


RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="strong_community",
        applies=lambda profile, factors: _strong_community(factors),
        render=lambda profile, market: [
            "Your community engagement is strong. Leverage this to launch exclusive membership programs or courses.",
            "Consider starting a community Discord or Telegram for deeper connections - monetize with premium tier access.",
        ],
    ),
    RecommendationRule(
        name="quality_micro_creator",
        applies=lambda profile, factors: (
            profile.followers < _threshold("micro_creator_ceiling", 50000)
            and factors.content_quality >= _threshold("quality_content", 6)
        ),
        render=lambda profile, market: [
            "Quality over quantity is your advantage. Target micro-brands that value authentic partnerships over reach.",
            "Apply for influencer networks that connect brands seeking niche creators - often offer better rates per engagement.",
        ],
    ),
    RecommendationRule(
        name="large_reach",
        applies=lambda profile, factors: profile.followers >= _threshold("large_creator_floor", 100000),
        render=lambda profile, market: [
            "You have significant reach. Approach major brands directly with professional media kit and case studies.",
            "Launch your own product line. Your audience size justifies custom merchandise or digital products.",
        ],
    ),
    RecommendationRule(
        name="engagement_challenge",
        applies=lambda profile, factors: _mentions(profile, "engagement"),
        render=lambda profile, market: [
            "Focus on posting frequency optimization - test different posting times and content formats to boost engagement.",
            "Implement call-to-action strategies consistently - encourage saves, shares, and comments in every post.",
        ],
    ),
    RecommendationRule(
        name="monetization_challenge",
        applies=lambda profile, factors: _mentions(profile, "monetization"),
        render=_market_rate_line,
    ),
)


def trend_recommendation(trend: str) -> str:
    lowered = trend.lower()
    if "short-form" in lowered:
        return f"Capitalize on short-form video trend: {trend}. Increase video content frequency by 30%."
    if "authenticity" in lowered:
        return f"Lean into authentic storytelling: {trend}. Share behind-the-scenes content more frequently."
    return f"Trend alert: {trend}. Adapt your content calendar to include trending formats."


def generate_personalized_recommendations(
    market_data: MarketResearchData,
    personalization: PersonalizationProfile,
) -> list[str]:
    """Run every rule in table order; all matching rules contribute, then two trend lines."""
    profile = personalization.creator_profile
    factors = personalization.adaptation_factors

    recommendations: list[str] = []
    for rule in RULES:
        if rule.applies(profile, factors):
            recommendations.extend(rule.render(profile, market_data))

    recommendations.extend(trend_recommendation(trend) for trend in market_data.trends[:_TREND_SLICE])
    return recommendations


def generate_personalized_growth_plan(
    profile: CreatorProfile,
    market_data: MarketResearchData,
) -> GrowthPlan:
    factors = calculate_adaptation_factors(profile)
    strong_community = _strong_community(factors)
    high_quality = factors.content_quality >= _threshold("high_quality_content", 7)
    immediate = factors.time_to_monetize == "immediate"
    followers = profile.followers

    next_month = [
        "Launch weekly community engagement ritual (polls, Q&A, challenges)"
        if strong_community
        else "Implement engagement boosting strategies (CTAs, hashtag optimization)",
        f"Post {'4-5' if high_quality else '3-4'} times per week to optimize algorithm visibility",
        "Analyze top 5 performing posts and create 3 similar content variations",
        "Reach out to 10 complementary creators for collaboration opportunities",
    ]

    next_quarter = [
        "Negotiate and finalize 2-3 brand partnerships"
        if immediate
        else "Build media kit and start approaching micro-brands",
        f"Scale to {followers + 10000:,}+ followers through consistency",
        "Launch email newsletter for direct audience communication",
        "Test and optimize posting schedule for maximum reach",
    ]

    next_year = [
        "Build and monetize community through membership/paid community"
        if strong_community
        else "Establish yourself as industry authority through thought leadership",
        f"Target {followers * 3:,}-{followers * 5:,} followers (3-5x growth) through strategic content",
        "Develop 1-2 signature content formats that define your brand",
        "Generate $250,000+ annual income through multiple revenue streams"
        if immediate
        else "Achieve consistent 100,000+ monthly reach to unlock premium brand deals",
    ]

    return GrowthPlan(next_month=next_month, next_quarter=next_quarter, next_year=next_year)


def describe_competitive_advantage(profile: CreatorProfile, factors: AdaptationFactors) -> str:
    quality = "high-quality content" if factors.content_quality >= _threshold("high_quality_content", 7) else "authentic approach"
    community = "strong community engagement" if _strong_community(factors) else "growing audience base"
    goals = profile.goals.strip() or "consistent content"
    return (
        f"Based on market analysis, you stand out in the {profile.niche} space due to your {quality} "
        f"and {community}. Your unique selling proposition lies in combining {profile.niche} expertise "
        f"with {goals}."
    )


def describe_monetization_strategy(factors: AdaptationFactors) -> str:
    start = (
        "premium brand partnerships and sponsorships"
        if factors.time_to_monetize == "immediate"
        else "affiliate marketing and micro-partnerships"
    )
    focus = (
        "community monetization through membership/courses"
        if _strong_community(factors)
        else "scaling reach before premium monetization"
    )
    return f"Start with {start} to build momentum. Focus on {focus}."
