"""Deterministic enhanced analysis built only from the static market tables.

Unlike the agent analysis this path never calls a provider, so the same input
always yields the same output.
"""

from __future__ import annotations

from creator_growth.core.scoring import round_half_up
from creator_growth.reference import (
    PlatformBenchmark,
    get_monetization_channels,
    get_platform_benchmark,
    get_trends_for_niche,
)
from creator_growth.schemas.dynamic import (
    DynamicAnalysisInput,
    EnhancedAnalysisOutput,
    IncomeProjection,
)

_PLATFORM_ICONS = {"TikTok": "🎵", "YouTube": "📺"}


def _position_label(followers: int) -> str:
    if followers < 10000:
        return "EMERGING"
    if followers < 50000:
        return "GROWING"
    if followers < 250000:
        return "ESTABLISHED"
    if followers < 1000000:
        return "INFLUENTIAL"
    return "CELEBRITY"


def calculate_enhanced_fame_score(data: DynamicAnalysisInput) -> int:
    trends = get_trends_for_niche(data.niche)

    score = 0.0
    score += min(30, (data.followers / 500000) * 30)
    score += min(35, (data.engagement_rate / 0.1) * 35)
    score += min(20, (data.monthly_views / 5000000) * 20)
    score += 8 if trends else 4
    score += min(5, len(data.experience) * 1.25)
    return min(100, round_half_up(score))


def generate_market_position_analysis(niche: str, platform: str, followers: int, engagement_rate: float) -> str:
    trends = get_trends_for_niche(niche)
    benchmark = get_platform_benchmark(platform)
    engagement = engagement_rate * 100
    benchmark_engagement = benchmark.avg_engagement_rate * 100
    relation = "ABOVE" if engagement > benchmark_engagement else "BELOW"

    dynamics = "\n".join(
        f"• {t.trend} (Growing {t.growth_rate}% - Relevance: {t.relevance}/100)" for t in trends[:3]
    )
    focus = trends[0].trend if trends else "current trends"
    return (
        f"You are a **{_position_label(followers)}** creator in the **{niche}** space on **{platform}**.\n"
        f"Your engagement rate is {relation} the platform average "
        f"({engagement:.2f}% vs {benchmark_engagement:.2f}%).\n\n"
        "**Current Market Dynamics:**\n"
        f"{dynamics}\n\n"
        f"Your competitive position: You should focus on {focus} to maximize reach and income potential."
    )


def analyze_competitive_advantage(data: DynamicAnalysisInput, benchmark: PlatformBenchmark) -> str:
    above_engagement = data.engagement_rate > benchmark.avg_engagement_rate
    above_followers = data.followers > benchmark.avg_followers

    if above_engagement and above_followers:
        return (
            "You have both HIGH follower count and EXCEPTIONAL engagement rates. This is your biggest "
            "competitive advantage.\nMost creators struggle with one or the other. Your combination puts you "
            "in top 5% of your niche.\nAction: Monetize this advantage immediately through premium "
            "sponsorships and coaching."
        )
    if above_engagement:
        return (
            f"Your engagement rate is EXCEPTIONAL ({data.engagement_rate * 100:.2f}% vs "
            f"{benchmark.avg_engagement_rate * 100:.2f}% average).\nThis means your audience is highly loyal "
            "and responsive.\nAction: Brands pay premium rates for engaged audiences. Use this to negotiate "
            "better sponsorship deals."
        )
    if above_followers:
        return (
            f"You have a significant follower base ({data.followers:,} followers).\nGrowth is fast, but "
            "engagement needs optimization.\nAction: Focus on engagement improvement to unlock premium "
            "monetization opportunities worth $5K-$20K per month."
        )
    return (
        "You're building a foundation in the right niche. Current metrics show potential.\nYour advantage is "
        "agility - you can pivot faster than larger creators.\nAction: Use this to test new content formats "
        "and trends before larger creators catch on."
    )


def generate_monetization_pathways(data: DynamicAnalysisInput) -> tuple[list[str], int]:
    channels = get_monetization_channels(data.followers)
    trends = get_trends_for_niche(data.niche)
    pathways: list[str] = []
    score = 0

    immediate = [c for c in channels if "1-2 weeks" in c.time_to_monetize][:2]
    if immediate:
        listed = ", ".join(f"{c.type} ({c.estimated_earnings})" for c in immediate)
        pathways.append(f"⚡ IMMEDIATE (Start This Week): {listed}")
        score += 20

    medium_term = [c for c in channels if "1-3 months" in c.time_to_monetize][:2]
    if medium_term:
        listed = ", ".join(f"{c.type} ({c.estimated_earnings})" for c in medium_term)
        pathways.append(f"📈 SHORT-TERM (Next 3 Months): {listed}")
        score += 25

    if trends:
        lead = trends[0]
        pathways.append(
            f'🔥 TREND-ALIGNED: Focus on "{lead.trend}" (Growing {lead.growth_rate}% this quarter). '
            "Expected income boost: 2-3X."
        )
        score += 30

    if data.experience:
        pathways.append(
            f"🎓 LEVERAGE YOUR EXPERTISE: Your experience in {', '.join(data.experience)} enables premium "
            "consulting ($100-500/hour)."
        )
        score += 15

    platform_channels = [c for c in channels if c.platform == data.platform][:1]
    if platform_channels:
        icon = _PLATFORM_ICONS.get(data.platform, "📱")
        pathways.append(
            f"{icon} PLATFORM-OPTIMIZED: {platform_channels[0].type} - Best for {data.platform} creators"
        )
        score += 10

    return pathways, min(100, score)


def generate_growth_recommendations(data: DynamicAnalysisInput) -> list[str]:
    trends = get_trends_for_niche(data.niche)
    recommendations: list[str] = []

    if trends:
        lead = trends[0]
        recommendations.append(
            f'Create content around "{lead.trend}" - This trend is growing {lead.growth_rate}% quarterly and '
            f"has {lead.relevance}% relevance to your niche."
        )
        if len(trends) > 1:
            second = trends[1]
            recommendations.append(
                f'Secondary opportunity: "{second.trend}" with {second.growth_rate}% growth. Mix this into '
                "your content mix for higher engagement."
            )

    if data.posting_frequency != "daily":
        recommendations.append(
            "URGENT: Increase posting frequency to daily. Algorithm data shows daily posters get 3-5X more "
            "visibility than weekly posters in 2024."
        )

    if data.engagement_rate < 0.03:
        recommendations.append(
            "Focus on engagement optimization: Ask questions, create polls, use CTAs. Engagement rate below 3% "
            "limits sponsorship opportunities."
        )

    if data.platform == "TikTok":
        recommendations.append(
            "Repurpose TikTok content to Instagram Reels and YouTube Shorts. Same content, 3 income streams. "
            "Total potential: $2K-$5K/month."
        )

    if "Collaboration" not in data.content_type:
        recommendations.append(
            "Start creator collaborations. Collab videos get 5-10X more engagement and introduce you to new "
            "audiences. Build 3-5 collab videos this month."
        )

    return recommendations[:5]


def identify_risk_factors(data: DynamicAnalysisInput, benchmark: PlatformBenchmark) -> list[str]:
    risks: list[str] = []

    if data.engagement_rate < benchmark.avg_engagement_rate * 0.5:
        risks.append(
            "Very Low Engagement: Below 50% of platform average. Algorithm will deprioritize content. "
            "Fix: Focus on engagement-first content."
        )
    if data.followers < 10000:
        risks.append(
            "Limited Scale: Below 10K followers, monetization options are limited. Can still earn "
            "$100-500/month. Growth is priority."
        )
    if "few_times" in data.posting_frequency:
        risks.append(
            "Low Posting Frequency: Algorithms favor consistency. Post less than 3x/week = lower visibility. "
            "Increase to 4-5x weekly minimum."
        )
    if data.monthly_views < 100000:
        risks.append(
            "Low Reach: Monthly views below 100K limit sponsorship opportunities. Prioritize content that "
            "performs well."
        )
    if not data.goals:
        risks.append(
            "No Clear Goals: Content without direction underperforms. Define 1-2 primary goals "
            "(monetization, brand building, etc)."
        )

    return risks[:4]


def _income_bracket(followers: int, brackets: tuple[int, int, int, int]) -> int:
    if followers < 50000:
        return brackets[0]
    if followers < 250000:
        return brackets[1]
    if followers < 1000000:
        return brackets[2]
    return brackets[3]


def project_income_estimates(data: DynamicAnalysisInput) -> IncomeProjection:
    conservative_base = _income_bracket(data.followers, (200, 1000, 3000, 8000))
    multiplier = 2.5 if data.engagement_rate > 0.05 else 1.8
    realistic_low = round(conservative_base * multiplier)
    realistic_high = round(conservative_base * multiplier * 1.5)
    optimistic_base = _income_bracket(data.followers, (2000, 8000, 25000, 100000))

    return IncomeProjection(
        conservative=(
            f"${conservative_base:,}-${int(conservative_base * 1.5):,}/month "
            "(Ad revenue + basic sponsorships)"
        ),
        realistic=f"${realistic_low:,}-${realistic_high:,}/month (Sponsorships + affiliate + products)",
        optimistic=f"${optimistic_base:,}-${optimistic_base * 2:,}/month (All streams + coaching + courses)",
    )


def generate_dynamic_analysis(data: DynamicAnalysisInput) -> EnhancedAnalysisOutput:
    benchmark = get_platform_benchmark(data.platform)
    trends = get_trends_for_niche(data.niche)
    pathways, viability_score = generate_monetization_pathways(data)

    next_quarter_focus = [
        f'Master "{trends[0].trend}" content format' if trends else "Optimize content performance",
        "Increase engagement rate to 5%+ for premium sponsorships",
        "Build engaged email list (1K+ minimum)",
        "Test and scale winning content formats",
    ]

    return EnhancedAnalysisOutput(
        fame_score=calculate_enhanced_fame_score(data),
        market_position=generate_market_position_analysis(
            data.niche, data.platform, data.followers, data.engagement_rate
        ),
        trend_opportunities=[t.trend for t in trends[:3]],
        competitive_advantage=analyze_competitive_advantage(data, benchmark),
        monetization_pathways=pathways,
        commercial_viability_score=viability_score,
        growth_recommendations=generate_growth_recommendations(data),
        risk_factors=identify_risk_factors(data, benchmark),
        next_quarter_focus=next_quarter_focus,
        estimated_income_projection=project_income_estimates(data),
    )
