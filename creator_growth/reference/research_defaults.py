from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CannedCompetitor:
    name: str
    followers: int
    avg_engagement: float
    monetization_strategy: str


@dataclass(frozen=True)
class CannedOpportunity:
    type: str
    estimated_earnings: str
    requirements: tuple[str, ...]


DEFAULT_TRENDS: tuple[str, ...] = (
    "Short-form vertical video content leading engagement",
    "AI-powered content personalization gaining traction",
    "Live streaming for community building",
    "Micro-moments content strategy",
)

DEFAULT_COMPETITORS: tuple[CannedCompetitor, ...] = (
    CannedCompetitor(
        name="Market Leader 1",
        followers=500000,
        avg_engagement=8.5,
        monetization_strategy="Brand partnerships + Affiliate marketing",
    ),
    CannedCompetitor(
        name="Market Leader 2",
        followers=300000,
        avg_engagement=7.2,
        monetization_strategy="Course sales + Sponsorships",
    ),
)

DEFAULT_INSIGHTS: tuple[str, ...] = (
    "Market demand is growing 25% YoY in this niche",
    "Audience retention is more important than raw follower count",
    "Authentic content outperforms highly produced content",
    "Community engagement drives algorithmic reach",
    "Cross-platform presence increases monetization opportunities",
)

# Served whole when a research round fails.
FALLBACK_OPPORTUNITIES: tuple[CannedOpportunity, ...] = (
    CannedOpportunity(
        type="Brand Partnerships",
        estimated_earnings="$500-2000 per post",
        requirements=("Minimum 10k followers", "2-5% engagement rate"),
    ),
)

FALLBACK_INSIGHTS: tuple[str, ...] = (
    "Creator economy growing at 20% YoY",
    "Niche creators outperform generalists",
    "Community building is key to retention",
)


def default_opportunities(followers: int) -> tuple[CannedOpportunity, ...]:
    """Follower-scaled opportunities used when a monetization response has none."""
    followers = max(0, int(followers))
    return (
        CannedOpportunity(
            type="Brand Partnerships",
            estimated_earnings=f"${min(500, followers // 20)}-${min(2000, followers // 5)} per post",
            requirements=("Minimum 10k followers", "Consistent posting", "2-5% engagement rate"),
        ),
        CannedOpportunity(
            type="Affiliate Marketing",
            estimated_earnings="$200-1000 per month",
            requirements=("Engaged audience", "Relevant products", "Trust built with audience"),
        ),
        CannedOpportunity(
            type="Sponsorships",
            estimated_earnings=f"${min(1000, followers // 10)}-${min(5000, followers // 2)} per month",
            requirements=("50k+ followers preferred", "Niche relevance", "Professional media kit"),
        ),
    )
