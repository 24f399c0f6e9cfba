from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

Demand = Literal["high", "medium", "low"]
Difficulty = Literal["easy", "medium", "hard"]


@dataclass(frozen=True)
class MarketTrend:
    trend: str
    relevance: int  # 0-100
    platform: str
    growth_rate: int  # percent
    description: str
    source: str


@dataclass(frozen=True)
class PlatformBenchmark:
    niche: str
    platform: str
    avg_followers: int
    avg_engagement_rate: float
    avg_monthly_earnings: str
    top_strategies: tuple[str, ...]


@dataclass(frozen=True)
class MonetizationChannel:
    type: str
    estimated_earnings: str
    requirements: tuple[str, ...]
    platform: str
    difficulty: Difficulty
    time_to_monetize: str
    description: str
    current_demand: Demand


_TRENDS_BY_NICHE: dict[str, tuple[MarketTrend, ...]] = {
    "Beauty & Skincare": (
        MarketTrend(
            trend="Clean Beauty & Sustainability",
            relevance=95,
            platform="Instagram",
            growth_rate=45,
            description=(
                "Eco-friendly and sustainable beauty products gaining massive traction. "
                "Creators focused on clean ingredients see 5-10x higher engagement."
            ),
            source="Instagram Trends Q1 2024",
        ),
        MarketTrend(
            trend="Micro-transactions & Affiliate Marketing",
            relevance=88,
            platform="TikTok",
            growth_rate=38,
            description=(
                "Small-ticket beauty items selling via affiliate links. "
                "Average commission $2-5 per sale but volume makes it lucrative."
            ),
            source="TikTok Commerce Data",
        ),
        MarketTrend(
            trend="AI-Powered Skincare Analysis",
            relevance=82,
            platform="Instagram",
            growth_rate=52,
            description=(
                "AR filters for virtual skincare consultations. "
                "Creators offering AI-based skin analysis getting 3x engagement boost."
            ),
            source="Meta Insights",
        ),
    ),
    "Fitness & Wellness": (
        MarketTrend(
            trend="Micro-workouts & Time-Efficient Routines",
            relevance=92,
            platform="TikTok",
            growth_rate=41,
            description=(
                "7-10 minute workouts trending. High completion rate leads to better "
                "algorithm push and subscriber retention."
            ),
            source="TikTok Analytics 2024",
        ),
        MarketTrend(
            trend="Mental Health & Recovery Content",
            relevance=89,
            platform="YouTube",
            growth_rate=36,
            description=(
                "Mental wellness combined with fitness seeing unprecedented growth. "
                "Higher CPM rates on YouTube ($8-12 vs $4-6)."
            ),
            source="YouTube Creator Trends",
        ),
        MarketTrend(
            trend="Holistic Nutrition & Meal Planning",
            relevance=85,
            platform="Instagram",
            growth_rate=33,
            description=(
                "Personalized meal plans and nutrition coaching. "
                "Average revenue $500-2000 per coaching client per month."
            ),
            source="Instagram DM Commerce Data",
        ),
    ),
    "Tech & Gadgets": (
        MarketTrend(
            trend="AI Tools & Automation Reviews",
            relevance=96,
            platform="YouTube",
            growth_rate=58,
            description=(
                "AI tool reviews getting 2-3M views per video. "
                "Affiliate commissions $100-500 per conversion."
            ),
            source="YouTube Creator Analytics",
        ),
        MarketTrend(
            trend="Sustainability & E-waste Solutions",
            relevance=87,
            platform="TikTok",
            growth_rate=44,
            description=(
                "Eco-friendly tech and refurbished devices trending. "
                "B2B partnerships with tech brands more lucrative than usual."
            ),
            source="Gen Z Trend Report 2024",
        ),
        MarketTrend(
            trend="Crypto & Web3 Explainers",
            relevance=75,
            platform="YouTube",
            growth_rate=28,
            description=(
                "Simplified crypto education gaining audience. "
                "Variable monetization but high sponsorship rates."
            ),
            source="YouTube Search Trends",
        ),
    ),
    "Lifestyle & Fashion": (
        MarketTrend(
            trend="Sustainable & Thrift Fashion",
            relevance=93,
            platform="Instagram",
            growth_rate=47,
            description=(
                "Thrifting hauls and sustainable fashion. "
                "Affiliate links to thrift platforms generating $1-2K monthly."
            ),
            source="Instagram Shopping Trends",
        ),
        MarketTrend(
            trend="Personal Styling & Body Positivity",
            relevance=91,
            platform="TikTok",
            growth_rate=42,
            description=(
                "All-body fashion and inclusive styling services. "
                "One-on-one consultations commanding $50-200 per session."
            ),
            source="TikTok Commerce Analytics",
        ),
        MarketTrend(
            trend="Luxury Dupes & Budget Fashion",
            relevance=88,
            platform="YouTube",
            growth_rate=39,
            description=(
                "Finding luxury alternatives at budget prices. "
                "High click-through rates on affiliate links (8-12%)."
            ),
            source="YouTube Fashion Analytics",
        ),
    ),
    "Food & Cooking": (
        MarketTrend(
            trend="Quick & Healthy Meal Prep",
            relevance=94,
            platform="TikTok",
            growth_rate=48,
            description=(
                "5-10 minute healthy meals trend. Video completion rate >90%, "
                "ideal for algorithm. CPM: $6-10."
            ),
            source="TikTok Food Category Trends",
        ),
        MarketTrend(
            trend="Ethnic & Heritage Cuisines",
            relevance=89,
            platform="YouTube",
            growth_rate=35,
            description=(
                "Traditional recipes gaining mainstream appeal. "
                "25-40M views for viral videos. Sponsorship: $5K-20K."
            ),
            source="YouTube Cooking Channel Analytics",
        ),
        MarketTrend(
            trend="Mukbang & ASMR Food Content",
            relevance=86,
            platform="YouTube",
            growth_rate=32,
            description=(
                "ASMR eating content high retention. Average watch time 15+ minutes. "
                "CPM: $8-15 (higher than average)."
            ),
            source="YouTube Watch Time Analytics",
        ),
    ),
}

_PLATFORM_BENCHMARKS: dict[str, PlatformBenchmark] = {
    "Instagram": PlatformBenchmark(
        niche="Average Across All Niches",
        platform="Instagram",
        avg_followers=150000,
        avg_engagement_rate=0.035,
        avg_monthly_earnings="$2,000-$5,000",
        top_strategies=(
            "Consistent posting 3-5x weekly",
            "Carousel posts for higher engagement",
            "Influencer collaborations",
            "Affiliate marketing",
            "Sponsored posts",
        ),
    ),
    "YouTube": PlatformBenchmark(
        niche="Average Across All Niches",
        platform="YouTube",
        avg_followers=250000,
        avg_engagement_rate=0.045,
        avg_monthly_earnings="$3,000-$8,000",
        top_strategies=(
            "Consistent weekly uploads",
            "SEO optimization for titles/descriptions",
            "Longer videos (15+ min) for higher CPM",
            "Sponsorships and brand deals",
            "Affiliate marketing in video descriptions",
        ),
    ),
    "TikTok": PlatformBenchmark(
        niche="Average Across All Niches",
        platform="TikTok",
        avg_followers=500000,
        avg_engagement_rate=0.065,
        avg_monthly_earnings="$1,500-$4,000",
        top_strategies=(
            "Daily posting for algorithm boost",
            "Trending sounds and challenges",
            "Cross-posting with other platforms",
            "TikTok Shop integration",
            "Brand deals (higher for 1M+ followers)",
        ),
    ),
}

_MONETIZATION_CHANNELS: tuple[MonetizationChannel, ...] = (
    MonetizationChannel(
        type="YouTube AdSense",
        estimated_earnings="$500-$3,000/month",
        requirements=("1,000 subscribers", "4,000 watch hours in 12 months"),
        platform="YouTube",
        difficulty="medium",
        time_to_monetize="3-6 months",
        description="Earn from video ads. CPM varies $2-10 based on audience location.",
        current_demand="high",
    ),
    MonetizationChannel(
        type="Sponsorships & Brand Deals",
        estimated_earnings="$1,000-$50,000/deal",
        requirements=("50K+ followers", "Established niche", "Engaged audience"),
        platform="All",
        difficulty="hard",
        time_to_monetize="1-3 months",
        description="Partner with brands for paid promotions. Rates: $100-500+ per 100K followers.",
        current_demand="high",
    ),
    MonetizationChannel(
        type="Affiliate Marketing",
        estimated_earnings="$200-$2,000/month",
        requirements=("10K+ followers", "Content marketing skills"),
        platform="All",
        difficulty="easy",
        time_to_monetize="1-2 weeks",
        description="Earn commissions (2-20%) from product recommendations. Average commission $2-50 per sale.",
        current_demand="high",
    ),
    MonetizationChannel(
        type="Digital Products (Courses/Templates)",
        estimated_earnings="$500-$5,000/month",
        requirements=("Expertise", "20K+ followers", "Email list"),
        platform="All",
        difficulty="hard",
        time_to_monetize="2-4 months",
        description="Sell online courses, templates, presets. 40-60% profit margins. Average price $27-97.",
        current_demand="high",
    ),
    MonetizationChannel(
        type="Patreon/Membership",
        estimated_earnings="$500-$3,000/month",
        requirements=("Consistent content", "30K+ followers"),
        platform="All",
        difficulty="medium",
        time_to_monetize="2-3 months",
        description="Monthly subscription model. Average member pays $5-15/month for exclusive content.",
        current_demand="medium",
    ),
    MonetizationChannel(
        type="Consulting & Coaching",
        estimated_earnings="$1,000-$10,000/month",
        requirements=("Proven expertise", "Portfolio", "50K+ followers"),
        platform="All",
        difficulty="hard",
        time_to_monetize="1 month",
        description="1-on-1 consulting. Average rate $50-500 per session (1-2 hours).",
        current_demand="medium",
    ),
)

_DEMAND_SCORE = {"high": 3, "medium": 2, "low": 1}
_EASE_SCORE = {"easy": 3, "medium": 2, "hard": 1}
_FOLLOWER_REQUIREMENT_RE = re.compile(r"(\d+)K\+\s+followers", re.IGNORECASE)


def known_niches() -> tuple[str, ...]:
    return tuple(_TRENDS_BY_NICHE)


def get_trends_for_niche(niche: str) -> tuple[MarketTrend, ...]:
    """Trends for the first catalog niche whose name contains `niche` (case-insensitive)."""
    needle = (niche or "").strip().lower()
    if not needle:
        return ()
    for name, trends in _TRENDS_BY_NICHE.items():
        if needle in name.lower():
            return trends
    return ()


def get_platform_benchmark(platform: str) -> PlatformBenchmark:
    return _PLATFORM_BENCHMARKS.get(platform, _PLATFORM_BENCHMARKS["Instagram"])


def _min_followers(channel: MonetizationChannel) -> int:
    for requirement in channel.requirements:
        match = _FOLLOWER_REQUIREMENT_RE.search(requirement)
        if match:
            return int(match.group(1)) * 1000
    return 0


def get_monetization_channels(followers: int) -> list[MonetizationChannel]:
    """Channels whose follower requirement is met, easiest high-demand first."""
    eligible = [channel for channel in _MONETIZATION_CHANNELS if followers >= _min_followers(channel)]
    return sorted(
        eligible,
        key=lambda channel: _DEMAND_SCORE[channel.current_demand] + _EASE_SCORE[channel.difficulty],
        reverse=True,
    )
