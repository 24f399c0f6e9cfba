from .market import (
    MarketTrend,
    MonetizationChannel,
    PlatformBenchmark,
    get_monetization_channels,
    get_platform_benchmark,
    get_trends_for_niche,
    known_niches,
)
from .products import CatalogProduct, get_product, list_products
from .research_defaults import (
    DEFAULT_COMPETITORS,
    DEFAULT_INSIGHTS,
    DEFAULT_TRENDS,
    FALLBACK_INSIGHTS,
    FALLBACK_OPPORTUNITIES,
    CannedCompetitor,
    CannedOpportunity,
    default_opportunities,
)

__all__ = [
    "CannedCompetitor",
    "CannedOpportunity",
    "CatalogProduct",
    "DEFAULT_COMPETITORS",
    "DEFAULT_INSIGHTS",
    "DEFAULT_TRENDS",
    "FALLBACK_INSIGHTS",
    "FALLBACK_OPPORTUNITIES",
    "MarketTrend",
    "MonetizationChannel",
    "PlatformBenchmark",
    "default_opportunities",
    "get_monetization_channels",
    "get_platform_benchmark",
    "get_product",
    "get_trends_for_niche",
    "known_niches",
    "list_products",
]
