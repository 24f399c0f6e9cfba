from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CompetitionLevel = Literal["low", "medium", "high", "unknown"]


@dataclass(frozen=True)
class CatalogProduct:
    product_id: str
    name: str
    commercial_score: int  # 0-100
    market_demand: Literal["high", "medium", "low"]
    monetization_potential: str
    target_audience: str
    time_to_monetize: str
    estimated_monthly_earnings: str
    competition_level: CompetitionLevel
    recommended_strategy: str
    market_trends: tuple[str, ...]


_PRODUCT_CATALOG: dict[str, CatalogProduct] = {
    product.product_id: product
    for product in (
        CatalogProduct(
            product_id="fame-score-report",
            name="Fame Score Report (Premium)",
            commercial_score=92,
            market_demand="high",
            monetization_potential="$99 per report | High conversion (15-20%)",
            target_audience="Aspiring creators (18-35 years old)",
            time_to_monetize="Immediate",
            estimated_monthly_earnings="$2,000-$5,000 (at 20+ sales/month)",
            competition_level="medium",
            recommended_strategy=(
                "Package as lead magnet -> Email nurture -> Upsell to premium tools. "
                "70% of buyers purchase additional products."
            ),
            market_trends=(
                "Creator economy tools trending 45% YoY",
                "Personal branding tools high demand",
                "DIY analytics tools replacing agency services",
            ),
        ),
        CatalogProduct(
            product_id="media-kit-template",
            name="Professional Media Kit Template",
            commercial_score=85,
            market_demand="high",
            monetization_potential="$49-$99 | Can be packaged with other products",
            target_audience="Professional creators, influencers (25-45 years old)",
            time_to_monetize="1-2 weeks",
            estimated_monthly_earnings="$1,000-$3,000 (at 20-30 sales/month)",
            competition_level="high",
            recommended_strategy=(
                "Bundle with branding package. Offer limited-time discount (30% off) to get initial traction. "
                "Price elasticity shows 35% price increase = 15% sales decrease."
            ),
            market_trends=(
                "Professional creator services trending",
                "B2B creator demand increasing",
                "Agencies prefer packaged services",
            ),
        ),
        CatalogProduct(
            product_id="growth-strategy-guide",
            name="30/90/365 Day Growth Strategy Guide",
            commercial_score=88,
            market_demand="high",
            monetization_potential="$29-$49 | High-volume seller (price-sensitive audience)",
            target_audience="New creators, micro-influencers (18-28 years old)",
            time_to_monetize="1-3 weeks",
            estimated_monthly_earnings="$1,500-$4,000 (at 50+ sales/month)",
            competition_level="high",
            recommended_strategy=(
                "Position as budget-friendly alternative. Use affiliate model - 40% commission to creators "
                "who promote. Can reach $5K/month at scale."
            ),
            market_trends=(
                "Growth hacking tools extremely popular",
                "Budget-friendly products preferred by Gen Z",
                "Email-based strategies gaining traction",
            ),
        ),
        CatalogProduct(
            product_id="monetization-calculator",
            name="AI-Powered Monetization Calculator",
            commercial_score=87,
            market_demand="high",
            monetization_potential="$19-$39 | Excellent for upselling",
            target_audience="Monetizing creators (20-45 years old)",
            time_to_monetize="Immediate",
            estimated_monthly_earnings="$800-$2,000 (at 30-50 sales/month)",
            competition_level="low",
            recommended_strategy=(
                "Use as lead magnet for email list. Free version captures emails -> Premium version ($39) = "
                "10-15% conversion. Follow-up emails generate $500/month per 1K emails."
            ),
            market_trends=(
                "Monetization tools high demand",
                "AI tools experiencing 150% growth in demand",
                "Creator economics gaining mainstream attention",
            ),
        ),
        CatalogProduct(
            product_id="analytics-tracker",
            name="Pro-Level Analytics Tracker (Spreadsheet)",
            commercial_score=79,
            market_demand="medium",
            monetization_potential="$29-$49 | Software alternative at fraction of cost",
            target_audience="Serious creators, micro-influencers (22-40 years old)",
            time_to_monetize="2-4 weeks",
            estimated_monthly_earnings="$600-$1,500 (at 20-30 sales/month)",
            competition_level="high",
            recommended_strategy=(
                "Position against expensive SaaS tools. Offer training webinar for $97 -> Include template free. "
                "20-25% of webinar attendees buy premium version."
            ),
            market_trends=(
                "DIY analytics preferred by budget-conscious creators",
                "Spreadsheet-based solutions trendy",
                "Data literacy becoming essential",
            ),
        ),
        CatalogProduct(
            product_id="content-calendar",
            name="AI Content Calendar & Planning System",
            commercial_score=81,
            market_demand="high",
            monetization_potential="$39-$79 | Recurring potential with monthly updates",
            target_audience="Busy creators, content teams (25-50 years old)",
            time_to_monetize="1-3 weeks",
            estimated_monthly_earnings="$1,200-$3,000 (at 30-40 sales/month + subscriptions)",
            competition_level="medium",
            recommended_strategy=(
                "Offer SaaS model: $29/month subscription. Lower initial price but recurring revenue. "
                "Average customer LTV = $300+ (12 months)."
            ),
            market_trends=(
                "Content planning tools growing 40% YoY",
                "Subscription models preferred",
                "AI-powered planning gaining traction",
            ),
        ),
        CatalogProduct(
            product_id="brand-positioning-workbook",
            name="Brand Positioning Interactive Workbook",
            commercial_score=83,
            market_demand="medium",
            monetization_potential="$47-$97 | Premium positioning",
            target_audience="Professional creators, personal brands (25-55 years old)",
            time_to_monetize="2-4 weeks",
            estimated_monthly_earnings="$700-$2,000 (at 15-20 sales/month)",
            competition_level="medium",
            recommended_strategy=(
                "Offer with 1-on-1 consultation upsell ($299-$499). 30-40% conversion to consultation. "
                "Consultation alone generates $4K-$8K/month."
            ),
            market_trends=(
                "Personal branding critical for creators",
                "Premium positioning products doing well",
                "Consultation bundling increasing average order value",
            ),
        ),
        CatalogProduct(
            product_id="affiliate-marketing-guide",
            name="Advanced Affiliate Marketing Guide for Creators",
            commercial_score=86,
            market_demand="high",
            monetization_potential="$37-$67 | High-volume potential",
            target_audience="Income-focused creators (20-40 years old)",
            time_to_monetize="1-2 weeks",
            estimated_monthly_earnings="$1,500-$4,000 (at 40-60 sales/month)",
            competition_level="high",
            recommended_strategy=(
                "Create YouTube course review ($397) to drive this sales. 5-8% of course buyers purchase guide. "
                "YT channel generating $2K/month at scale."
            ),
            market_trends=(
                "Affiliate marketing hottest creator income source",
                "High demand for affiliate strategies",
                "Passive income focus trending",
            ),
        ),
    )
}


def get_product(product_id: str) -> CatalogProduct | None:
    return _PRODUCT_CATALOG.get(product_id)


def list_products() -> tuple[CatalogProduct, ...]:
    return tuple(_PRODUCT_CATALOG.values())
