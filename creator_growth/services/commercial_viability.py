from __future__ import annotations

import re
from dataclasses import asdict
from typing import Iterable

from creator_growth.core.scoring import get_scoring_value
from creator_growth.reference import CatalogProduct, get_product, list_products
from creator_growth.schemas.viability import (
    CommercialReport,
    DownloadCount,
    MonetizationGoal,
    ProductViability,
)

_NON_DIGIT_RE = re.compile(r"\D")
_REPORT_ENGAGEMENT = 0.75


def _from_catalog(product: CatalogProduct, score: int) -> ProductViability:
    data = asdict(product)
    data["commercial_score"] = score
    data["market_trends"] = list(product.market_trends)
    return ProductViability(**data)


def unknown_product(product_id: str) -> ProductViability:
    return ProductViability(
        product_id=product_id,
        name="Unknown Product",
        commercial_score=0,
        market_demand="low",
        monetization_potential="Unable to assess",
        target_audience="Unknown",
        time_to_monetize="Unknown",
        estimated_monthly_earnings="$0",
        competition_level="unknown",
        recommended_strategy="Product not found in database",
        market_trends=[],
    )


def calculate_commercial_viability(product_id: str, download_count: int, engagement: float) -> ProductViability:
    product = get_product(product_id)
    if product is None:
        return unknown_product(product_id)

    bonus = int(get_scoring_value("viability.download_bonus", 5))
    score = product.commercial_score
    for threshold in get_scoring_value("viability.download_bonus_thresholds", [100, 500]):
        if download_count > int(threshold):
            score += bonus
    if engagement > float(get_scoring_value("viability.engagement_threshold", 0.7)):
        score += int(get_scoring_value("viability.engagement_bonus", 5))

    return _from_catalog(product, min(100, score))


def _matches_goal(product: CatalogProduct, goal: MonetizationGoal) -> bool:
    if goal == "immediate":
        return "Immediate" in product.time_to_monetize or "1-2 weeks" in product.time_to_monetize
    if goal == "growth":
        return "week" in product.time_to_monetize
    return product.market_demand == "high"


def get_viable_products_for_creator(
    niche: str,
    followers: int,
    engagement_rate: float,
    monetization_goal: MonetizationGoal,
) -> list[ProductViability]:
    matches = [product for product in list_products() if _matches_goal(product, monetization_goal)]
    matches.sort(key=lambda product: product.commercial_score, reverse=True)
    return [_from_catalog(product, product.commercial_score) for product in matches[:5]]


def _minimum_monthly_earnings(product: ProductViability) -> int:
    digits = _NON_DIGIT_RE.sub("", product.estimated_monthly_earnings.split("-")[0])
    return int(digits) if digits else 0


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def generate_commercial_report(downloads: list[DownloadCount], niche: str) -> CommercialReport:
    products = [
        calculate_commercial_viability(item.product_id, item.count, _REPORT_ENGAGEMENT)
        for item in downloads
    ]
    products.sort(key=lambda product: product.commercial_score, reverse=True)

    potential = sum(_minimum_monthly_earnings(product) for product in products)
    leaders = " + ".join(product.name for product in products[:2])
    lead_strategy = products[0].recommended_strategy if products else ""
    opportunities = _dedupe(trend for product in products[:3] for trend in product.market_trends)

    return CommercialReport(
        top_products=products[:5],
        total_potential_monthly=f"${potential:,}-${int(potential * 1.5):,}/month",
        recommended_strategy=f"Focus on: {leaders}. {lead_strategy}".strip(),
        market_opportunities=opportunities[:5],
    )
