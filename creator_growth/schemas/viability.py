from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MonetizationGoal = Literal["immediate", "growth", "premium"]


class ProductViability(BaseModel):
    product_id: str
    name: str
    commercial_score: int = Field(ge=0, le=100)
    market_demand: Literal["high", "medium", "low"]
    monetization_potential: str
    target_audience: str
    time_to_monetize: str
    estimated_monthly_earnings: str
    competition_level: Literal["low", "medium", "high", "unknown"]
    recommended_strategy: str
    market_trends: list[str] = Field(default_factory=list)


class DownloadCount(BaseModel):
    product_id: str = Field(min_length=1, max_length=200)
    count: int = Field(ge=0)


class CommercialReportRequest(BaseModel):
    downloads: list[DownloadCount] = Field(min_length=1, max_length=100)
    niche: str = ""


class CommercialReport(BaseModel):
    top_products: list[ProductViability]
    total_potential_monthly: str
    recommended_strategy: str
    market_opportunities: list[str]


class ViableProductsRequest(BaseModel):
    niche: str = ""
    followers: int = Field(default=0, ge=0)
    engagement_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    monetization_goal: MonetizationGoal = "immediate"
