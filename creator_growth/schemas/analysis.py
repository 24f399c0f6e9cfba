from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TimeToMonetize = Literal["immediate", "short-term", "long-term"]
AnalysisType = Literal["comprehensive", "trend", "monetization", "competitive"]


class CreatorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", max_length=200)
    niche: str = Field(min_length=1, max_length=200)
    platform: str = Field(min_length=1, max_length=100)
    followers: int = Field(ge=0)
    engagement_rate: float = Field(ge=0.0, le=1.0)
    monthly_views: int = Field(default=0, ge=0)
    content: str = Field(default="", max_length=4000)
    goals: str = Field(default="", max_length=4000)
    challenges: str = Field(default="", max_length=4000)


class AnalysisRequest(BaseModel):
    user_id: str = Field(min_length=1, max_length=200)
    creator_profile: CreatorProfile
    analysis_type: AnalysisType = "comprehensive"


class AdaptationFactors(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_tolerance: float = Field(ge=1.0, le=10.0)
    time_to_monetize: TimeToMonetize
    content_quality: float = Field(ge=1.0, le=10.0)
    community_engagement: float = Field(ge=1.0, le=10.0)


class PersonalizationProfile(BaseModel):
    user_id: str
    agent_id: str
    creator_profile: CreatorProfile
    personality_score: str
    adaptation_factors: AdaptationFactors


class Competitor(BaseModel):
    name: str
    followers: int
    avg_engagement: float
    monetization_strategy: str


class CompetitorAnalysis(BaseModel):
    top_competitors: list[Competitor] = Field(default_factory=list)


class MonetizationOpportunity(BaseModel):
    type: str
    estimated_earnings: str
    requirements: list[str] = Field(default_factory=list)


class MarketResearchData(BaseModel):
    trends: list[str] = Field(min_length=1)
    competitor_analysis: CompetitorAnalysis
    monetization_opportunities: list[MonetizationOpportunity] = Field(min_length=1)
    industry_insights: list[str] = Field(min_length=1)


class GrowthPlan(BaseModel):
    next_month: list[str] = Field(min_length=4, max_length=4)
    next_quarter: list[str] = Field(min_length=4, max_length=4)
    next_year: list[str] = Field(min_length=4, max_length=4)


class AnalysisBody(BaseModel):
    fame_score: int = Field(ge=0, le=100)
    market_position: str
    key_insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    trend_analysis: str
    competitive_advantage: str
    monetization_strategy: str


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_id: str
    user_id: str
    analysis: AnalysisBody
    market_research: MarketResearchData
    growth_plan: GrowthPlan
    pdf_url: str | None = None
    generated_at: datetime
