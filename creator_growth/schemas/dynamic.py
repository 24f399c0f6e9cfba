from __future__ import annotations

from pydantic import BaseModel, Field


class DynamicAnalysisInput(BaseModel):
    name: str = ""
    niche: str = Field(min_length=1, max_length=200)
    platform: str = Field(min_length=1, max_length=100)
    followers: int = Field(ge=0)
    engagement_rate: float = Field(ge=0.0, le=1.0)
    monthly_views: int = Field(default=0, ge=0)
    experience: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    content_type: str = ""
    posting_frequency: str = ""


class IncomeProjection(BaseModel):
    conservative: str
    realistic: str
    optimistic: str


class EnhancedAnalysisOutput(BaseModel):
    fame_score: int = Field(ge=0, le=100)
    market_position: str
    trend_opportunities: list[str]
    competitive_advantage: str
    monetization_pathways: list[str]
    commercial_viability_score: int = Field(ge=0, le=100)
    growth_recommendations: list[str]
    risk_factors: list[str]
    next_quarter_focus: list[str]
    estimated_income_projection: IncomeProjection
