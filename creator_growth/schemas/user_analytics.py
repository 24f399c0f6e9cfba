from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class UserQuizData(BaseModel):
    user_id: str = Field(min_length=1, max_length=200)
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    phone: str | None = None
    age: int | None = Field(default=None, ge=0, le=120)
    city: str | None = None
    primary_platform: str = ""
    secondary_platforms: list[str] = Field(default_factory=list)
    follower_count: int = Field(default=0, ge=0)
    engagement_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    niche: str = ""
    content_type: str = ""
    posting_frequency: str = ""
    experience: list[str] = Field(default_factory=list)
    monthly_income: str | None = None
    biggest_challenge: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    social_links: dict[str, str] = Field(default_factory=dict)
    bio: str | None = None
    language: Literal["english", "hindi"] = "english"
    analysis_data: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CaptureQuizDataRequest(BaseModel):
    quiz_data: UserQuizData


class CaptureQuizDataResponse(BaseModel):
    success: bool
    user_id: str
    message: str


class CaptureDownloadRequest(BaseModel):
    user_id: str = Field(min_length=1, max_length=200)
    download_type: str = Field(min_length=1, max_length=100)
    file_name: str = Field(min_length=1, max_length=300)
    product_id: str | None = None
    file_size: int | None = Field(default=None, ge=0)


class UserDownloadRecord(BaseModel):
    id: str
    user_id: str
    download_type: str
    file_name: str
    downloaded_at: datetime
    product_id: str | None = None
    file_size: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class CaptureDownloadResponse(BaseModel):
    success: bool
    download_id: str
    message: str


class UserAnalyticsSummary(BaseModel):
    user_id: str
    total_quizzes: int
    total_downloads: int
    total_download_size: int
    last_activity_at: datetime
    quiz_history: list[UserQuizData]
    download_history: list[UserDownloadRecord]
    engagement_score: int = Field(ge=0, le=100)
    platform_distribution: dict[str, int]


class GetUserAnalyticsResponse(BaseModel):
    success: bool
    analytics: UserAnalyticsSummary
    message: str


class AdminUserRow(BaseModel):
    user_id: str
    name: str
    email: str
    niche: str
    followers: int
    total_downloads: int
    total_download_size: int
    created_at: datetime | None = None
    engagement_score: int


class AdminUsersResponse(BaseModel):
    success: bool
    total_users: int
    users: list[AdminUserRow]


class AnalysisRunSummary(BaseModel):
    created_at: datetime
    agent_id: str
    user_id: str
    niche: str | None = None
    platform: str | None = None
    fame_score: int


class AnalysisHistoryResponse(BaseModel):
    success: bool
    user_id: str
    runs: list[AnalysisRunSummary]
