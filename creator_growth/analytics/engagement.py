from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from creator_growth.core.scoring import round_half_up
from creator_growth.schemas.user_analytics import (
    AdminUserRow,
    UserAnalyticsSummary,
    UserDownloadRecord,
    UserQuizData,
)

POSTING_FREQUENCY_POINTS = {
    "daily": 20,
    "multiple_times": 18,
    "once": 15,
    "few_times": 12,
    "rarely": 5,
}
_DEFAULT_FREQUENCY_POINTS = 10
_NO_EXPERIENCE_POINTS = 5


def calculate_engagement_score(quiz: UserQuizData) -> int:
    score = 0.0
    score += min(30, (quiz.follower_count / 100000) * 30)
    score += min(35, quiz.engagement_rate * 100 * 3.5)
    score += POSTING_FREQUENCY_POINTS.get(quiz.posting_frequency, _DEFAULT_FREQUENCY_POINTS)
    experience = len(quiz.experience) * 3 if quiz.experience else _NO_EXPERIENCE_POINTS
    score += min(15, experience)
    return min(100, round_half_up(score))


def calculate_platform_distribution(quiz: UserQuizData) -> dict[str, int]:
    distribution: dict[str, int] = {}
    if quiz.primary_platform:
        distribution[quiz.primary_platform] = 1
    for platform in quiz.secondary_platforms:
        distribution[platform] = distribution.get(platform, 0) + 1
    return distribution


def total_download_size(downloads: Iterable[UserDownloadRecord]) -> int:
    return sum(item.file_size or 0 for item in downloads)


def build_user_summary(quiz: UserQuizData, downloads: list[UserDownloadRecord]) -> UserAnalyticsSummary:
    activity = [quiz.updated_at or quiz.created_at] + [item.downloaded_at for item in downloads]
    activity = [ts for ts in activity if ts is not None] or [datetime.now(timezone.utc)]
    return UserAnalyticsSummary(
        user_id=quiz.user_id,
        total_quizzes=1,
        total_downloads=len(downloads),
        total_download_size=total_download_size(downloads),
        last_activity_at=max(activity, key=lambda ts: ts.timestamp()),
        quiz_history=[quiz],
        download_history=downloads,
        engagement_score=calculate_engagement_score(quiz),
        platform_distribution=calculate_platform_distribution(quiz),
    )


def build_admin_row(quiz: UserQuizData, downloads: list[UserDownloadRecord]) -> AdminUserRow:
    return AdminUserRow(
        user_id=quiz.user_id,
        name=quiz.name,
        email=quiz.email,
        niche=quiz.niche,
        followers=quiz.follower_count,
        total_downloads=len(downloads),
        total_download_size=total_download_size(downloads),
        created_at=quiz.created_at,
        engagement_score=calculate_engagement_score(quiz),
    )
