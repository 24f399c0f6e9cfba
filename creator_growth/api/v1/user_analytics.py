import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from creator_growth.analytics.db import get_analysis_runs
from creator_growth.analytics.engagement import build_admin_row, build_user_summary
from creator_growth.analytics.repository import (
    DownloadRepository,
    PersistenceFailed,
    QuizRepository,
    default_download_repository,
    default_quiz_repository,
    new_download_id,
)
from creator_growth.core.security import check_admin_key
from creator_growth.schemas.user_analytics import (
    AdminUsersResponse,
    AnalysisHistoryResponse,
    AnalysisRunSummary,
    CaptureDownloadRequest,
    CaptureDownloadResponse,
    CaptureQuizDataRequest,
    CaptureQuizDataResponse,
    GetUserAnalyticsResponse,
    UserDownloadRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_quiz_repository() -> QuizRepository:
    return default_quiz_repository()


def get_download_repository() -> DownloadRepository:
    return default_download_repository()


def get_analysis_db_path() -> str | None:
    return None


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_admin_key(x_api_key)


def _storage_error(exc: PersistenceFailed) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"code": exc.code, "message": str(exc)},
    )


@router.post("/user-analytics/quiz", response_model=CaptureQuizDataResponse)
def capture_quiz_data(
    payload: CaptureQuizDataRequest,
    quizzes: QuizRepository = Depends(get_quiz_repository),
):
    try:
        stored = quizzes.save(payload.quiz_data)
    except PersistenceFailed as exc:
        raise _storage_error(exc) from exc
    logger.info("quiz_captured user_id=%s", stored.user_id)
    return CaptureQuizDataResponse(
        success=True,
        user_id=stored.user_id,
        message="Quiz data captured successfully",
    )


@router.post("/user-analytics/download", response_model=CaptureDownloadResponse)
def capture_download(
    request: Request,
    payload: CaptureDownloadRequest,
    downloads: DownloadRepository = Depends(get_download_repository),
):
    now = datetime.now(timezone.utc)
    record = UserDownloadRecord(
        id=new_download_id(payload.user_id),
        user_id=payload.user_id,
        download_type=payload.download_type,
        file_name=payload.file_name,
        product_id=payload.product_id,
        file_size=payload.file_size,
        downloaded_at=now,
        metadata={
            "downloaded_at": now.isoformat(),
            "user_agent": request.headers.get("user-agent"),
        },
    )
    try:
        downloads.save(record)
    except PersistenceFailed as exc:
        raise _storage_error(exc) from exc
    logger.info("download_tracked user_id=%s file=%s", record.user_id, record.file_name)
    return CaptureDownloadResponse(
        success=True,
        download_id=record.id,
        message="Download tracked successfully",
    )


@router.get("/user-analytics/admin/all", response_model=AdminUsersResponse)
def all_users_analytics(
    _: None = Depends(_auth),
    quizzes: QuizRepository = Depends(get_quiz_repository),
    downloads: DownloadRepository = Depends(get_download_repository),
):
    rows = [build_admin_row(quiz, downloads.get_by_user_id(quiz.user_id)) for quiz in quizzes.list_all()]
    logger.info("admin_analytics_listed users=%s", len(rows))
    return AdminUsersResponse(success=True, total_users=len(rows), users=rows)


@router.get("/user-analytics/{user_id}/analyses", response_model=AnalysisHistoryResponse)
def analysis_history(
    user_id: str,
    limit: int = Query(default=20, ge=1, le=100),
    db_path: str | None = Depends(get_analysis_db_path),
):
    runs = get_analysis_runs(user_id, limit=limit, db_path=db_path)
    return AnalysisHistoryResponse(
        success=True,
        user_id=user_id,
        runs=[AnalysisRunSummary(**run) for run in runs],
    )


@router.get("/user-analytics/{user_id}", response_model=GetUserAnalyticsResponse)
def user_analytics(
    user_id: str,
    quizzes: QuizRepository = Depends(get_quiz_repository),
    downloads: DownloadRepository = Depends(get_download_repository),
):
    quiz = quizzes.get_by_user_id(user_id)
    if quiz is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No data found for user: {user_id}",
        )
    summary = build_user_summary(quiz, downloads.get_by_user_id(user_id))
    return GetUserAnalyticsResponse(
        success=True,
        analytics=summary,
        message="User analytics retrieved successfully",
    )
