import logging

from fastapi import APIRouter, HTTPException, Request, status

from creator_growth.ai.errors import NoProviderConfigured
from creator_growth.core.rate_limit import rate_limit
from creator_growth.schemas.analysis import AnalysisRequest, AnalysisResult
from creator_growth.services.analysis_service import run_analysis

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ai-agent-analysis", response_model=AnalysisResult)
@rate_limit()
async def ai_agent_analysis(request: Request, payload: AnalysisRequest):
    _ = request
    try:
        return await run_analysis(payload)
    except NoProviderConfigured as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Analysis failed", "code": exc.code, "message": str(exc)},
        ) from exc
