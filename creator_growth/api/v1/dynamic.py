from fastapi import APIRouter, Request

from creator_growth.core.rate_limit import rate_limit
from creator_growth.schemas.dynamic import DynamicAnalysisInput, EnhancedAnalysisOutput
from creator_growth.services.dynamic_analysis import generate_dynamic_analysis

router = APIRouter()


@router.post("/dynamic-analysis", response_model=EnhancedAnalysisOutput)
@rate_limit()
async def dynamic_analysis(request: Request, payload: DynamicAnalysisInput):
    _ = request
    return generate_dynamic_analysis(payload)
