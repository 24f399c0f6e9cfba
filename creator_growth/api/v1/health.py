from fastapi import APIRouter

from creator_growth.ai.config import get_available_providers

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {
        "status": "healthy",
        "ai_providers": [provider.name for provider in get_available_providers()],
    }
