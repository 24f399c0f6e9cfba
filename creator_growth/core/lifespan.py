from contextlib import asynccontextmanager
import logging

from creator_growth.analytics.db import init_db
from creator_growth.ai.config import get_available_providers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    try:
        init_db()
    except Exception as exc:  # pragma: no cover - storage must not block startup
        logger.warning("persistence_init_failed: %s", exc)

    providers = get_available_providers()
    if providers:
        logger.info("ai_providers_available names=%s", [p.name for p in providers])
    else:
        logger.warning("ai_providers_missing: set OPENAI_API_KEY, ANTHROPIC_API_KEY or GOOGLE_API_KEY")
    yield
