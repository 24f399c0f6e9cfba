import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from creator_growth.api.v1.health import router as health_router
from creator_growth.api.v1.analysis import router as analysis_router
from creator_growth.api.v1.dynamic import router as dynamic_router
from creator_growth.api.v1.user_analytics import router as user_analytics_router
from creator_growth.api.v1.viability import router as viability_router
from creator_growth.api.v1.payments import router as payments_router
from creator_growth.core.cors import cors_allow_origin_regex, cors_allowed_origins
from creator_growth.core.rate_limit import limiter
from creator_growth.core.config import settings
from dotenv import load_dotenv
from creator_growth.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Creator Growth API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(analysis_router, prefix="/v1", tags=["Analysis"])
app.include_router(dynamic_router, prefix="/v1", tags=["Analysis"])
app.include_router(user_analytics_router, prefix="/v1", tags=["User Analytics"])
app.include_router(viability_router, prefix="/v1", tags=["Viability"])
app.include_router(payments_router, prefix="/v1", tags=["Payments"])
