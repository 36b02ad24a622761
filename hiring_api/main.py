"""FastAPI main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from hiring_api.core.config import settings
from hiring_api.core.middleware import setup_middleware
from hiring_api.core.rate_limiter import limiter
from hiring_api.core.exceptions import (
    HiringApiError, FeatureDisabledError, RoleNotFoundError,
)
from hiring_api.core.features import get_feature_flags
from hiring_api.schemas.schemas import HealthResponse

from hiring_api.api.roles import router as roles_router
from hiring_api.api.hiring import router as hiring_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("hiring_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting %s", settings.APP_NAME)
    logger.info(
        "Role expiration: %s months, features: %s",
        settings.ROLE_EXPIRATION_MONTHS,
        get_feature_flags().as_dict(),
    )

    yield

    logger.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    description="Job role postings with expiration and an optional approval workflow",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Middleware
setup_middleware(app)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(FeatureDisabledError)
async def feature_disabled_handler(request: Request, exc: FeatureDisabledError):
    logger.info("Feature %s disabled: %s %s", exc.feature, request.method, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


@app.exception_handler(RoleNotFoundError)
async def not_found_handler(request: Request, exc: RoleNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )


# Exception handler for remaining API errors (validation, conflicts)
@app.exception_handler(HiringApiError)
async def hiring_exception_handler(request: Request, exc: HiringApiError):
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message},
    )


# Register routers
app.include_router(roles_router, prefix=settings.API_PREFIX)
app.include_router(hiring_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


@app.get("/healthz", response_model=HealthResponse)
async def healthz():
    """Liveness probe."""
    return HealthResponse(status="ok")
