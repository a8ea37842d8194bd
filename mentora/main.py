"""
Mentora FastAPI Application Entry Point.

Run with: uvicorn mentora.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from mentora.api.deps import get_completion_gateway
from mentora.api.routes import (
    auth,
    chat,
    groups,
    notifications,
    settings as settings_routes,
    story,
    uploads,
    users,
)
from mentora.config import get_settings, sanitize_error
from mentora.stores.models import utcnow

settings = get_settings()
logger = logging.getLogger(__name__)

FEATURES = ["google_auth", "ai_lecturers", "image_generation", "voice_synthesis", "group_management"]
ACTIVE_FEATURES = ["chat", "upload", "groups", "voice", "lecturers", "notifications"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown."""
    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "%s starting (completion provider %s)",
        settings.app_name,
        "configured" if settings.provider_configured else "missing key, fallback mode",
    )
    yield
    await get_completion_gateway().close()


app = FastAPI(
    title=settings.app_name,
    description="AI lecturer personas, storytelling and study groups",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# ERROR HANDLERS
# =============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed fields are client errors (400), not 422."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": f"{field}: {message}" if field else message,
            "details": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                for e in errors
            ],
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal server error",
            "details": sanitize_error(exc),
        },
    )


# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(chat.router, prefix="/api")
app.include_router(story.router, prefix="/api")
app.include_router(groups.router, prefix="/api")
app.include_router(notifications.router, prefix="/api")
app.include_router(settings_routes.router, prefix="/api")
app.include_router(uploads.router, prefix="/api")


@app.get("/")
async def root() -> dict:
    """Service banner."""
    return {
        "message": f"{settings.app_name} - Enhanced AI Learning Platform",
        "status": "operational",
        "features": FEATURES,
        "version": settings.app_version,
    }


@app.get("/api/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "alleai": "connected" if settings.provider_configured else "missing_key",
        "features_active": ACTIVE_FEATURES,
    }
