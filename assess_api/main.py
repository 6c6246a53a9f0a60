"""
FastAPI backend for submission scoring.

Thin HTTP layer over the ``assess`` engine:
- Service layer for scoring logic
- Structured logging
- Consistent error responses
- Dependency injection
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
)
from .models import SubmissionRequest, SubmissionResult
from .services import ScoringService, get_scoring_service

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting scoring API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down scoring API")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for scoring timed multi-question test submissions",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Register error handlers
register_error_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Dependency injection
def get_scoring_service_dep() -> ScoringService:
    """Get scoring service instance"""
    return get_scoring_service(settings)


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "score": f"{settings.API_PREFIX}/submissions/score",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post(f"{settings.API_PREFIX}/submissions/score", response_model=SubmissionResult)
async def score_submission(
    request: SubmissionRequest,
    service: ScoringService = Depends(get_scoring_service_dep)
):
    """
    Score a completed test submission.

    Args:
        request: Questions in test order and raw answers by question index

    Returns:
        One response per question, in order, and the result summary
    """
    result = await service.score(request)
    return SubmissionResult(responses=result.responses, summary=result.summary)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "assess_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
