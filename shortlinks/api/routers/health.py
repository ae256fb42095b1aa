# shortlinks/api/routers/health.py

from fastapi import APIRouter, Request

from shortlinks.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Health check with correlation ID from request state."""
    settings = get_settings()
    return {
        "status": "ok",
        "correlation_id": request.state.correlation_id,
        "environment": settings.environment,
        "storage_backend": settings.storage_backend,
        "version": settings.version,
    }
