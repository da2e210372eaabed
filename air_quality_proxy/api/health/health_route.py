from fastapi import APIRouter, Request
from datetime import datetime, timezone

from air_quality_proxy import __version__

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health(request: Request):
    """Basic health check endpoint."""

    settings = request.app.state.settings

    return {
        "message": "Air Quality Proxy is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "api_key_configured": settings.api_key_configured,
    }
