"""
Health check endpoint.
"""
import time
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness plus a summary of the OAuth path configuration (no credentials)"""
    options = request.app.state.oauth_options
    return {
        "status": "healthy",
        "oauth_path": options.path,
        "client_configured": bool(options.client_id and options.client_secret),
        "timestamp": time.time(),
    }
