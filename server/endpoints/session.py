"""
Session token status and refresh endpoints.
"""
import datetime
import logging

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from twitch_oauth import (
    MalformedResponseError,
    TokenEndpointError,
    TokenRequestTimeout,
    mask_token,
    refresh_token,
)
from ..handlers import save_token_info

logger = logging.getLogger(__name__)

router = APIRouter()


def session_status(session) -> dict:
    """Summarize the session's tokens without exposing them"""
    access_token = session.get("access_token")
    if not access_token:
        return {"authenticated": False}

    expiry_date = session.get("expiry_date")
    is_expired = True
    if expiry_date:
        expiry = datetime.datetime.fromisoformat(expiry_date)
        is_expired = datetime.datetime.now(datetime.timezone.utc) >= expiry

    return {
        "authenticated": True,
        "access_token": mask_token(access_token),
        "refresh_token": mask_token(session.get("refresh_token")),
        "expiry_date": expiry_date,
        "is_expired": is_expired,
        "scopes": session.get("scopes", []),
    }


@router.get("/success")
async def success(request: Request):
    """Landing page after a completed authorization"""
    return session_status(request.session)


@router.get("/auth/status")
async def auth_status(request: Request):
    """Get token status without exposing secrets"""
    return session_status(request.session)


@router.get("/refresh")
async def refresh(request: Request):
    """Refresh the session's access token with its stored refresh token"""
    stored_refresh_token = request.session.get("refresh_token")
    if not stored_refresh_token:
        return JSONResponse({"error": "No refresh token in session"}, status_code=401)

    options = request.app.state.oauth_options
    try:
        token_info = await refresh_token(
            stored_refresh_token,
            options.client_id,
            options.client_secret,
            token_url=options.token_url,
            timeout=request.app.state.refresh_timeout,
            transport=options.transport,
        )
    except TokenEndpointError as e:
        return JSONResponse(e.body, status_code=502)
    except TokenRequestTimeout:
        return JSONResponse({"error": "Token refresh timed out"}, status_code=504)
    except MalformedResponseError as e:
        return JSONResponse({"error": str(e)}, status_code=502)
    except httpx.RequestError as e:
        logger.error(f"Token refresh transport failure: {type(e).__name__}")
        return JSONResponse({"error": "Token refresh failed"}, status_code=502)

    save_token_info(request.session, token_info)
    return session_status(request.session)
