"""
FastAPI application initialization and configuration.
"""
import logging
import secrets
from typing import Iterable, Optional
from urllib.parse import urlsplit

import httpx
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

import settings
from twitch_oauth import OAuthPathOptions, setup_twitch_oauth_path
from .handlers import make_token_callback, render_auth_error
from .middleware import log_requests_middleware
from .endpoints import health_router, session_router

logger = logging.getLogger(__name__)


def create_app(
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    redirect_uri: Optional[str] = None,
    scopes: Optional[Iterable[str]] = None,
    force_verify: Optional[bool] = None,
    token_url: Optional[str] = None,
    authorize_url: Optional[str] = None,
    session_secret: Optional[str] = None,
    success_path: Optional[str] = None,
    refresh_timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the example application; unset arguments fall back to settings"""
    app = FastAPI(title="Twitch OAuth Example Server", version="1.0.0")

    secret_key = session_secret or settings.SESSION_SECRET
    if not secret_key:
        secret_key = secrets.token_hex(32)
        logger.warning("SESSION_SECRET is not set - using a random secret, sessions will not survive a restart")

    redirect_uri = redirect_uri or settings.REDIRECT_URI

    options = OAuthPathOptions(
        redirect_uri=redirect_uri,
        client_id=client_id if client_id is not None else settings.CLIENT_ID,
        client_secret=client_secret if client_secret is not None else settings.CLIENT_SECRET,
        callback=make_token_callback(success_path or settings.SUCCESS_PATH),
        error_handler=render_auth_error,
        scopes=tuple(scopes if scopes is not None else settings.SCOPES),
        force_verify=force_verify if force_verify is not None else settings.FORCE_VERIFY,
        token_url=token_url or settings.TOKEN_URL,
        authorize_url=authorize_url or settings.AUTHORIZE_URL,
        transport=transport,
    )
    app.state.oauth_options = options
    app.state.refresh_timeout = refresh_timeout if refresh_timeout is not None else settings.REFRESH_TIMEOUT

    # Add middleware (session outermost so every route sees request.session)
    app.middleware("http")(log_requests_middleware)
    # Cookie is Secure only when the callback is served over TLS
    app.add_middleware(
        SessionMiddleware,
        secret_key=secret_key,
        same_site="lax",
        https_only=urlsplit(redirect_uri).scheme == "https",
    )

    # Register routes
    setup_twitch_oauth_path(app, options)
    app.include_router(health_router)
    app.include_router(session_router)

    logger.debug("FastAPI application initialized with OAuth path, routers and middleware")
    return app


app = create_app()
