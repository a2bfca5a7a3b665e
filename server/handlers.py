"""
Continuation and error handler used by the example server.
"""
import logging

from fastapi import Request
from fastapi.responses import RedirectResponse

from twitch_oauth import InvalidStateError, TokenInfo, describe_error, mask_token

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEYS = ("access_token", "refresh_token", "expiry_date", "scopes")


def save_token_info(session, token_info: TokenInfo):
    """Write a token pair and its metadata into the session

    The session is a signed cookie, not an encrypted one: the browser holding it
    can read both tokens. Serve the example over HTTPS so the cookie is marked
    Secure, and keep tokens server-side in a real deployment.
    """
    session["access_token"] = token_info.access_token
    session["refresh_token"] = token_info.refresh_token
    session["expiry_date"] = token_info.expiry_date.isoformat()
    session["scopes"] = list(token_info.scopes)


def make_token_callback(success_path: str):
    """Build the continuation: store tokens in the session, then redirect to ``success_path``"""

    async def store_tokens_and_redirect(request: Request, token_info: TokenInfo):
        save_token_info(request.session, token_info)
        logger.info(f"Stored access token {mask_token(token_info.access_token)} in session")
        return RedirectResponse(success_path, status_code=307)

    return store_tokens_and_redirect


async def render_auth_error(request: Request, error: Exception) -> str:
    """User-facing message for a failed callback"""
    if isinstance(error, InvalidStateError):
        return "Invalid state token returned from Twitch. Please start the login again."
    return f"Authorization with Twitch failed: {describe_error(error)}"
