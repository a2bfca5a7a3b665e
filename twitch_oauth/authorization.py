"""
Authorization redirect construction
"""
import logging
from urllib.parse import quote, urlencode

from fastapi import Request
from fastapi.responses import RedirectResponse

from .constants import REDIRECT_STATUS_CODE
from .models import OAuthPathOptions
from .state import get_session, store_state
from .utils import join_scopes

logger = logging.getLogger(__name__)


def build_authorize_url(options: OAuthPathOptions, state: str) -> str:
    """
    Build the provider authorization URL.

    Values are fully percent-encoded (spaces as %20, "/" and ":" escaped),
    so the scope list arrives as a single space-joined parameter.

    Args:
        options: Configuration of the OAuth path
        state: Anti-forgery state value

    Returns:
        str: Full authorization URL
    """
    params = {
        "client_id": options.client_id,
        "redirect_uri": options.redirect_uri,
        "response_type": "code",
        "scope": join_scopes(options.scopes),
        "state": state,
    }
    if options.force_verify:
        params["force_verify"] = "true"

    query = urlencode(params, safe="", quote_via=quote)
    return f"{options.authorize_url}?{query}"


def begin_authorization(request: Request, options: OAuthPathOptions) -> RedirectResponse:
    """
    Start the flow: store a fresh state in the session and redirect to the provider.

    Args:
        request: Incoming request without a ``code`` parameter
        options: Configuration of the OAuth path

    Returns:
        RedirectResponse: 307 redirect to the authorization endpoint

    Raises:
        SessionNotConfiguredError: If the host has no session middleware
    """
    session = get_session(request)
    state = store_state(session)
    url = build_authorize_url(options, state)

    logger.info(f"Redirecting to authorization endpoint {options.authorize_url}")
    return RedirectResponse(url, status_code=REDIRECT_STATUS_CODE)
