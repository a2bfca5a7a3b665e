"""OAuth callback handling: state check, code exchange, continuation"""

import inspect
import json
import logging
from typing import Any

import httpx
from fastapi import Request, Response
from fastapi.responses import PlainTextResponse

from .errors import InvalidStateError, OAuthError, TokenEndpointError
from .models import OAuthPathOptions
from .state import get_session, validate_state
from .token_exchange import exchange_code

logger = logging.getLogger(__name__)


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as is"""
    if inspect.isawaitable(value):
        return await value
    return value


def describe_error(error: Exception) -> str:
    """Render an error for the user without exposing credentials

    Provider failures show the provider's payload, flow errors their message,
    and anything else (transport errors) only its type.
    """
    if isinstance(error, TokenEndpointError):
        if isinstance(error.body, str):
            return error.body
        return json.dumps(error.body)
    if isinstance(error, OAuthError):
        return str(error)
    return f"Token exchange failed: {type(error).__name__}"


async def render_error(request: Request, options: OAuthPathOptions, error: Exception) -> Response:
    """Turn a callback failure into a plain-text response via the configured error handler"""
    status_code = 400 if isinstance(error, InvalidStateError) else 502

    if options.error_handler is None:
        message = describe_error(error)
    else:
        message = await resolve(options.error_handler(request, error))

    return PlainTextResponse(str(message), status_code=status_code)


async def handle_callback(request: Request, options: OAuthPathOptions) -> Response:
    """Complete the flow for a request carrying an authorization code

    The state is validated before any network call. On success the
    continuation receives the request and the new TokenInfo and owns
    whatever happens next (session writes, redirects, response body).

    Args:
        request: Incoming callback request with ``code`` and ``state``
        options: Configuration of the OAuth path

    Returns:
        The continuation's response, an empty 200 if it returned None,
        or the rendered error
    """
    session = get_session(request)

    try:
        validate_state(request.query_params.get("state"), session)
        token_info = await exchange_code(request.query_params["code"], options)
    except (OAuthError, httpx.RequestError) as e:
        logger.error(f"OAuth callback failed: {type(e).__name__}")
        return await render_error(request, options, e)

    result = await resolve(options.callback(request, token_info))
    if result is None:
        return Response(status_code=200)
    return result
