"""OAuth token refresh (refresh_token grant)"""

import asyncio
import datetime
import logging
from typing import Iterable, Optional

import httpx
from pydantic import ValidationError

from .constants import REFRESH_TIMEOUT_SECONDS, TOKEN_URL
from .errors import MalformedResponseError, TokenRequestTimeout
from .models import RefreshTokenResponse, TokenInfo
from .token_exchange import invalid_fields, request_token
from .utils import compute_expiry, join_scopes, mask_token, parse_scopes

logger = logging.getLogger(__name__)


async def refresh_token(
    refresh_token: str,
    client_id: str,
    client_secret: str,
    scopes: Optional[Iterable[str]] = None,
    token_url: Optional[str] = None,
    *,
    timeout: float = REFRESH_TIMEOUT_SECONDS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TokenInfo:
    """Obtain a new token pair from a refresh token

    One call performs exactly one exchange. Callers refreshing the same
    stored credential from several places must serialize those calls
    themselves.

    Args:
        refresh_token: Refresh token from a previous exchange
        client_id: Registered client id
        client_secret: Registered client secret
        scopes: Optional narrower scope set, forwarded as-is
        token_url: Token endpoint override
        timeout: Hard deadline for the whole exchange, in seconds
        transport: Optional httpx transport

    Returns:
        TokenInfo for the rotated credential

    Raises:
        TokenEndpointError: Non-2xx reply, with the provider body verbatim
        TokenRequestTimeout: No complete reply within ``timeout``
        MalformedResponseError: The reply could not be interpreted
        httpx.RequestError: Network-level failure
    """
    params = {
        "refresh_token": refresh_token,
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "refresh_token",
    }
    scope_string = join_scopes(scopes)
    if scope_string:
        params["scope"] = scope_string

    url = token_url or TOKEN_URL
    logger.info(f"Refreshing token {mask_token(refresh_token)} at {url}")

    issued_at = datetime.datetime.now(datetime.timezone.utc)
    try:
        payload = await asyncio.wait_for(
            request_token(url, params, timeout=timeout, transport=transport),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.error(f"Token refresh timed out after {timeout} seconds")
        raise TokenRequestTimeout(f"Token refresh timed out after {timeout} seconds") from e

    try:
        data = RefreshTokenResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Token refresh response has invalid fields: {invalid_fields(e)}") from e

    token_info = TokenInfo(
        access_token=data.access_token,
        refresh_token=data.refresh_token,
        expiry_date=compute_expiry(data.expires_in, issued_at),
        scopes=parse_scopes(data.scope),
        token_type=data.token_type,
    )

    logger.info(f"Successfully refreshed token, new access token {mask_token(token_info.access_token)}")
    return token_info
