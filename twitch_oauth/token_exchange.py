"""OAuth token exchange (authorization_code grant)"""

import datetime
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .errors import MalformedResponseError, TokenEndpointError
from .models import AccessTokenResponse, OAuthPathOptions, TokenInfo
from .utils import compute_expiry, mask_token, parse_scopes

logger = logging.getLogger(__name__)

# Loggers that record full request URLs, grant parameters included
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def quiet_http_loggers(level: int = logging.WARNING, force: bool = False) -> None:
    """Raise the HTTP client loggers to ``level`` so query-string credentials are not logged

    Loggers a host configured explicitly are left alone unless ``force`` is set.
    """
    for name in HTTP_CLIENT_LOGGERS:
        http_logger = logging.getLogger(name)
        if force or http_logger.level == logging.NOTSET:
            http_logger.setLevel(level)


quiet_http_loggers()


def invalid_fields(error: ValidationError) -> str:
    """Comma-separated names of the fields that failed validation (values are omitted)"""
    return ", ".join(".".join(str(part) for part in err["loc"]) for err in error.errors())


def _error_body(response: httpx.Response) -> Any:
    """Parsed JSON error payload, or the raw text when the body is not JSON"""
    try:
        return response.json()
    except ValueError:
        return response.text


async def request_token(
    token_url: str,
    params: Dict[str, str],
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """POST to the token endpoint and return the decoded JSON body

    Parameters travel in the query string. The full body is read before
    anything is parsed. Transport errors propagate unchanged.

    Args:
        token_url: Token endpoint URL (its scheme selects TLS or plaintext)
        params: Grant parameters
        timeout: httpx timeout in seconds, None for no timeout
        transport: Optional httpx transport

    Returns:
        Decoded JSON object of a 2xx reply

    Raises:
        TokenEndpointError: Non-2xx status, carrying the provider body verbatim
        MalformedResponseError: Missing status code or undecodable success body
        httpx.RequestError: Network-level failure
    """
    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        response = await client.post(token_url, params=params)

    status = response.status_code
    if status is None:
        raise MalformedResponseError("Token endpoint response carried no status code")

    logger.debug(f"Token endpoint responded with status {status}")

    if status // 100 != 2:
        body = _error_body(response)
        logger.warning(f"Token endpoint returned HTTP {status}: {body}")
        raise TokenEndpointError(body, status)

    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError("Token endpoint returned a non-JSON body") from e

    if not isinstance(payload, dict):
        raise MalformedResponseError("Token endpoint returned a non-object JSON body")

    return payload


async def exchange_code(code: str, options: OAuthPathOptions) -> TokenInfo:
    """Exchange an authorization code for an access/refresh token pair

    No timeout is applied; callers wanting bounded latency wrap the call.

    Args:
        code: Authorization code from the callback query string
        options: Configuration of the OAuth path

    Returns:
        TokenInfo for the new credential

    Raises:
        TokenEndpointError: The provider rejected the exchange
        MalformedResponseError: The reply could not be interpreted
        httpx.RequestError: Network-level failure
    """
    params = {
        "client_id": options.client_id,
        "client_secret": options.client_secret,
        "code": code,
        "grant_type": "authorization_code",
        "redirect_uri": options.redirect_uri,
    }

    logger.info(f"Exchanging authorization code at {options.token_url}")

    issued_at = datetime.datetime.now(datetime.timezone.utc)
    payload = await request_token(options.token_url, params, timeout=None, transport=options.transport)

    try:
        data = AccessTokenResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Token exchange response has invalid fields: {invalid_fields(e)}") from e

    token_info = TokenInfo(
        access_token=data.access_token,
        refresh_token=data.refresh_token,
        expiry_date=compute_expiry(data.expires_in, issued_at),
        scopes=parse_scopes(data.scope),
        token_type=data.token_type,
    )

    logger.info(
        f"Obtained access token {mask_token(token_info.access_token)} "
        f"expiring {token_info.expiry_date.isoformat()}"
    )
    return token_info
