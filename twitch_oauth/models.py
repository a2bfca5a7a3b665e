"""Data models for the Twitch OAuth flow"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import urlparse

import httpx
from fastapi import Request, Response
from pydantic import BaseModel

from .constants import AUTHORIZE_URL, TOKEN_URL
from .errors import InvalidRedirectURIError
from .utils import parse_scopes


class AccessTokenResponse(BaseModel):
    """Token endpoint reply to an authorization_code grant"""
    access_token: str
    refresh_token: str
    expires_in: int
    scope: Union[List[str], str] = []
    token_type: str = "bearer"


class RefreshTokenResponse(BaseModel):
    """Token endpoint reply to a refresh_token grant (scope is space-delimited)"""
    access_token: str
    refresh_token: str
    expires_in: int
    scope: Union[str, List[str]] = ""
    token_type: str = "bearer"


@dataclass
class TokenInfo:
    """Canonical result of a successful token exchange

    Attributes:
        access_token: Bearer token for API calls
        refresh_token: Token for obtaining a new access token
        expiry_date: Absolute expiry (issue time + expires_in), timezone-aware
        scopes: Granted scopes, ordered and without duplicates
        token_type: Token type reported by the provider
    """
    access_token: str
    refresh_token: str
    expiry_date: datetime.datetime
    scopes: Tuple[str, ...] = ()
    token_type: str = "bearer"

    def is_expired(self, buffer_seconds: int = 0) -> bool:
        """Check if the access token is expired, optionally ahead of time"""
        now = datetime.datetime.now(datetime.timezone.utc)
        return now >= self.expiry_date - datetime.timedelta(seconds=buffer_seconds)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary"""
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expiry_date": self.expiry_date.isoformat(),
            "scopes": list(self.scopes),
            "token_type": self.token_type,
        }


TokenCallback = Callable[[Request, TokenInfo], Union[Optional[Response], Awaitable[Optional[Response]]]]
ErrorHandler = Callable[[Request, Exception], Union[str, Awaitable[str]]]


@dataclass(frozen=True)
class OAuthPathOptions:
    """Configuration bound to one OAuth path

    The path the handler is registered on is the path component of
    ``redirect_uri``, which must be an absolute URL.

    Attributes:
        redirect_uri: URI the provider redirects back to with the code
        client_id: Registered client id
        client_secret: Registered client secret
        callback: Continuation receiving (request, TokenInfo) after a successful exchange
        error_handler: Renders a message for (request, error); falls back to the error itself
        scopes: Requested scopes, serialized in order
        force_verify: Always prompt the user to confirm authorization
        token_url: Token endpoint
        authorize_url: Authorization endpoint
        transport: Optional httpx transport for the token exchange (test doubles)
    """
    redirect_uri: str
    client_id: str
    client_secret: str = field(repr=False)
    callback: TokenCallback
    error_handler: Optional[ErrorHandler] = None
    scopes: Tuple[str, ...] = ()
    force_verify: bool = False
    token_url: str = TOKEN_URL
    authorize_url: str = AUTHORIZE_URL
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        parsed = urlparse(self.redirect_uri or "")
        if not parsed.scheme or not parsed.netloc:
            raise InvalidRedirectURIError(f"redirect_uri must be an absolute URL, got {self.redirect_uri!r}")
        object.__setattr__(self, "scopes", parse_scopes(self.scopes))

    @property
    def path(self) -> str:
        """Route path derived from the redirect URI"""
        return urlparse(self.redirect_uri).path or "/"
