"""Exceptions raised by the OAuth flow"""

from typing import Any, Optional


class OAuthError(Exception):
    """Base class for OAuth flow errors"""


class InvalidStateError(OAuthError):
    """The anti-forgery state in the callback is missing or does not match the session"""

    def __init__(self, message: str = "Invalid state token returned from the identity provider"):
        super().__init__(message)


class TokenEndpointError(OAuthError):
    """The token endpoint answered with a non-2xx status

    The provider's error payload is kept verbatim in ``body`` (and ``args[0]``)
    so callers can inspect it without any re-parsing.
    """

    def __init__(self, body: Any, status_code: Optional[int] = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code

    def __str__(self) -> str:
        return f"Token endpoint returned HTTP {self.status_code}: {self.body}"


class MalformedResponseError(OAuthError):
    """The token endpoint response could not be interpreted"""


class TokenRequestTimeout(OAuthError, TimeoutError):
    """The token endpoint did not answer within the allowed time"""


class SessionNotConfiguredError(OAuthError, RuntimeError):
    """The host application has no session middleware installed"""

    def __init__(self, message: str = "SessionMiddleware must be installed on the host application"):
        super().__init__(message)


class InvalidRedirectURIError(OAuthError, ValueError):
    """The configured redirect URI is not an absolute URL"""
