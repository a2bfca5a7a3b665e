"""
Twitch OAuth authorization code and refresh token flows for FastAPI hosts
"""
from .constants import (
    AUTHORIZE_URL,
    TOKEN_URL,
    OAUTH_STATE_KEY,
    REFRESH_TIMEOUT_SECONDS,
)
from .errors import (
    OAuthError,
    InvalidStateError,
    TokenEndpointError,
    MalformedResponseError,
    TokenRequestTimeout,
    SessionNotConfiguredError,
    InvalidRedirectURIError,
)
from .models import (
    AccessTokenResponse,
    RefreshTokenResponse,
    TokenInfo,
    TokenCallback,
    ErrorHandler,
    OAuthPathOptions,
)
from .utils import (
    parse_scopes,
    join_scopes,
    compute_expiry,
    mask_token,
)
from .state import (
    generate_state,
    store_state,
    validate_state,
    get_session,
)
from .authorization import (
    build_authorize_url,
    begin_authorization,
)
from .token_exchange import (
    request_token,
    exchange_code,
    quiet_http_loggers,
)
from .token_refresh import refresh_token
from .callback import (
    describe_error,
    handle_callback,
)
from .route import setup_twitch_oauth_path

__all__ = [
    # Constants
    "AUTHORIZE_URL",
    "TOKEN_URL",
    "OAUTH_STATE_KEY",
    "REFRESH_TIMEOUT_SECONDS",
    # Errors
    "OAuthError",
    "InvalidStateError",
    "TokenEndpointError",
    "MalformedResponseError",
    "TokenRequestTimeout",
    "SessionNotConfiguredError",
    "InvalidRedirectURIError",
    # Models
    "AccessTokenResponse",
    "RefreshTokenResponse",
    "TokenInfo",
    "TokenCallback",
    "ErrorHandler",
    "OAuthPathOptions",
    # Utilities
    "parse_scopes",
    "join_scopes",
    "compute_expiry",
    "mask_token",
    # State
    "generate_state",
    "store_state",
    "validate_state",
    "get_session",
    # Authorization
    "build_authorize_url",
    "begin_authorization",
    # Token Exchange
    "request_token",
    "exchange_code",
    "quiet_http_loggers",
    "refresh_token",
    # Callback / Route
    "describe_error",
    "handle_callback",
    "setup_twitch_oauth_path",
]
