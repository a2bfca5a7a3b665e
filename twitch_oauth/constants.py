"""
Twitch OAuth constants
"""

# Provider endpoints (overridable per OAuthPathOptions / refresh_token call)
AUTHORIZE_URL = "https://id.twitch.tv/oauth2/authorize"
TOKEN_URL = "https://id.twitch.tv/oauth2/token"

# Session key holding the anti-forgery state
OAUTH_STATE_KEY = "oauth_state"

# 16 bytes -> 128 bits of entropy, 32 hex characters
STATE_NUM_BYTES = 16

# Hard deadline for a refresh exchange, in seconds
REFRESH_TIMEOUT_SECONDS = 10.0

# Redirect status used for the authorization hop (method-preserving)
REDIRECT_STATUS_CODE = 307
