from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 3000)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "127.0.0.1")

# Registered application credentials
CLIENT_ID = config.get("CLIENT_ID", "")
CLIENT_SECRET = config.get("CLIENT_SECRET", "")

# URI Twitch redirects back to; its path is where the OAuth handler is mounted
REDIRECT_URI = config.get("REDIRECT_URI", "http://localhost:3000/auth")

# Requested scopes (comma or space separated in the environment)
SCOPES = config.get("SCOPES", ["user:read:email"])

# Always prompt the user to confirm authorization
FORCE_VERIFY = config.get("FORCE_VERIFY", False)

# Provider endpoints (override for test doubles or compatible providers)
TOKEN_URL = config.get("TOKEN_URL", "https://id.twitch.tv/oauth2/token")
AUTHORIZE_URL = config.get("AUTHORIZE_URL", "https://id.twitch.tv/oauth2/authorize")

# Session cookie signing secret; a random one is generated per process when empty
SESSION_SECRET = config.get("SESSION_SECRET", "")

# Where the example continuation sends the browser after a successful exchange
SUCCESS_PATH = config.get("SUCCESS_PATH", "/success")

# Hard deadline for refresh exchanges, in seconds
REFRESH_TIMEOUT = config.get("REFRESH_TIMEOUT", 10.0)
