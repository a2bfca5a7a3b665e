"""
Twitch OAuth example server package.

Hosts the OAuth path on a FastAPI application with cookie sessions,
plus token status and refresh endpoints.
"""
from .server import OAuthServer
from .app import app, create_app

__version__ = "1.0.0"

__all__ = [
    'OAuthServer',
    'app',
    'create_app',
]
