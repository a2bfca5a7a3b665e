"""
Endpoint handlers for the example server.
"""
from .health import router as health_router
from .session import router as session_router

__all__ = [
    'health_router',
    'session_router',
]
