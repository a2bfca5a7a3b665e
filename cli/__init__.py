"""CLI package for the Twitch OAuth example server

Runs the example server or performs one-off token operations.
"""

from cli.main import main

__all__ = [
    "main",
]
