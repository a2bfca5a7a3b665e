"""
OAuthServer class for CLI control of the FastAPI application.
"""
import logging
import os
from typing import Optional

import uvicorn

from settings import PORT, LOG_LEVEL, BIND_ADDRESS
from twitch_oauth import quiet_http_loggers
from .app import app

logger = logging.getLogger(__name__)


class OAuthServer:
    """Example server wrapper for CLI control"""

    def __init__(self, debug: bool = False, bind_address: Optional[str] = None, port: Optional[int] = None):
        self.server = None
        self.config = None
        self.debug = debug
        self.bind_address = bind_address or BIND_ADDRESS
        self.port = port or PORT

        # Configure debug logging if enabled
        if debug:
            self._setup_debug_logging()

    def _setup_debug_logging(self):
        """Setup debug logging for the server"""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        # Clear existing handlers to avoid duplicates
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        log_file = os.path.abspath('oauth_debug.log')
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        # httpx logs token request URLs, which carry client_secret and grant values
        quiet_http_loggers(force=True)

        logger.info(f"Debug logging enabled - appending to {log_file}")

    def run(self):
        """Run the server (blocking)"""
        options = app.state.oauth_options
        logger.info(f"Starting Twitch OAuth example server on http://{self.bind_address}:{self.port}")
        logger.info(f"OAuth path: {options.path} (login), /refresh, /auth/status")
        if not options.client_id or not options.client_secret:
            logger.warning("CLIENT_ID or CLIENT_SECRET is not configured - token exchanges will fail")
        self.config = uvicorn.Config(
            app,
            host=self.bind_address,
            port=self.port,
            log_level=LOG_LEVEL,
            access_log=False  # request logging middleware covers this
        )
        self.server = uvicorn.Server(self.config)
        self.server.run()

    def stop(self):
        """Stop the server"""
        if self.server:
            self.server.should_exit = True
