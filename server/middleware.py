"""
FastAPI middleware for request logging and timing.
"""
import time
import logging
from fastapi import Request

logger = logging.getLogger(__name__)

# Polled by load balancers; logged at DEBUG only
QUIET_PATHS = {"/health"}


async def log_requests_middleware(request: Request, call_next):
    """Log method, path, status and duration

    Only the path is logged: OAuth callbacks carry the authorization
    code and state in the query string.
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
    logger.log(level, f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

    return response
