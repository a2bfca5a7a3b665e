"""Anti-forgery state generation and validation"""

import logging
import secrets
from typing import Any, MutableMapping, Optional

from fastapi import Request

from .constants import OAUTH_STATE_KEY, STATE_NUM_BYTES
from .errors import InvalidStateError, SessionNotConfiguredError

logger = logging.getLogger(__name__)


def generate_state() -> str:
    """
    Generate a fresh anti-forgery state value.

    Returns:
        str: 128 bits from the OS CSPRNG, hex-encoded (32 characters)
    """
    return secrets.token_hex(STATE_NUM_BYTES)


def store_state(session: MutableMapping[str, Any]) -> str:
    """
    Generate a state value and store it in the session, replacing any previous one.

    Args:
        session: The caller's session mapping

    Returns:
        str: The stored state value
    """
    state = generate_state()
    session[OAUTH_STATE_KEY] = state
    return state


def validate_state(received: Optional[str], session: MutableMapping[str, Any]) -> None:
    """
    Check the state echoed by the provider against the session.

    The stored value is left in place; only an exact match is accepted.

    Args:
        received: The ``state`` query parameter of the callback
        session: The caller's session mapping

    Raises:
        InvalidStateError: If the state is missing or does not match
    """
    expected = session.get(OAUTH_STATE_KEY)

    if not received:
        logger.warning("OAuth callback received without a state parameter")
        raise InvalidStateError()

    if not isinstance(expected, str) or not secrets.compare_digest(
        received.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("OAuth callback state does not match the session")
        raise InvalidStateError()


def get_session(request: Request) -> MutableMapping[str, Any]:
    """
    Return the session bound to a request.

    Raises:
        SessionNotConfiguredError: If no session middleware populated the request
    """
    if "session" not in request.scope:
        logger.error("OAuth path called without session middleware installed")
        raise SessionNotConfiguredError()
    return request.session
