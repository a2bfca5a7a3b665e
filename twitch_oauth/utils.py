"""Helpers for scope strings, token lifetimes and log-safe token display"""

import datetime
from typing import Iterable, Optional, Tuple, Union


def parse_scopes(scope: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """Normalize a wire scope value into an ordered set

    Accepts either the space-delimited string returned by refresh responses
    or the list returned by code exchanges. Duplicates are dropped, first
    occurrence wins.

    Args:
        scope: Space-delimited scope string, iterable of scopes, or None

    Returns:
        Tuple of unique scopes in wire order (empty for "" or None)
    """
    if scope is None:
        return ()
    if isinstance(scope, str):
        parts = scope.split()
    else:
        parts = [s for s in scope if s]
    return tuple(dict.fromkeys(parts))


def join_scopes(scopes: Optional[Iterable[str]]) -> str:
    """Serialize scopes to the space-delimited wire form ("" when empty)"""
    if not scopes:
        return ""
    return " ".join(parse_scopes(scopes))


def compute_expiry(
    expires_in: Union[int, float],
    issued_at: Optional[datetime.datetime] = None
) -> datetime.datetime:
    """Compute the absolute expiry of a token

    Args:
        expires_in: Lifetime reported by the provider, in seconds
        issued_at: Issue time (defaults to now, UTC)

    Returns:
        Timezone-aware expiry timestamp
    """
    if issued_at is None:
        issued_at = datetime.datetime.now(datetime.timezone.utc)
    return issued_at + datetime.timedelta(seconds=expires_in)


def mask_token(token: Optional[str], visible: int = 4) -> str:
    """Mask a token for logs and status pages"""
    if not token:
        return "<none>"
    if len(token) <= visible * 2:
        return "*" * len(token)
    return f"{token[:visible]}...{token[-visible:]}"
