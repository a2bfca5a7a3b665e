"""Token display functionality for CLI"""

import datetime

from rich.table import Table

from twitch_oauth import TokenInfo, mask_token


def format_time_remaining(expiry_date: datetime.datetime) -> str:
    """
    Human-readable time until expiry

    Args:
        expiry_date: Timezone-aware expiry timestamp

    Returns:
        String like "3h 59m", "12m" or "expired"
    """
    remaining = (expiry_date - datetime.datetime.now(datetime.timezone.utc)).total_seconds()
    if remaining <= 0:
        return "expired"

    hours = int(remaining // 3600)
    minutes = int((remaining % 3600) // 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def show_token_info(token_info: TokenInfo, console, title: str = "Token Details"):
    """
    Display a token pair without revealing it

    Args:
        token_info: TokenInfo to display
        console: Rich console for output
        title: Table title
    """
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Access Token", mask_token(token_info.access_token))
    table.add_row("Refresh Token", mask_token(token_info.refresh_token))
    table.add_row("Token Type", token_info.token_type)
    table.add_row("Expires At", token_info.expiry_date.isoformat())
    table.add_row("Time Until Expiry", format_time_remaining(token_info.expiry_date))
    table.add_row("Scopes", " ".join(token_info.scopes) or "(none)")

    console.print(table)
