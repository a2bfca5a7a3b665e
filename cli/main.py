"""CLI entry point and argument parsing"""

import argparse
import asyncio
import json
import sys

import httpx
from rich.console import Console

import settings
from twitch_oauth import (
    OAuthError,
    OAuthPathOptions,
    TokenEndpointError,
    build_authorize_url,
    generate_state,
    refresh_token,
)
from cli.status_display import show_token_info


console = Console()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(description="Twitch OAuth example server and token tools")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Override port (default: from config)")
    parser.add_argument(
        "--refresh-token",
        type=str,
        default=None,
        help="Refresh this token with the configured client credentials and exit"
    )
    parser.add_argument(
        "--scope",
        action="append",
        default=None,
        help="Scope to request when refreshing (repeatable; default: keep granted scopes)"
    )
    parser.add_argument(
        "--authorize-url",
        action="store_true",
        help="Print an authorization URL with a fresh state and exit"
    )
    return parser


def run_refresh(token: str, scopes=None) -> int:
    """
    Refresh a token once and print the result

    Args:
        token: Refresh token
        scopes: Optional narrower scope list

    Returns:
        Process exit code
    """
    try:
        token_info = asyncio.run(refresh_token(
            token,
            settings.CLIENT_ID,
            settings.CLIENT_SECRET,
            scopes=scopes,
            token_url=settings.TOKEN_URL,
            timeout=settings.REFRESH_TIMEOUT,
        ))
    except TokenEndpointError as e:
        console.print(f"[red]Refresh rejected (HTTP {e.status_code}):[/red]")
        console.print(json.dumps(e.body, indent=2) if not isinstance(e.body, str) else e.body)
        return 1
    except OAuthError as e:
        console.print(f"[red]Refresh failed:[/red] {e}")
        return 1
    except httpx.RequestError as e:
        console.print(f"[red]Could not reach token endpoint:[/red] {type(e).__name__}")
        return 1

    console.print("[green]✓ Token refreshed[/green]")
    show_token_info(token_info, console, title="Refreshed Token")
    console.print(f"\nNew refresh token: {token_info.refresh_token}")
    return 0


def print_authorize_url() -> int:
    """Print an authorization URL built from the configured settings"""
    options = OAuthPathOptions(
        redirect_uri=settings.REDIRECT_URI,
        client_id=settings.CLIENT_ID,
        client_secret=settings.CLIENT_SECRET,
        callback=lambda request, token_info: None,
        scopes=tuple(settings.SCOPES),
        force_verify=settings.FORCE_VERIFY,
        token_url=settings.TOKEN_URL,
        authorize_url=settings.AUTHORIZE_URL,
    )
    state = generate_state()
    console.print(f"[bold]State:[/bold] {state}")
    console.print(build_authorize_url(options, state), soft_wrap=True)
    return 0


def main():
    """Entry point for the CLI"""
    args = build_parser().parse_args()

    try:
        if args.refresh_token:
            sys.exit(run_refresh(args.refresh_token, args.scope))

        if args.authorize_url:
            sys.exit(print_authorize_url())

        from server import OAuthServer

        server = OAuthServer(debug=args.debug, bind_address=args.bind, port=args.port)
        console.print(f"[bold cyan]Twitch OAuth example server[/bold cyan] on http://{server.bind_address}:{server.port}")
        server.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        console.print("Goodbye!")
    except OAuthError as e:
        console.print(f"\n[red]Configuration error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
