"""Provider functions for CLI.

Centralizes creation of the webhook client and endpoint settings from
environment variables. Hides configuration details from command
implementations.
"""

import os

from rich.console import Console

from ..webhook import WebhookClient, create_webhook_client

# Default console for output
_console = Console()


def get_endpoint_url(override: str | None = None) -> str:
    """Resolve the webhook URL.

    Args:
        override: Value from the command line; wins over the environment

    Returns:
        The URL, or "" when none is configured

    Environment variables:
        HOOKCHAT_WEBHOOK_URL: Webhook URL (default: unset)
    """
    if override is not None:
        return override.strip()
    return os.getenv("HOOKCHAT_WEBHOOK_URL", "").strip()


def get_log_level(override: str | None = None) -> str | None:
    """Resolve the TUI log panel level.

    Environment variables:
        HOOKCHAT_LOG_LEVEL: debug, info, warning or error (default: unset, panel hidden)
    """
    if override is not None:
        return override
    return os.getenv("HOOKCHAT_LOG_LEVEL") or None


def get_webhook_client(endpoint_url: str = "") -> WebhookClient:
    """Create the webhook client used by all commands."""
    return create_webhook_client("http", endpoint_url=endpoint_url)


def require_endpoint_url(override: str | None = None, console: Console | None = None) -> str:
    """Get the webhook URL, exiting if it is not configured.

    Raises:
        SystemExit: If no URL is given and HOOKCHAT_WEBHOOK_URL is not set
    """
    import typer

    con = console or _console
    url = get_endpoint_url(override)
    if not url:
        con.print("[red]Error: webhook URL not configured (use --url or HOOKCHAT_WEBHOOK_URL)[/red]")
        raise typer.Exit(code=1)
    return url
