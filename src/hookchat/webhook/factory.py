"""Factory for creating webhook clients."""

from typing import Any

from .base import WebhookClient


def create_webhook_client(kind: str = "http", **config: Any) -> WebhookClient:
    """Create a webhook client.

    Args:
        kind: Client type ("http")
        **config: Client-specific configuration
            For http:
                - endpoint_url: str (default: "")
                - client: httpx.AsyncClient | None
                - any httpx.AsyncClient keyword argument

    Returns:
        WebhookClient instance

    Raises:
        ValueError: If client type is not supported
    """
    if kind.lower() == "http":
        from .http import HTTPWebhookClient
        return HTTPWebhookClient(**config)

    raise ValueError(
        f"Unsupported webhook client: {kind}. "
        f"Supported clients: http"
    )
