from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from .models import WebhookReply


class WebhookClient(ABC):
    """Abstract base class for webhook clients.

    This module hides how a user message reaches the automation service.
    Implementations must handle:
    - Request encoding and transport
    - Mapping non-2xx, network and parse failures to TransportError
    - Extracting the reply text from the response body

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.send("Book a meeting at 3pm", session_id)
    """

    def __init__(self, endpoint_url: str = "") -> None:
        self.endpoint_url = endpoint_url
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send debug message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint_url.strip())

    @abstractmethod
    async def send(
        self,
        text: str,
        session_id: str,
        sent_at: datetime | None = None,
    ) -> WebhookReply:
        """Send one user message to the configured endpoint.

        Args:
            text: The user's message
            session_id: Session token for correlating turns
            sent_at: Send time for the payload (None uses now)

        Returns:
            WebhookReply with the extracted reply text

        Raises:
            TransportError: On non-2xx status, network or parse failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "WebhookClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup."""
        await self.close()
