import json
from datetime import datetime
from typing import Any

import httpx

from ..conversation.models import utc_now
from .base import WebhookClient
from .errors import TransportError
from .models import WebhookReply, build_payload, extract_reply_text

JSON_HEADERS = {"Content-Type": "application/json"}


class HTTPWebhookClient(WebhookClient):
    """Webhook client over httpx.

    Hidden design decisions:
    - httpx.AsyncClient lifecycle (owned unless one is passed in)
    - JSON encoding of the request body
    - Which httpx exceptions count as transport failures

    No retries and no timeout beyond the httpx default.
    """

    def __init__(
        self,
        endpoint_url: str = "",
        client: httpx.AsyncClient | None = None,
        **client_kwargs: Any
    ):
        """Initialize HTTP webhook client.

        Args:
            endpoint_url: Webhook URL (may be set or changed later)
            client: Existing httpx client to use; it is not closed by close()
            **client_kwargs: Extra arguments for httpx.AsyncClient
                (redirects are followed unless follow_redirects=False)
        """
        super().__init__(endpoint_url)
        client_kwargs.setdefault("follow_redirects", True)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(**client_kwargs)

    async def send(
        self,
        text: str,
        session_id: str,
        sent_at: datetime | None = None,
    ) -> WebhookReply:
        """POST the message and extract the reply."""
        url = self.endpoint_url.strip()
        payload = build_payload(text, session_id, sent_at or utc_now())

        self._debug("debug", "Webhook", f"POST {url} ({len(text)} chars)")
        try:
            response = await self._client.post(
                url,
                content=json.dumps(payload.to_body()),
                headers=JSON_HEADERS,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._debug("error", "Webhook", f"Request failed: {e!r}")
            raise TransportError.from_exception(e) from e

        if not response.is_success:
            self._debug("warning", "Webhook", f"Status {response.status_code}")
            raise TransportError.from_status(response.status_code)

        # Deeply nested bodies raise RecursionError from the json module
        try:
            body = response.json()
            if body is None:
                raise TransportError("Response body is null")
            reply_text = extract_reply_text(body)
        except (ValueError, RecursionError) as e:
            self._debug("error", "Webhook", f"Unparseable body: {e}")
            raise TransportError.from_exception(e) from e

        self._debug(
            "info", "Webhook", f"Reply {response.status_code} ({len(reply_text)} chars)"
        )
        return WebhookReply(text=reply_text, status_code=response.status_code, body=body)

    async def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
