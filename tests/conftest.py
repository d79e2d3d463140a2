"""Pytest configuration and shared fixtures."""
import os
from datetime import datetime

import httpx
import pytest

from hookchat.conversation import ConversationStore
from hookchat.webhook import HTTPWebhookClient, WebhookClient, WebhookReply

WEBHOOK_URL = "https://n8n.example.com/webhook/calendar-assistant"


class RecordingHandler:
    """httpx.MockTransport handler that keeps every request it sees."""

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []
        self._responder = responder

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._responder(request)
        if hasattr(result, "__await__"):
            result = await result
        return result


class StubWebhookClient(WebhookClient):
    """Webhook client returning canned replies without any I/O.

    Each entry in ``replies`` is either reply text or an exception to raise.
    """

    def __init__(self, endpoint_url: str = "", replies=None, gate=None):
        super().__init__(endpoint_url)
        self.calls: list[tuple[str, str, str, datetime | None]] = []
        self.closed = False
        self._replies = list(replies or [])
        self._gate = gate

    async def send(self, text, session_id, sent_at=None):
        self.calls.append((self.endpoint_url, text, session_id, sent_at))
        self._debug("debug", "Webhook", f"stub send {text!r}")
        if self._gate is not None:
            await self._gate.wait()
        outcome = self._replies.pop(0) if self._replies else "ok"
        if isinstance(outcome, Exception):
            raise outcome
        return WebhookReply(text=outcome, status_code=200)

    async def close(self):
        self.closed = True


def json_reply(body, status_code: int = 200):
    """Responder returning a fixed JSON body."""
    return lambda request: httpx.Response(status_code, json=body)


@pytest.fixture
def webhook_url():
    """Return the webhook URL used across tests."""
    return WEBHOOK_URL


@pytest.fixture
def live_webhook_url():
    """Return a real webhook URL from the environment, if any."""
    return os.getenv("HOOKCHAT_WEBHOOK_URL")


@pytest.fixture
def store(webhook_url):
    """Configured store without the welcome message."""
    return ConversationStore(endpoint_url=webhook_url, welcome_message=None)


@pytest.fixture
async def make_http_client(webhook_url):
    """Factory for HTTPWebhookClient instances backed by httpx.MockTransport.

    Returns (client, handler); handler.requests lists what was sent.
    """
    clients: list[HTTPWebhookClient] = []

    def _make(responder, endpoint_url: str = webhook_url):
        handler = RecordingHandler(responder)
        client = HTTPWebhookClient(
            endpoint_url=endpoint_url,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        await client.close()
