from .base import WebhookClient
from .errors import HookchatError, TransportError
from .factory import create_webhook_client
from .http import HTTPWebhookClient
from .models import (
    REPLY_FIELDS,
    WebhookPayload,
    WebhookReply,
    build_payload,
    extract_reply_text,
    format_timestamp,
)

__all__ = [
    "HTTPWebhookClient",
    "HookchatError",
    "REPLY_FIELDS",
    "TransportError",
    "WebhookClient",
    "WebhookPayload",
    "WebhookReply",
    "build_payload",
    "create_webhook_client",
    "extract_reply_text",
    "format_timestamp",
]
