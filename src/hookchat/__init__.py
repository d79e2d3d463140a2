"""
hookchat: a terminal chat widget for webhook-backed automation assistants.

Each module hides a specific design decision: the conversation package
hides state handling, the webhook package hides the wire exchange, and the
ui package hides presentation.
"""

__version__ = "0.1.0"

from .chat import ChatController, PendingTurn, SendRejection
from .conversation import AppState, ConversationStore, Message, Sender, TurnPhase
from .webhook import (
    HTTPWebhookClient,
    HookchatError,
    TransportError,
    WebhookClient,
    WebhookReply,
    create_webhook_client,
)

__all__ = [
    "AppState",
    "ChatController",
    "ConversationStore",
    "HTTPWebhookClient",
    "HookchatError",
    "Message",
    "PendingTurn",
    "Sender",
    "SendRejection",
    "TransportError",
    "TurnPhase",
    "WebhookClient",
    "WebhookReply",
    "create_webhook_client",
]
