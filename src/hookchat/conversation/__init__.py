"""Conversation state for hookchat.

Holds messages and widget state in memory for a single session.
"""

from .actions import (
    Action,
    ConfigSaved,
    ConfigToggled,
    EndpointChanged,
    ErrorDismissed,
    MessageAppended,
    MessagePosted,
    SendFailed,
    SendStarted,
    SendSucceeded,
    TurnSettled,
)
from .models import AppState, Message, Sender, TurnPhase
from .reducer import BANNER_PREFIX, FAILURE_NOTICE, reduce
from .session import new_session_id
from .store import WELCOME_MESSAGE, ConversationStore

__all__ = [
    "Action",
    "AppState",
    "BANNER_PREFIX",
    "ConfigSaved",
    "ConfigToggled",
    "ConversationStore",
    "EndpointChanged",
    "ErrorDismissed",
    "FAILURE_NOTICE",
    "Message",
    "MessageAppended",
    "MessagePosted",
    "Sender",
    "SendFailed",
    "SendStarted",
    "SendSucceeded",
    "TurnPhase",
    "TurnSettled",
    "WELCOME_MESSAGE",
    "new_session_id",
    "reduce",
]
