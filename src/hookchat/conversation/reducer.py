"""Single update function for the application state.

All state changes go through ``reduce``. It never mutates its input and
never performs I/O.
"""

from datetime import datetime

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

FAILURE_NOTICE = (
    "Error: Could not reach the assistant. "
    "Please check your webhook URL and try again."
)
BANNER_PREFIX = "Failed to send message: "


def _append(state: AppState, message: Message) -> AppState:
    # Clamp so timestamps never go backwards if the wall clock does
    if state.messages and message.timestamp < state.messages[-1].timestamp:
        message = message.model_copy(update={"timestamp": state.messages[-1].timestamp})
    return state.model_copy(
        update={
            "messages": state.messages + (message,),
            "next_id": max(state.next_id, message.id + 1),
        }
    )


def _post(state: AppState, sender: Sender, text: str, timestamp: datetime) -> AppState:
    message = Message(id=state.next_id, sender=sender, text=text, timestamp=timestamp)
    return _append(state, message)


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying ``action`` to ``state``.

    Raises:
        TypeError: If the action type is not recognised
    """
    if isinstance(action, EndpointChanged):
        return state.model_copy(update={"endpoint_url": action.url})

    if isinstance(action, ConfigSaved):
        if state.is_configured:
            return state.model_copy(update={"show_config": False})
        return state

    if isinstance(action, ConfigToggled):
        return state.model_copy(update={"show_config": not state.show_config})

    if isinstance(action, MessageAppended):
        return _append(state, action.message)

    if isinstance(action, MessagePosted):
        return _post(state, action.sender, action.text, action.timestamp)

    if isinstance(action, SendStarted):
        return state.model_copy(update={"phase": TurnPhase.SENDING, "error": None})

    if isinstance(action, SendSucceeded):
        state = _post(state, Sender.ASSISTANT, action.reply, action.timestamp)
        return state.model_copy(update={"phase": TurnPhase.SUCCEEDED})

    if isinstance(action, SendFailed):
        state = _post(state, Sender.SYSTEM, FAILURE_NOTICE, action.timestamp)
        return state.model_copy(
            update={"phase": TurnPhase.FAILED, "error": f"{BANNER_PREFIX}{action.error}"}
        )

    if isinstance(action, TurnSettled):
        return state.model_copy(update={"phase": TurnPhase.IDLE})

    if isinstance(action, ErrorDismissed):
        return state.model_copy(update={"error": None})

    raise TypeError(f"Unsupported action: {type(action).__name__}")
