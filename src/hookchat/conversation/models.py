"""Data models for the conversation.

These models define messages and the application state the view renders,
independent of how the view draws them.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Sender(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class TurnPhase(str, Enum):
    """Phase of the current turn.

    A turn moves IDLE -> SENDING -> SUCCEEDED | FAILED -> IDLE.
    """

    IDLE = "idle"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Message(BaseModel):
    """A single entry in the conversation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Sequential identifier, distinct within a session")
    sender: Sender = Field(description="Who produced the message")
    text: str = Field(description="Message text as displayed")
    timestamp: datetime = Field(default_factory=utc_now)


class AppState(BaseModel):
    """Complete state of the chat widget.

    Never mutated in place: the reducer returns a new instance for every
    action, so a listener holding an old state keeps a consistent snapshot.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(description="Token attached to every outgoing request")
    endpoint_url: str = Field(default="", description="Webhook URL, empty when unset")
    messages: tuple[Message, ...] = Field(default=())
    phase: TurnPhase = Field(default=TurnPhase.IDLE)
    error: str | None = Field(default=None, description="Banner text, None when dismissed")
    show_config: bool = Field(default=True, description="Whether the URL panel is open")
    next_id: int = Field(default=1, description="Id the next message will receive")

    @property
    def is_configured(self) -> bool:
        """True when an endpoint URL has been entered."""
        return bool(self.endpoint_url.strip())

    @property
    def is_sending(self) -> bool:
        return self.phase is TurnPhase.SENDING

    def can_send(self, text: str) -> bool:
        """Whether a message with this text may be sent right now."""
        return bool(text.strip()) and self.is_configured and not self.is_sending
