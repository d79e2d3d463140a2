"""Actions accepted by the conversation reducer.

Each action is a small immutable record describing one thing that happened.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .models import Message, Sender, utc_now


@dataclass(frozen=True)
class EndpointChanged:
    """The user edited the webhook URL field."""

    url: str


@dataclass(frozen=True)
class ConfigSaved:
    """The user pressed Save on the config panel."""


@dataclass(frozen=True)
class ConfigToggled:
    """The user asked to show or hide the config panel."""


@dataclass(frozen=True)
class MessageAppended:
    """Append an already built message."""

    message: Message


@dataclass(frozen=True)
class MessagePosted:
    """Append a new message; the reducer assigns its id."""

    sender: Sender
    text: str
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class SendStarted:
    """A request was issued for the latest user message."""


@dataclass(frozen=True)
class SendSucceeded:
    """The webhook answered with a reply."""

    reply: str
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class SendFailed:
    """The request failed; ``error`` is the raw error text for the banner."""

    error: str
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class TurnSettled:
    """The turn finished and the widget accepts input again."""


@dataclass(frozen=True)
class ErrorDismissed:
    """The user closed the error banner."""


Action = (
    EndpointChanged
    | ConfigSaved
    | ConfigToggled
    | MessageAppended
    | MessagePosted
    | SendStarted
    | SendSucceeded
    | SendFailed
    | TurnSettled
    | ErrorDismissed
)
