"""Text formatting utilities for the TUI.

Hides how times and senders are shown to the user.
"""

from datetime import datetime

from ..conversation import Sender

SENDER_LABELS = {
    Sender.USER: "You",
    Sender.ASSISTANT: "Assistant",
    Sender.SYSTEM: "Notice",
}

SENDER_ICONS = {
    Sender.USER: ">",
    Sender.ASSISTANT: "<",
    Sender.SYSTEM: "!",
}


def format_time(moment: datetime) -> str:
    """Format as local clock time without seconds, e.g. ``3:07 PM``."""
    local = moment.astimezone()
    hour = local.hour % 12 or 12
    return f"{hour}:{local:%M} {'AM' if local.hour < 12 else 'PM'}"


def format_header(sender: Sender, moment: datetime) -> str:
    """Header line shown above a message."""
    return f"{SENDER_ICONS[sender]} {SENDER_LABELS[sender]} [{format_time(moment)}]"


def truncate(text: str, limit: int) -> str:
    """Shorten text to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."
