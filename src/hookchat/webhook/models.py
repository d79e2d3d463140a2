"""Wire format of the webhook exchange.

Hides the request body layout and the rules for pulling a reply out of
whatever JSON the automation service returns.
"""

import json
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Checked in this order; the first present one wins
REPLY_FIELDS = ("response", "message", "output")


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2026-10-19T09:30:00.000Z``.

    Naive datetimes are taken to be local time.
    """
    utc = moment.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def to_json_text(value: Any) -> str:
    """Compact JSON rendering, e.g. ``{"foo":"bar"}``."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class WebhookPayload(BaseModel):
    """Body POSTed to the webhook for each user message."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(description="The user's text, as typed")
    session_id: str = Field(alias="sessionId", description="Per-session correlation token")
    timestamp: str = Field(description="Send time, ISO-8601 UTC")

    def to_body(self) -> dict[str, str]:
        """Serialize with the wire field names."""
        return self.model_dump(by_alias=True)


class WebhookReply(BaseModel):
    """Reply extracted from a successful webhook response."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text to show as the assistant message")
    status_code: int = Field(description="HTTP status of the response")
    body: Any = Field(default=None, description="Parsed JSON body")


def build_payload(text: str, session_id: str, sent_at: datetime) -> WebhookPayload:
    """Build the request body for one user message."""
    return WebhookPayload(
        message=text,
        session_id=session_id,
        timestamp=format_timestamp(sent_at),
    )


def _is_present(value: Any) -> bool:
    # Missing, null, false, zero and "" all count as absent
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and value == value
    return True


def extract_reply_text(body: Any) -> str:
    """Pick the reply out of a parsed JSON body.

    Uses the first present field among ``response``, ``message`` and
    ``output``. Falls back to the whole body rendered as JSON.

    Examples:
        >>> extract_reply_text({"response": "Meeting booked"})
        'Meeting booked'
        >>> extract_reply_text({"foo": "bar"})
        '{"foo":"bar"}'
    """
    if isinstance(body, dict):
        for key in REPLY_FIELDS:
            value = body.get(key)
            if _is_present(value):
                return value if isinstance(value, str) else to_json_text(value)
    return to_json_text(body)
