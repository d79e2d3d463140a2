"""Turn handling between the conversation store and the webhook client.

One turn is: append the user message, POST it, append the reply or a failure
notice. Only one turn is in flight at a time; a send attempt while another
is in flight is rejected, not queued.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..conversation import (
    ConversationStore,
    Message,
    Sender,
    SendFailed,
    SendStarted,
    SendSucceeded,
    TurnSettled,
)
from ..webhook import TransportError, WebhookClient


class SendRejection(str, Enum):
    """Why a send attempt was ignored."""

    EMPTY = "empty"
    NOT_CONFIGURED = "not_configured"
    BUSY = "busy"


@dataclass(frozen=True)
class PendingTurn:
    """A user message that has been appended and is waiting for its reply."""

    message: Message
    endpoint_url: str
    session_id: str


class ChatController:
    """Runs turns against a webhook and records them in the store.

    Example:
        controller = ChatController(store, client)
        turn = controller.submit("What's on my calendar tomorrow?")
        if isinstance(turn, PendingTurn):
            reply = await controller.complete(turn)
    """

    def __init__(
        self,
        store: ConversationStore,
        client: WebhookClient,
        debug_callback: Any | None = None,
    ):
        self._store = store
        self._client = client
        self._debug_callback: Any | None = None
        if debug_callback is not None:
            self.set_debug_callback(debug_callback)

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def client(self) -> WebhookClient:
        return self._client

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for this controller and its client.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._client.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def check(self, text: str) -> SendRejection | None:
        """Return why ``text`` cannot be sent now, or None if it can."""
        state = self._store.state
        if not text.strip():
            return SendRejection.EMPTY
        if not state.is_configured:
            return SendRejection.NOT_CONFIGURED
        if state.is_sending:
            return SendRejection.BUSY
        return None

    def submit(self, text: str) -> PendingTurn | SendRejection:
        """Start a turn: append the user message and enter the sending phase.

        Returns:
            PendingTurn to pass to complete(), or the reason it was rejected
        """
        rejection = self.check(text)
        if rejection is not None:
            self._debug("debug", "Chat", f"Send ignored: {rejection.value}")
            return rejection

        message = self._store.post(Sender.USER, text)
        state = self._store.dispatch(SendStarted())
        self._debug("info", "Chat", f"Turn started (message #{message.id})")
        return PendingTurn(
            message=message,
            endpoint_url=state.endpoint_url.strip(),
            session_id=state.session_id,
        )

    async def complete(self, turn: PendingTurn) -> Message:
        """Perform the request for a pending turn and record the outcome.

        Never raises TransportError: failures become a system message and a
        banner. The store is back in the idle phase when this returns.

        Returns:
            The assistant or system message that was appended
        """
        self._client.endpoint_url = turn.endpoint_url
        try:
            reply = await self._client.send(
                turn.message.text,
                turn.session_id,
                sent_at=turn.message.timestamp,
            )
        except TransportError as e:
            self._debug("error", "Chat", f"Error sending message: {e}")
            state = self._store.dispatch(SendFailed(str(e)))
        else:
            state = self._store.dispatch(SendSucceeded(reply.text))
        finally:
            self._store.dispatch(TurnSettled())
        return state.messages[-1]

    async def send(self, text: str) -> Message | None:
        """Submit and complete a turn.

        Returns:
            The reply (or failure notice) message, None if the send was rejected
        """
        turn = self.submit(text)
        if isinstance(turn, SendRejection):
            return None
        return await self.complete(turn)
