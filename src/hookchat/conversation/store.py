"""In-memory conversation store.

Holds the current ``AppState`` for the lifetime of the session and notifies
subscribers after every change. Data is lost when the application exits.
"""

from collections.abc import Callable

from .actions import Action, MessageAppended, MessagePosted
from .models import AppState, Message, Sender
from .reducer import reduce
from .session import new_session_id

WELCOME_MESSAGE = (
    "Hi! I'm your calendar assistant. I can help you schedule meetings, "
    "check your availability, and manage your events. What would you like to do?"
)

Listener = Callable[[AppState], None]


class ConversationStore:
    """Ordered, append-only conversation plus the widget state around it.

    Example:
        store = ConversationStore(endpoint_url="https://n8n.example/webhook/abc")
        store.subscribe(lambda state: print(len(state.messages)))
        store.append(message)
    """

    def __init__(
        self,
        endpoint_url: str = "",
        session_id: str | None = None,
        welcome_message: str | None = WELCOME_MESSAGE,
    ):
        self._state = AppState(
            session_id=session_id or new_session_id(),
            endpoint_url=endpoint_url,
        )
        self._listeners: list[Listener] = []
        if welcome_message:
            self._state = reduce(
                self._state, MessagePosted(Sender.ASSISTANT, welcome_message)
            )

    @property
    def state(self) -> AppState:
        """Current application state."""
        return self._state

    @property
    def session_id(self) -> str:
        return self._state.session_id

    def dispatch(self, action: Action) -> AppState:
        """Apply an action through the reducer and notify subscribers."""
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def append(self, message: Message) -> None:
        """Append a message to the conversation."""
        self.dispatch(MessageAppended(message))

    def post(self, sender: Sender, text: str) -> Message:
        """Append a new message with the next id and return it."""
        state = self.dispatch(MessagePosted(sender, text))
        return state.messages[-1]

    def all(self) -> tuple[Message, ...]:
        """All messages in insertion order."""
        return self._state.messages

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the new state after every change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
