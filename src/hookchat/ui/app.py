"""Main Textual TUI application.

Orchestrates the UI components: every user action is dispatched to the
conversation store, and the view is redrawn from the resulting state.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import Footer, Header, Static

from ..chat import ChatController, PendingTurn, SendRejection
from ..conversation import (
    AppState,
    ConfigSaved,
    ConfigToggled,
    ConversationStore,
    EndpointChanged,
    ErrorDismissed,
    Sender,
    SendFailed,
    TurnSettled,
)
from ..webhook import WebhookClient
from .config import (
    APP_TITLE,
    INPUT_HINT,
    INPUT_PLACEHOLDER,
    NOT_CONFIGURED_NOTICE,
    STATUS_CONNECTED,
    STATUS_NOT_CONFIGURED,
    LogLevel,
)
from .styles import APP_CSS
from .themes import CALENDAR_INDIGO
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    ConfigPanel,
    DebugPanel,
    ErrorBanner,
    TypingIndicator,
)


class HookchatApp(App):
    """Textual chat widget relaying messages to a webhook."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+g", "toggle_config", "Config"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("escape", "dismiss_error", "Dismiss", show=False),
    ]

    def __init__(
        self,
        client: WebhookClient,
        endpoint_url: str = "",
        log_level: str | None = None,
        session_id: str | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self._store = ConversationStore(endpoint_url=endpoint_url, session_id=session_id)
        self._controller = ChatController(self._store, client)
        self._unsubscribe = None

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def controller(self) -> ChatController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ConfigPanel(id="config-panel", url=self._store.state.endpoint_url)
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield DebugPanel(id="debug-panel")
        yield ErrorBanner(id="error-banner")

        with Vertical(id="bottom-bar"):
            yield Static(NOT_CONFIGURED_NOTICE, id="input-notice")
            yield ChatInputBar(id="chat-input-bar", placeholder=INPUT_PLACEHOLDER)
            yield Static(INPUT_HINT, id="input-hint")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(CALENDAR_INDIGO)
        self.theme = "calendar-indigo"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._controller.set_debug_callback(self._route_debug)
        self._unsubscribe = self._store.subscribe(self._render_state)
        self._render_state(self._store.state)
        log_panel.debug("TUI", f"Session {self._store.session_id}")

        if self._store.state.is_configured:
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        else:
            self.query_one("#config-panel", ConfigPanel).focus_input()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        try:
            log_panel = self.query_one("#debug-panel", DebugPanel)
        except NoMatches:
            # Late message from a request abandoned on exit
            return
        if level == "debug":
            log_panel.debug(component, message)
        elif level == "info":
            log_panel.info(component, message)
        elif level == "warning":
            log_panel.warning(component, message)
        elif level == "error":
            log_panel.error(component, message)

    def _render_state(self, state: AppState) -> None:
        """Bring every widget in line with the given state."""
        self.sub_title = STATUS_CONNECTED if state.is_configured else STATUS_NOT_CONFIGURED

        self.query_one("#config-panel", ConfigPanel).display = state.show_config
        self.query_one("#chat-history", ChatHistoryWidget).sync(state.messages)
        self.query_one("#typing-indicator", TypingIndicator).display = state.is_sending

        banner = self.query_one("#error-banner", ErrorBanner)
        if state.error:
            banner.show_error(state.error)
        else:
            banner.hide()

        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.display = state.is_configured
        self.query_one("#input-hint", Static).display = state.is_configured
        self.query_one("#input-notice", Static).display = not state.is_configured
        input_bar.set_busy(state.is_sending)

    def on_config_panel_url_changed(self, event: ConfigPanel.UrlChanged) -> None:
        if event.url != self._store.state.endpoint_url:
            self._store.dispatch(EndpointChanged(event.url))

    def on_config_panel_saved(self, event: ConfigPanel.Saved) -> None:
        state = self._store.dispatch(ConfigSaved())
        if state.is_configured:
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        else:
            self.notify("Enter a webhook URL first", severity="warning", timeout=3)

    def on_error_banner_dismissed(self, event: ErrorBanner.Dismissed) -> None:
        self._store.dispatch(ErrorDismissed())

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        turn = self._controller.submit(event.value)
        if isinstance(turn, SendRejection):
            if turn is SendRejection.NOT_CONFIGURED:
                self.notify("Configure the webhook URL first", severity="warning", timeout=3)
            return

        self.query_one("#chat-input-bar", ChatInputBar).accept()
        self._complete_turn(turn)

    @work(group="webhook", exit_on_error=False)
    async def _complete_turn(self, turn: PendingTurn) -> None:
        """Await the webhook reply as a background async worker.

        The controller guarantees a single turn in flight, so this worker
        is never started while another is running.
        """
        try:
            reply = await self._controller.complete(turn)
        except Exception as e:
            self._route_debug("error", "TUI", f"Exception: {e!r}")
            self._store.dispatch(SendFailed(str(e) or type(e).__name__))
            self._store.dispatch(TurnSettled())
            self.notify(f"Error: {str(e)[:50]}", severity="error", timeout=5)
            return
        if reply.sender is Sender.SYSTEM:
            self.notify("Message failed", severity="error", timeout=5)

    def action_toggle_config(self) -> None:
        """Show or hide the config panel."""
        state = self._store.dispatch(ConfigToggled())
        if state.show_config:
            self.query_one("#config-panel", ConfigPanel).focus_input()

    def action_dismiss_error(self) -> None:
        if self._store.state.error:
            self._store.dispatch(ErrorDismissed())

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    client: WebhookClient,
    endpoint_url: str = "",
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Webhook client used for every turn; closed on exit
        endpoint_url: Initial webhook URL ("" opens with the config panel empty)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = HookchatApp(client=client, endpoint_url=endpoint_url, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await client.close()
