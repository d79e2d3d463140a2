"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Chat message rendering
- Config panel and error banner layout
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, LoadingIndicator, Markdown, RichLog, Static, TextArea

from ..conversation import Message, Sender
from .config import (
    CONFIG_HINT,
    CONFIG_TITLE,
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    URL_PLACEHOLDER,
    LogLevel,
)
from .formatting import format_header, truncate


class ConfigPanel(Vertical):
    """Webhook URL field with a Save button."""

    class UrlChanged(TextualMessage):
        """Sent on every edit of the URL field."""

        def __init__(self, url: str) -> None:
            super().__init__()
            self.url = url

    class Saved(TextualMessage):
        """Sent when the user presses Save or Enter in the URL field."""

    def __init__(self, *args, url: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._initial_url = url

    def compose(self):
        yield Static(CONFIG_TITLE, classes="config-title")
        with Horizontal(classes="config-row"):
            yield Input(value=self._initial_url, placeholder=URL_PLACEHOLDER, id="webhook-url")
            yield Button("Save", id="save-btn", variant="primary")
        yield Static(CONFIG_HINT, classes="config-hint")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.UrlChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Saved())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            event.stop()
            self.post_message(self.Saved())

    def focus_input(self) -> None:
        self.query_one("#webhook-url", Input).focus()


class ErrorBanner(Horizontal):
    """Dismissible banner showing the last send error."""

    class Dismissed(TextualMessage):
        """Sent when the user presses Dismiss."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.display = False

    def compose(self):
        yield Static("", id="error-text", markup=False)
        yield Button("Dismiss", id="dismiss-btn", variant="error")

    def show_error(self, text: str) -> None:
        self.query_one("#error-text", Static).update(text)
        self.display = True

    def hide(self) -> None:
        self.display = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "dismiss-btn":
            event.stop()
            self.post_message(self.Dismissed())


class TypingIndicator(Horizontal):
    """Shown in place of the pending reply while a request is in flight."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.display = False

    def compose(self):
        yield Static("Assistant", classes="typing-label")
        yield LoadingIndicator()


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, placeholder: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._placeholder = placeholder
        self._history: list[str] = []
        self._history_index: int = -1
        self._busy = False

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        text_area.placeholder = self._placeholder
        yield text_area
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Submit message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        # Disable cursor line highlighting to remove visual artifacts
        text_area.highlight_cursor_line = False

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the Send button disabled for blank input."""
        self._update_send_button()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: shift+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _update_send_button(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not self.text.strip()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:  # Up
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:  # Down
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self._busy:
            return
        value = self.text
        if value.strip():
            self.post_message(self.Submitted(value))

    def accept(self) -> None:
        """Record the current text in history and clear the input."""
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""

    def set_busy(self, busy: bool) -> None:
        """Disable input while a request is in flight."""
        if busy == self._busy:
            return
        self._busy = busy
        self.query_one("#chat-input", TextArea).disabled = busy
        self._update_send_button()
        if not busy:
            self.focus_input()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        """Update subtitle to show current log level."""
        if self.display:
            level_name = LogLevel.name(self._log_level)
            self.border_subtitle = f"Level: {level_name}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, Webhook)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")
        level_name = LogLevel.name(level)

        component_colors = {
            "TUI": "cyan",
            "Chat": "green",
            "Webhook": "magenta",
        }
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] "
            f"{escape(truncate(message, LOG_MAX_MESSAGE_LENGTH))}"
        )

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        else:
            self.show()
            return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history, rendered from the store's message sequence."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    @property
    def rendered_count(self) -> int:
        return len(self._messages)

    def sync(self, messages: Sequence[Message]) -> None:
        """Render any messages not yet shown.

        The sequence is append-only, so only the tail is new.
        """
        new_messages = messages[len(self._messages):]
        if not new_messages:
            return
        for msg in new_messages:
            self._messages.append(msg)
            self._render_message(msg)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last assistant response."""
        for msg in reversed(self._messages):
            if msg.sender is Sender.ASSISTANT:
                return msg.text
        return None

    def _render_message(self, msg: Message) -> None:
        """Render a single message to the display."""
        container = Vertical(classes=f"chat-message {msg.sender.value}-message")
        container.compose_add_child(
            Static(format_header(msg.sender, msg.timestamp), classes="message-header", markup=False)
        )
        if msg.sender is Sender.ASSISTANT:
            # Automation replies are often markdown
            container.compose_add_child(Markdown(msg.text, classes="message-content"))
        else:
            container.compose_add_child(Static(msg.text, classes="message-content", markup=False))
        self.mount(container)
