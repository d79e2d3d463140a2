"""Terminal UI module for hookchat.

Provides a Textual-based chat widget for a webhook-backed assistant.

Module structure (each module hides a design decision):
- config.py: Display text and numeric constants
- formatting.py: How times and senders are shown
- widgets.py: Custom widgets (input history, config panel, log rendering)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- app.py: Application orchestration (user interaction flow)
"""

from .app import HookchatApp, run_textual_tui
from .config import LogLevel
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    ConfigPanel,
    DebugPanel,
    ErrorBanner,
    TypingIndicator,
)

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ConfigPanel",
    "DebugPanel",
    "ErrorBanner",
    "HookchatApp",
    "LogLevel",
    "TypingIndicator",
    "run_textual_tui",
]
