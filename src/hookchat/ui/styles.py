"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout, top to bottom: header, config panel, chat history, typing
indicator, log panel, error banner, input bar, footer.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Single Column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Config Panel - Webhook URL
   ============================================ */
#config-panel {
    height: auto;
    margin: 0 1;
    padding: 0 1;
    background: $surface;
    border: round $border;

    & .config-title {
        color: $foreground;
        text-style: bold;
    }

    & .config-row {
        height: auto;
    }

    & .config-hint {
        color: $text-muted;
    }
}

#webhook-url {
    width: 1fr;
}

/* ============================================
   Chat History Panel - Primary Focus Area
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages - Conversation Display
   ============================================ */
.chat-message {
    height: auto;
    max-width: 80%;
    margin: 0 0 1 0;
    padding: 0 2;
    border: none;
    background: transparent;
}

/* User messages - right aligned, indigo */
.user-message {
    margin-left: 20%;
    border-right: tall $primary;
    background: $primary 25%;

    & .message-header {
        color: $primary-lighten-2;
        text-style: bold;
        text-align: right;
    }
}

/* Assistant messages - left aligned */
.assistant-message {
    border-left: tall $secondary;
    background: $surface;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

/* System notices - centred, red */
.system-message {
    margin-left: 10%;
    border: round $error;
    background: $error 10%;

    & .message-header {
        color: $error;
        text-style: bold;
        text-align: center;
    }

    & .message-content {
        color: $error-lighten-2;
        text-align: center;
    }
}

.message-header {
    height: auto;
    padding: 0;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

/* ============================================
   Typing Indicator
   ============================================ */
#typing-indicator {
    height: 1;
    margin: 0 2;

    & .typing-label {
        width: auto;
        color: $secondary;
        padding-right: 1;
    }

    & LoadingIndicator {
        width: 8;
        height: 1;
        color: $text-muted;
        background: transparent;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    margin: 0 1;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
}

/* ============================================
   Error Banner
   ============================================ */
#error-banner {
    height: auto;
    padding: 0 1;
    background: $error 15%;
    border-top: solid $error;

    & #error-text {
        width: 1fr;
        color: $error-lighten-2;
        padding: 1 0;
    }

    & Button {
        min-width: 11;
    }
}

/* ============================================
   Bottom Bar - Input + hint
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#input-notice, #input-hint {
    width: 100%;
    text-align: center;
    color: $text-muted;
}

#input-notice {
    padding: 1 0;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;

    &:disabled {
        color: $text-disabled;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
    }

    &:disabled {
        background: $surface;
        border: tall $border;
        color: $text-disabled;
    }
}

/* ============================================
   Markdown Content Styling
   ============================================ */
Markdown {
    margin: 0;
    padding: 0;
    background: transparent;
}

MarkdownFence {
    background: $panel;
    margin: 1 0;
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}

Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-error {
        border: tall $error;
        background: $error 12%;
    }
}
"""
