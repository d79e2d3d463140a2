"""UI configuration constants.

Centralizes magic numbers and display text for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Header
APP_TITLE = "Calendar Assistant"
STATUS_CONNECTED = "Connected"
STATUS_NOT_CONFIGURED = "Not configured"

# Config panel
CONFIG_TITLE = "Webhook Configuration"
URL_PLACEHOLDER = "https://your-n8n-instance.com/webhook/your-webhook-id"
CONFIG_HINT = (
    "Enter your webhook URL. The chat will send POST requests with: "
    "message, sessionId, timestamp"
)

# Input bar
INPUT_PLACEHOLDER = "Ask me to schedule a meeting, check your calendar..."
INPUT_HINT = "Press Ctrl+J to send, Enter for new line"
NOT_CONFIGURED_NOTICE = "Please configure your webhook URL above to start chatting"

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
