"""Session identifier generation."""

import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 9


def new_session_id() -> str:
    """Create a token like ``session_1760870400000_k3j9x0a2q``.

    Low collision probability only; the token is never persisted.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(SUFFIX_LENGTH))
    return f"session_{millis}_{suffix}"
