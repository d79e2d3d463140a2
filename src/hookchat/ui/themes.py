"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Indigo on slate, matching the calendar assistant branding
CALENDAR_INDIGO = Theme(
    name="calendar-indigo",
    primary="#6366f1",      # Indigo 500 - user messages, main accent
    secondary="#a5b4fc",    # Indigo 300 - assistant accent
    accent="#fbbf24",       # Amber - highlights
    foreground="#e2e8f0",   # Slate 200 - text
    background="#0f172a",   # Slate 900 - deepest background
    success="#34d399",      # Emerald - send button
    warning="#fb923c",      # Orange - warnings
    error="#f87171",        # Red - failure notices and banner
    surface="#1e293b",      # Slate 800 - main surface
    panel="#111827",        # Gray 900 - panel backgrounds
    dark=True,
    variables={
        # Input styling
        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#6366f1 30%",

        # Border colors
        "border": "#334155",
        "border-blurred": "#1e293b",

        # Scrollbar styling
        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#6366f1",
        "scrollbar-background": "#111827",
        "scrollbar-corner-color": "#111827",

        # Footer styling
        "footer-foreground": "#cbd5e1",
        "footer-background": "#0f172a",
        "footer-key-foreground": "#fbbf24",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        # Text variants
        "text-muted": "#64748b",
        "text-disabled": "#334155",
    },
)
