"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Charcoal grays with muted text, close to a dark glassmorphism page
SLYME_SLATE = Theme(
    name="slyme-slate",
    primary="#9ca3af",      # Gray 400 - borders and titles
    secondary="#6b7280",    # Gray 500 - assistant accent
    accent="#e5e7eb",       # Gray 200 - highlights
    foreground="#d1d5db",   # Gray 300 - body text
    background="#111827",   # Gray 900 - deepest background
    success="#34d399",      # Emerald - user accent
    warning="#fbbf24",
    error="#f87171",
    surface="#1f2937",      # Gray 800 - bubbles
    panel="#374151",        # Gray 700 - input and panels
    dark=True,
    variables={
        "border": "#4b5563",
        "border-blurred": "#374151",

        "input-cursor-background": "#e5e7eb",
        "input-cursor-foreground": "#111827",
        "input-selection-background": "#9ca3af 30%",

        "scrollbar": "#374151",
        "scrollbar-hover": "#4b5563",
        "scrollbar-active": "#9ca3af",
        "scrollbar-background": "#1f2937",

        "footer-foreground": "#d1d5db",
        "footer-background": "#111827",
        "footer-key-foreground": "#e5e7eb",
        "footer-key-background": "#374151",

        "text-muted": "#6b7280",
        "text-disabled": "#4b5563",

        "link-color": "#93c5fd",
        "link-style": "underline",
    },
)
