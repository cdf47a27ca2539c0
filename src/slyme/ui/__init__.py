"""Terminal UI module for slyme.

Provides a Textual-based TUI for the advisor chat.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (transcript, typing indicator, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import AdvisorApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageView, TypingIndicator

__all__ = [
    "AdvisorApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MessageView",
    "TypingIndicator",
    "run_textual_tui",
]
