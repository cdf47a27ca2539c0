"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Single Column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
    align-horizontal: center;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    width: 100%;
    max-width: 110;
    height: 1fr;
    background: $surface 60%;
    border: round $primary 60%;
    border-title-color: $accent;
    border-title-style: bold;
    border-title-align: center;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 1 0 0 0;
    padding: 0 2;
    background: transparent;
}

/* Assistant on the left, user on the right */
.assistant-message {
    border-left: tall $secondary;
    background: $surface;
    margin-right: 12;

    & .message-header {
        color: $accent;
    }
}

.user-message {
    border-right: tall $success;
    background: $panel;
    margin-left: 12;

    & .message-header {
        color: $success;
        text-align: right;
    }
}

.message-header {
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    margin: 0;
    padding: 0;
}

.message-timestamp {
    height: auto;
    color: $text-muted;
}

/* ============================================
   Typing Indicator
   ============================================ */
TypingIndicator {
    width: auto;
    height: auto;
    margin: 1 0 0 0;
    padding: 0 2;
    border-left: tall $secondary;
    background: $surface;
    color: $text-muted;
    text-style: bold;
}

/* ============================================
   Chat Input Bar - Text Entry + Submit
   ============================================ */
ChatInputBar {
    width: 100%;
    max-width: 110;
    height: 3;
    margin: 1 0 0 0;
}

#chat-input {
    width: 1fr;
    border: tall $panel;
    background: $surface;

    &:focus {
        border: tall $primary;
    }
}

#send-btn {
    width: 12;
    min-width: 8;
    background: $surface;
    color: $foreground;
    border: tall $panel;
    text-style: bold;

    &:hover {
        background: $panel;
    }
}

ChatInputBar.-busy #send-btn {
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    width: 100%;
    max-width: 110;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $surface;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin-top: 1;
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
    background: $background;
    margin: 1 0;
}

Header {
    background: $background;
    color: $accent;
}

Footer {
    background: $background;
}
"""
