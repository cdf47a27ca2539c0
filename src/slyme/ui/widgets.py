"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering (markdown for assistant turns)
- Typing indicator
- Input bar enable/disable while a request is pending
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Markdown, RichLog, Static

from ..chat.models import Message, Role
from .config import (
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    SEND_BUSY_LABEL,
    SEND_LABEL,
    TYPING_INDICATOR_TEXT,
    LogLevel,
)


class MessageView(Vertical):
    """A single transcript entry. Clicking copies the raw content."""

    def __init__(self, message: Message, *args, **kwargs) -> None:
        css_class = "user-message" if message.role == Role.USER else "assistant-message"
        super().__init__(*args, classes=f"chat-message {css_class}", **kwargs)
        self.message = message

    def compose(self):
        yield Static(self._header_text(), classes="message-header")
        if self.message.role == Role.ASSISTANT:
            yield Markdown(self.message.content, classes="message-content")
        else:
            yield Static(self.message.content, classes="message-content", markup=False)

    def _header_text(self) -> str:
        name = "You" if self.message.role == Role.USER else "Slyme"
        if self.message.timestamp:
            return f"{name}  [dim]{self.message.timestamp}[/dim]"
        return name

    def update_message(self, message: Message) -> None:
        """Refresh the header when only the timestamp changed."""
        self.message = message
        try:
            header = self.query_one(".message-header", Static)
        except NoMatches:
            return  # not composed yet; compose reads self.message
        header.update(self._header_text())

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.message.content)
        self.app.notify("Message copied", timeout=2)


class TypingIndicator(Static):
    """Placeholder assistant bubble shown while a reply is pending."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(TYPING_INDICATOR_TEXT, *args, **kwargs)
        self.display = False


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript that mirrors the session's messages."""

    BORDER_TITLE = "College Advisor: Slyme 2.0"
    BORDER_SUBTITLE = "Conversation"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._views: list[MessageView] = []

    def compose(self):
        yield TypingIndicator(id="typing-indicator")

    @property
    def message_count(self) -> int:
        return len(self._views)

    def sync(self, messages: tuple[Message, ...]) -> None:
        """Render messages not yet shown and refresh changed ones.

        The transcript is append-only, so existing views are only updated
        in place (the greeting gets its timestamp after mounting).
        """
        for view, msg in zip(self._views, messages, strict=False):
            if view.message != msg:
                view.update_message(msg)

        new_messages = messages[len(self._views):]
        if not new_messages:
            return

        indicator = self.query_one(TypingIndicator)
        new_views = [MessageView(msg) for msg in new_messages]
        self._views.extend(new_views)
        self.mount(*new_views, before=indicator)
        self.border_subtitle = f"{len(self._views)} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def set_pending(self, pending: bool) -> None:
        """Show or hide the typing indicator."""
        indicator = self.query_one(TypingIndicator)
        indicator.display = pending
        if pending:
            self.call_after_refresh(self.scroll_end, animate=False)


class ChatInputBar(Horizontal):
    """Single-line question input with a Submit button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

    class DraftChanged(TextualMessage):
        """Message sent when the input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button(SEND_LABEL, id="send-btn")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.DraftChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.Submitted())

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", Input).value

    @value.setter
    def value(self, text: str) -> None:
        text_input = self.query_one("#chat-input", Input)
        if text_input.value != text:
            text_input.value = text

    def set_busy(self, busy: bool) -> None:
        """Disable input and button while a request is in flight."""
        text_input = self.query_one("#chat-input", Input)
        button = self.query_one("#send-btn", Button)
        text_input.disabled = busy
        button.disabled = busy
        button.label = SEND_BUSY_LABEL if busy else SEND_LABEL
        self.set_class(busy, "-busy")
        if not busy:
            text_input.focus()


class DebugPanel(RichLog):
    """Log panel for diagnostics with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Coordinator": "green",
        "LLM": "magenta",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
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
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
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
            component: Component name (TUI, Coordinator, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
