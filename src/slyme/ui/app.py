"""Main Textual TUI application.

Orchestrates the UI components around a single ChatSession. The session is
the only source of truth: widgets are refreshed from it whenever the
transcript, draft or request state changes.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..chat import ChatSession
from .config import APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import SLYME_SLATE
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class AdvisorApp(App):
    """Textual TUI for the college advisor chat."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        session: ChatSession,
        model_name: str = "unknown",
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._session = session
        self._model_name = model_name
        self._log_level = log_level
        self._unsubscribe = None

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield ChatInputBar(id="chat-input-bar")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(SLYME_SLATE)
        self.theme = "slyme-slate"
        self.sub_title = self._model_name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._session.set_debug_callback(self._route_debug)

        # First render: the greeting gets its timestamp from the local clock now
        self._session.start()
        self._unsubscribe = self._session.subscribe(self._refresh_view)
        self._refresh_view()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._session.set_debug_callback(None)

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route coordinator diagnostics to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.add_entry(component, message, LogLevel.from_string(level))

    def _refresh_view(self) -> None:
        """Mirror the session state into the widgets."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)

        chat.sync(self._session.messages)
        chat.set_pending(self._session.pending_reply)
        input_bar.value = self._session.draft
        input_bar.set_busy(self._session.in_flight)

    def on_chat_input_bar_draft_changed(self, event: ChatInputBar.DraftChanged) -> None:
        self._session.set_draft(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if self._session.in_flight or not self._session.draft.strip():
            return
        self._run_submission(self._session.draft)

    @work(group="submission")
    async def _run_submission(self, prompt: str) -> None:
        """Run one submission as a background async worker.

        Not exclusive: a second worker must not cancel the pending call. The
        coordinator turns any overlapping submission into a no-op.
        """
        try:
            await self._session.submit(prompt)
        except asyncio.CancelledError:
            self.query_one("#debug-panel", DebugPanel).warning("TUI", "Submission cancelled")
            raise

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self._session.last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    session: ChatSession,
    model_name: str = "unknown",
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        session: Chat session driving the conversation
        model_name: Shown in the header subtitle
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = AdvisorApp(session=session, model_name=model_name, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
