"""Smoke tests for the Textual TUI."""
import pytest
from fakes import FIXED_TIME, FakeLLM, GatedLLM
from textual.widgets import Button, Input

from slyme.chat import APOLOGY_TEXT
from slyme.ui import AdvisorApp, ChatHistoryWidget, ChatInputBar, DebugPanel, TypingIndicator


async def _submit(app: AdvisorApp, pilot, text: str) -> None:
    app.query_one("#chat-input", Input).value = text
    await pilot.pause()
    app.query_one(ChatInputBar).post_message(ChatInputBar.Submitted())
    await pilot.pause(0.05)


@pytest.mark.asyncio
async def test_greeting_is_stamped_on_mount(make_session):
    session = make_session(FakeLLM("unused"))
    app = AdvisorApp(session, model_name="fake-model")

    async with app.run_test() as pilot:
        await pilot.pause()
        assert session.messages[0].timestamp == FIXED_TIME
        assert app.query_one(ChatHistoryWidget).message_count == 1
        assert app.query_one(TypingIndicator).display is False


@pytest.mark.asyncio
async def test_submission_round_trip(make_session):
    llm = GatedLLM("Consider biology or biochemistry.")
    session = make_session(llm)
    app = AdvisorApp(session)

    async with app.run_test() as pilot:
        await _submit(app, pilot, "What majors are good for medicine?")

        # Pending: input disabled, typing indicator visible, nothing appended yet
        assert session.in_flight is True
        assert app.query_one(TypingIndicator).display is True
        assert app.query_one("#chat-input", Input).disabled is True
        assert app.query_one("#send-btn", Button).disabled is True
        assert app.query_one("#chat-input", Input).value == "What majors are good for medicine?"
        assert app.query_one(ChatHistoryWidget).message_count == 1

        llm.release()
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert session.in_flight is False
        assert app.query_one(ChatHistoryWidget).message_count == 3
        assert app.query_one(TypingIndicator).display is False
        assert app.query_one("#chat-input", Input).disabled is False
        assert app.query_one("#chat-input", Input).value == ""
        assert app.focused is app.query_one("#chat-input", Input)
        assert session.messages[-1].content == "Consider biology or biochemistry."


@pytest.mark.asyncio
async def test_failure_shows_apology_and_logs(make_session):
    session = make_session(FakeLLM(RuntimeError("quota exceeded")))
    app = AdvisorApp(session, log_level="error")

    async with app.run_test() as pilot:
        await _submit(app, pilot, "asdf")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert session.messages[-1].content == APOLOGY_TEXT
        assert app.query_one(ChatHistoryWidget).message_count == 3
        assert app.query_one(DebugPanel).display is True


@pytest.mark.asyncio
async def test_blank_submission_is_ignored(make_session):
    llm = FakeLLM("unused")
    session = make_session(llm)
    app = AdvisorApp(session)

    async with app.run_test() as pilot:
        await _submit(app, pilot, "   ")
        await app.workers.wait_for_complete()

        assert llm.calls == []
        assert app.query_one(ChatHistoryWidget).message_count == 1


@pytest.mark.asyncio
async def test_toggle_log_panel(make_session):
    app = AdvisorApp(make_session(FakeLLM("unused")))

    async with app.run_test() as pilot:
        panel = app.query_one(DebugPanel)
        assert panel.display is False
        await pilot.press("ctrl+d")
        assert panel.display is True
