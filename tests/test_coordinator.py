"""Unit tests for the request coordinator and chat session lifecycle."""
import asyncio

import pytest
from fakes import FIXED_TIME, FakeLLM, GatedLLM
from hypothesis import given, settings
from hypothesis import strategies as st

from slyme.chat import (
    ADVISOR_GENERATION,
    APOLOGY_TEXT,
    UNABLE_TO_ANSWER_TEXT,
    ChatSession,
    RequestState,
    Role,
)
from slyme.llm import HarmBlockThreshold, HarmCategory


class TestScenarios:
    """End-to-end submission scenarios with mocked remote calls."""

    @pytest.mark.asyncio
    async def test_successful_call_appends_pair(self, make_session):
        llm = FakeLLM("Consider biology or biochemistry.")
        session = make_session(llm)

        accepted = await session.submit("What majors are good for medicine?")

        assert accepted is True
        user, assistant = session.messages[-2:]
        assert user.role == Role.USER
        assert user.content == "What majors are good for medicine?"
        assert assistant.role == Role.ASSISTANT
        assert assistant.content == "Consider biology or biochemistry."
        assert user.timestamp == assistant.timestamp == FIXED_TIME
        assert session.in_flight is False

    @pytest.mark.asyncio
    async def test_failing_call_appends_apology(self, make_session):
        llm = FakeLLM(RuntimeError("network unreachable"))
        session = make_session(llm)

        accepted = await session.submit("asdf")

        assert accepted is True
        user, assistant = session.messages[-2:]
        assert user.content == "asdf"
        assert assistant.content == APOLOGY_TEXT
        assert session.in_flight is False

    @pytest.mark.asyncio
    async def test_empty_reply_uses_fallback(self, make_session):
        session = make_session(FakeLLM(""))

        await session.submit("Is a gap year a good idea?")

        assert session.messages[-1].content == UNABLE_TO_ANSWER_TEXT

    @pytest.mark.asyncio
    async def test_submission_while_pending_is_ignored(self, make_session):
        llm = GatedLLM("later")
        session = make_session(llm)

        first = asyncio.create_task(session.submit("first question"))
        await asyncio.sleep(0)

        assert session.in_flight is True
        assert await session.submit("second question") is False
        assert len(session.messages) == 1
        assert len(llm.calls) == 1

        llm.release()
        assert await first is True
        assert [m.content for m in session.messages[1:]] == ["first question", "later"]


class TestAdmissionControl:
    """Tests for rejected submissions."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", " ", "\n\t  "])
    async def test_blank_submission_is_noop(self, make_session, text):
        llm = FakeLLM("unused")
        session = make_session(llm)
        session.set_draft(text)

        assert await session.submit(text) is False
        assert len(session.messages) == 1
        assert session.in_flight is False
        assert session.draft == text
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_in_flight_is_set_before_first_suspension(self, make_session):
        llm = GatedLLM("ok")
        session = make_session(llm)
        states = []
        session.subscribe(lambda: states.append(session.state))

        task = asyncio.create_task(session.submit("question"))
        await asyncio.sleep(0)
        assert session.state is RequestState.AWAITING_REPLY
        assert session.pending_reply is True

        llm.release()
        await task
        assert states[0] is RequestState.AWAITING_REPLY
        assert states[-1] is RequestState.IDLE
        assert session.pending_reply is False


class TestPostconditions:
    """Tests for state after a call settles."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("outcome", ["answer", "", ValueError("blocked by safety filter")])
    async def test_idle_and_draft_cleared_after_settlement(self, make_session, outcome):
        session = make_session(FakeLLM(outcome))
        session.set_draft("How do I pick a college?")

        await session.submit()

        assert session.in_flight is False
        assert session.state is RequestState.IDLE
        assert session.draft == ""
        assert len(session.messages) == 3

    @pytest.mark.asyncio
    async def test_draft_kept_during_call(self, make_session):
        llm = GatedLLM("ok")
        session = make_session(llm)
        session.set_draft("What is early decision?")

        task = asyncio.create_task(session.submit())
        await asyncio.sleep(0)
        assert session.draft == "What is early decision?"

        llm.release()
        await task
        assert session.draft == ""

    @pytest.mark.asyncio
    async def test_cancellation_resets_state_without_appending(self, make_session):
        llm = GatedLLM("never")
        session = make_session(llm)

        task = asyncio.create_task(session.submit("question"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert session.in_flight is False
        assert len(session.messages) == 1

    @pytest.mark.asyncio
    async def test_timeout_counts_as_failure(self, make_session):
        session = make_session(GatedLLM("too late"), request_timeout=0.01)
        errors = []
        session.set_debug_callback(
            lambda level, component, message: errors.append(message) if level == "error" else None
        )

        await session.submit("question")

        assert session.messages[-1].content == APOLOGY_TEXT
        assert session.in_flight is False
        assert any("timed out" in message for message in errors)


class TestRemoteRequest:
    """Tests for what is sent to the provider."""

    @pytest.mark.asyncio
    async def test_request_is_stateless_with_fixed_settings(self, make_session):
        llm = FakeLLM("one", "two")
        session = make_session(llm)

        await session.submit("first")
        await session.submit("second")

        messages, sent_settings = llm.calls[1]
        assert [(m.role, m.content) for m in messages] == [
            ("system", "You are a college advisor."),
            ("user", "second"),
        ]
        assert sent_settings is ADVISOR_GENERATION

    def test_advisor_generation_settings(self):
        assert ADVISOR_GENERATION.temperature == 0.6
        assert ADVISOR_GENERATION.top_k == 1
        assert ADVISOR_GENERATION.top_p == 0.9
        assert ADVISOR_GENERATION.max_output_tokens == 2048
        assert {s.category for s in ADVISOR_GENERATION.safety_settings} == set(HarmCategory)
        assert all(
            s.threshold is HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE
            for s in ADVISOR_GENERATION.safety_settings
        )

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, make_session):
        session = make_session(FakeLLM(ConnectionError("refused")))
        logged = []
        session.set_debug_callback(lambda *entry: logged.append(entry))

        await session.submit("question")

        errors = [entry for entry in logged if entry[0] == "error"]
        assert len(errors) == 1
        assert errors[0][1] == "LLM"
        assert "refused" in errors[0][2]


@settings(max_examples=25, deadline=None)
@given(st.lists(
    st.one_of(st.text(), st.sampled_from(["", "  ", "Which SAT score do I need?"])),
    max_size=12,
))
def test_transcript_length_is_one_plus_two_per_accepted(prompts):
    """Property test: N accepted submissions yield 1 + 2N entries, in order."""
    session = ChatSession(
        FakeLLM("reply"),
        greeting="Hello",
        system_prompt="You are a college advisor.",
        clock=lambda: FIXED_TIME,
    )

    async def _run() -> list[str]:
        accepted = []
        for prompt in prompts:
            if await session.submit(prompt):
                accepted.append(prompt)
        return accepted

    accepted = asyncio.run(_run())

    assert len(session.messages) == 1 + 2 * len(accepted)
    assert [m.content for m in session.messages[1::2]] == accepted
    assert all(m.role == Role.ASSISTANT for m in session.messages[2::2])
    assert accepted == [p for p in prompts if p.strip()]
