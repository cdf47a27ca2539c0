"""Request coordinator.

Mediates exactly one generation call at a time and reconciles the
conversation store when the call settles.

State machine:
    IDLE --accepted submit--> AWAITING_REPLY --call settles--> IDLE

The in-flight flag is checked and set before the first ``await``, so on a
single event loop it is the only mutual exclusion needed.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from ..llm import ChatMessage, GenerationSettings, LLMProvider
from .config import ADVISOR_GENERATION, APOLOGY_TEXT, UNABLE_TO_ANSWER_TEXT
from .errors import RemoteCallFailed
from .models import Message, RequestState, Role, format_timestamp
from .store import ConversationStore


def _truncate(text: str, limit: int = 50) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class RequestCoordinator:
    """Owns the lifecycle of the single outstanding generation request."""

    def __init__(
        self,
        store: ConversationStore,
        llm: LLMProvider,
        system_prompt: str,
        settings: GenerationSettings = ADVISOR_GENERATION,
        request_timeout: float | None = None,
        clock: Callable[[], str] = format_timestamp,
    ) -> None:
        """Initialize the coordinator.

        Args:
            store: Transcript to reconcile after each call
            llm: Provider that performs the remote generation call
            system_prompt: Persona framing sent with every call, never shown
            settings: Sampling and safety configuration for every call
            request_timeout: Seconds before a call counts as failed (None
                waits indefinitely)
            clock: Returns the display timestamp for appended messages
        """
        self._store = store
        self._llm = llm
        self._system_prompt = system_prompt
        self._settings = settings
        self._request_timeout = request_timeout
        self._clock = clock
        self._state = RequestState.IDLE
        self._listeners: list[Callable[[], None]] = []
        self._debug_callback: Any = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._state is RequestState.AWAITING_REPLY

    @property
    def pending_reply(self) -> bool:
        """Whether the typing indicator should show. Same lifetime as in_flight."""
        return self._state is RequestState.AWAITING_REPLY

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a state-change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for diagnostics.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _set_state(self, state: RequestState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener()

    async def submit(self, prompt_text: str) -> bool:
        """Submit a question to the advisor.

        Empty or whitespace-only text, or a submission while another request
        is in flight, is silently ignored. Otherwise the call runs to
        settlement and the transcript gains a user/assistant pair. Remote
        failures become an apology reply and are never raised.

        Returns:
            True if the submission was accepted (and has now settled)
        """
        if not prompt_text.strip():
            self._debug("debug", "Coordinator", "Ignored empty submission")
            return False
        if self.in_flight:
            self._debug("debug", "Coordinator", "Ignored submission while a request is in flight")
            return False

        self._set_state(RequestState.AWAITING_REPLY)
        self._debug("info", "Coordinator", f"Submitting: '{_truncate(prompt_text)}'")

        try:
            try:
                content = await self._generate(prompt_text)
            except RemoteCallFailed as e:
                self._debug("error", "LLM", f"Remote call failed: {e}")
                reply = APOLOGY_TEXT
            else:
                if content:
                    reply = content
                else:
                    self._debug("warning", "LLM", "Empty response, using fallback text")
                    reply = UNABLE_TO_ANSWER_TEXT

            timestamp = self._clock()
            self._store.append(
                Message(role=Role.USER, content=prompt_text, timestamp=timestamp),
                Message(role=Role.ASSISTANT, content=reply, timestamp=timestamp),
            )
        finally:
            self._store.set_draft("")
            self._set_state(RequestState.IDLE)

        return True

    async def _generate(self, prompt_text: str) -> str:
        """Perform the remote call with the prompt as the only turn.

        Raises:
            RemoteCallFailed: If the provider raises or the timeout expires
        """
        messages = [
            ChatMessage(role="system", content=self._system_prompt),
            ChatMessage(role="user", content=prompt_text),
        ]
        call = self._llm.chat_completion(messages, settings=self._settings)

        try:
            if self._request_timeout is None:
                response = await call
            else:
                response = await asyncio.wait_for(call, timeout=self._request_timeout)
        except asyncio.TimeoutError as e:
            raise RemoteCallFailed(f"timed out after {self._request_timeout}s") from e
        except Exception as e:
            raise RemoteCallFailed(str(e) or type(e).__name__) from e

        self._debug("info", "LLM", f"Response received ({len(response.content)} chars)")
        return response.content
