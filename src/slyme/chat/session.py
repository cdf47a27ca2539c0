"""Chat session.

One session owns one conversation store and one request coordinator. The
rendering layer receives the session explicitly; nothing is kept in module
globals.
"""

from collections.abc import Callable
from typing import Any

from ..llm import GenerationSettings, LLMProvider
from ..prompts import get_greeting, get_system_prompt
from .config import ADVISOR_GENERATION
from .coordinator import RequestCoordinator
from .models import Message, RequestState, format_timestamp
from .store import ConversationStore


class ChatSession:
    """State and request lifecycle for a single advisor conversation.

    Example:
        async with create_llm_provider("gemini", api_key=key) as llm:
            session = ChatSession(llm)
            session.start()
            await session.submit("What majors are good for medicine?")
            for msg in session.messages:
                print(msg.role, msg.content)
    """

    def __init__(
        self,
        llm: LLMProvider,
        greeting: str | None = None,
        system_prompt: str | None = None,
        settings: GenerationSettings = ADVISOR_GENERATION,
        request_timeout: float | None = None,
        clock: Callable[[], str] = format_timestamp,
    ) -> None:
        self._clock = clock
        self.store = ConversationStore(greeting if greeting is not None else get_greeting())
        self.coordinator = RequestCoordinator(
            store=self.store,
            llm=llm,
            system_prompt=system_prompt if system_prompt is not None else get_system_prompt(),
            settings=settings,
            request_timeout=request_timeout,
            clock=clock,
        )

    def start(self) -> None:
        """Called on first render: stamps the greeting with the local clock."""
        self.store.stamp_greeting(self._clock())

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.store.messages

    @property
    def draft(self) -> str:
        return self.store.draft

    def set_draft(self, text: str) -> None:
        self.store.set_draft(text)

    @property
    def state(self) -> RequestState:
        return self.coordinator.state

    @property
    def in_flight(self) -> bool:
        return self.coordinator.in_flight

    @property
    def pending_reply(self) -> bool:
        return self.coordinator.pending_reply

    async def submit(self, prompt_text: str | None = None) -> bool:
        """Submit the given text, or the current draft when omitted."""
        text = self.store.draft if prompt_text is None else prompt_text
        return await self.coordinator.submit(text)

    def last_response(self) -> str | None:
        return self.store.last_response()

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Listen to transcript, draft and request-state changes."""
        remove_store = self.store.subscribe(listener)
        remove_coordinator = self.coordinator.subscribe(listener)

        def unsubscribe() -> None:
            remove_store()
            remove_coordinator()

        return unsubscribe

    def set_debug_callback(self, callback: Any) -> None:
        self.coordinator.set_debug_callback(callback)
