"""Conversation store.

Holds the ordered transcript and the input draft. The store performs no
validation; admission control belongs to the request coordinator.
"""

from collections.abc import Callable
from dataclasses import replace

from .models import Message, Role

Listener = Callable[[], None]


class ConversationStore:
    """Append-only transcript plus the uncommitted draft.

    The first entry is always the assistant greeting. Its timestamp starts
    empty and is stamped once, on first render, via ``stamp_greeting``.
    """

    def __init__(self, greeting: str) -> None:
        self._messages: list[Message] = [Message(role=Role.ASSISTANT, content=greeting)]
        self._greeting_stamped = False
        self._draft = ""
        self._listeners: list[Listener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the transcript in insertion order."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def draft(self) -> str:
        return self._draft

    def set_draft(self, text: str) -> None:
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    def append(self, *messages: Message) -> None:
        """Add messages to the end of the transcript as one change."""
        if not messages:
            return
        self._messages.extend(messages)
        self._notify()

    def stamp_greeting(self, timestamp: str) -> bool:
        """Assign the greeting's timestamp. Only the first call has an effect.

        Returns:
            True if the greeting was stamped by this call
        """
        if self._greeting_stamped:
            return False
        self._messages[0] = replace(self._messages[0], timestamp=timestamp)
        self._greeting_stamped = True
        self._notify()
        return True

    def last_response(self) -> str | None:
        """Get the content of the most recent assistant message."""
        for msg in reversed(self._messages):
            if msg.role == Role.ASSISTANT:
                return msg.content
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
