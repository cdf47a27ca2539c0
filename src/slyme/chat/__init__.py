"""Conversation core: transcript state and request lifecycle.

Module structure:
- models.py: Message, Role and RequestState
- config.py: fixed generation/safety settings and fallback texts
- store.py: append-only transcript and input draft
- coordinator.py: one-request-at-a-time submission lifecycle
- session.py: owns one store and one coordinator
"""

from .config import (
    ADVISOR_GENERATION,
    ADVISOR_SAFETY_SETTINGS,
    APOLOGY_TEXT,
    UNABLE_TO_ANSWER_TEXT,
)
from .coordinator import RequestCoordinator
from .errors import RemoteCallFailed
from .models import Message, RequestState, Role, format_timestamp
from .session import ChatSession
from .store import ConversationStore

__all__ = [
    "ADVISOR_GENERATION",
    "ADVISOR_SAFETY_SETTINGS",
    "APOLOGY_TEXT",
    "ChatSession",
    "ConversationStore",
    "Message",
    "RemoteCallFailed",
    "RequestCoordinator",
    "RequestState",
    "Role",
    "UNABLE_TO_ANSWER_TEXT",
    "format_timestamp",
]
