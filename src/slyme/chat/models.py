"""Data models for the conversation.

Hides the internal representation of transcript entries and request state.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .config import TIMESTAMP_FORMAT


class Role(str, Enum):
    """Who produced a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"


class RequestState(str, Enum):
    """Lifecycle of the single outstanding generation request."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


@dataclass(frozen=True)
class Message:
    """One turn in the transcript."""

    role: Role
    content: str  # markdown for assistant turns
    timestamp: str = ""


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a moment (default: now, local clock) for display."""
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)
