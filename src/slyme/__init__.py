"""
Slyme: a college-advisor chat that forwards questions to Google Gemini.

The conversation core (``slyme.chat``) holds the transcript and the
one-request-at-a-time lifecycle; ``slyme.ui`` and ``slyme.cli`` render it.
"""

__version__ = "2.0.0"

from .chat import ChatSession, Message, RequestState, Role
from .llm import GenerationSettings, LLMProvider, create_llm_provider

__all__ = [
    "ChatSession",
    "GenerationSettings",
    "LLMProvider",
    "Message",
    "RequestState",
    "Role",
    "create_llm_provider",
]
