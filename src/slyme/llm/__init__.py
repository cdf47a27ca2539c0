from .base import LLMProvider
from .factory import create_llm_provider
from .models import (
    ChatMessage,
    GenerationSettings,
    HarmBlockThreshold,
    HarmCategory,
    LLMResponse,
    SafetySetting,
)
from .providers import GeminiProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "GenerationSettings",
    "HarmBlockThreshold",
    "HarmCategory",
    "LLMResponse",
    "SafetySetting",
    "GeminiProvider",
]
