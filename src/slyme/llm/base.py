from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, GenerationSettings, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which LLM backend answers the
    advisor's questions. Implementations must handle provider-specific details
    like:
    - API client setup and authentication
    - Translating GenerationSettings into the provider's request format
    - Extracting text from the provider's response shape

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the default model name."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        settings: GenerationSettings | None = None,
        model: str | None = None,
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Messages to send. A 'system' message is used as the
                system instruction; the rest form the call history.
            settings: Sampling and safety configuration (None uses defaults)
            model: Model to use (None uses provider's default)

        Returns:
            LLMResponse containing generated content and metadata. The
            content may be empty when the backend produced no usable text.

        Raises:
            Exception: Provider-specific errors during generation
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            # Suppress harmless cleanup errors from httpx/anyio
            if "Event loop is closed" not in str(e):
                raise
