"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async chat completions.
Reference: https://github.com/googleapis/python-genai

Note: Gemini returns an empty candidate when a safety threshold blocks the
answer. That case is reported as empty content, not as an error.
"""

from typing import Any

from google import genai
from google.genai import types

from ..base import LLMProvider
from ..models import ChatMessage, GenerationSettings, LLMResponse, SafetySetting


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - Message format conversion ('assistant' becomes 'model')
    - Mapping GenerationSettings onto GenerateContentConfig
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model (gemini-2.5-flash, gemini-2.5-pro, ...)
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._api_key = api_key
        self._client_kwargs = client_kwargs
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Create the SDK client on first use.

        A missing or malformed key then fails the call instead of the
        constructor.
        """
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key, **self._client_kwargs)
        return self._client

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Convert ChatMessage list to Gemini format.

        Args:
            messages: List of chat messages

        Returns:
            Tuple of (system_instruction, contents)
        """
        system_instruction = None
        contents = []

        for msg in messages:
            if msg.role == "system":
                system_instruction = msg.content
            elif msg.role == "user":
                contents.append(types.Content(
                    role="user",
                    parts=[types.Part(text=msg.content)]
                ))
            elif msg.role == "assistant":
                contents.append(types.Content(
                    role="model",
                    parts=[types.Part(text=msg.content)]
                ))

        return system_instruction, contents

    @staticmethod
    def _convert_safety(settings: tuple[SafetySetting, ...]) -> list[types.SafetySetting]:
        return [
            types.SafetySetting(category=s.category.value, threshold=s.threshold.value)
            for s in settings
        ]

    def _build_config(
        self,
        settings: GenerationSettings,
        system_instruction: str | None,
    ) -> types.GenerateContentConfig:
        # mode=NONE stops the SDK from treating function-like prompts as tool calls
        tool_config = types.ToolConfig(
            function_calling_config=types.FunctionCallingConfig(mode="NONE")
        )
        config = types.GenerateContentConfig(
            temperature=settings.temperature,
            system_instruction=system_instruction,
            tool_config=tool_config,
        )
        if settings.top_k is not None:
            config.top_k = settings.top_k
        if settings.top_p is not None:
            config.top_p = settings.top_p
        if settings.max_output_tokens is not None:
            config.max_output_tokens = settings.max_output_tokens
        if settings.safety_settings:
            config.safety_settings = self._convert_safety(settings.safety_settings)
        if settings.thinking_budget is not None:
            config.thinking_config = types.ThinkingConfig(
                thinking_budget=settings.thinking_budget
            )
        return config

    def _extract_content(self, response) -> str:
        """Extract text content from Gemini response, handling empty responses.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Text content or empty string
        """
        if response.candidates and len(response.candidates) > 0:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # response.text may raise when the candidate was blocked
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        settings: GenerationSettings | None = None,
        model: str | None = None,
    ) -> LLMResponse:
        """Generate a chat completion using Google Gemini.

        Args:
            messages: System instruction plus call history
            settings: Sampling and safety configuration
            model: Model to use (overrides default)

        Returns:
            LLMResponse with generated content (possibly empty)
        """
        model_to_use = model or self._model
        system_instruction, contents = self._convert_messages(messages)
        config = self._build_config(settings or GenerationSettings(), system_instruction)

        response = await self._get_client().aio.models.generate_content(
            model=model_to_use,
            contents=contents,
            config=config
        )

        usage = None
        if response.usage_metadata:
            usage = {
                "prompt_tokens": response.usage_metadata.prompt_token_count or 0,
                "completion_tokens": response.usage_metadata.candidates_token_count or 0,
                "total_tokens": response.usage_metadata.total_token_count or 0
            }

        return LLMResponse(
            content=self._extract_content(response),
            model=model_to_use,
            usage=usage
        )

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
