"""Pytest configuration and shared fixtures."""
import os

import pytest
from fakes import FIXED_TIME

from slyme.chat import ChatSession
from slyme.llm import LLMProvider


@pytest.fixture
def clock():
    """Deterministic display clock."""
    return lambda: FIXED_TIME


@pytest.fixture
def make_session(clock):
    """Build a session around a provider with fixed greeting and persona."""
    def _make(llm: LLMProvider, **kwargs) -> ChatSession:
        kwargs.setdefault("greeting", "Hello, I am your advisor.")
        kwargs.setdefault("system_prompt", "You are a college advisor.")
        kwargs.setdefault("clock", clock)
        return ChatSession(llm, **kwargs)
    return _make


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"gemini": os.getenv("GEMINI_API_KEY")}
