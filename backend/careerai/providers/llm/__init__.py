"""LLM provider module: interface and adapters."""

from careerai.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)
from careerai.providers.llm.gemini_adapter import GeminiAdapter
from careerai.providers.llm.mock_adapter import MockLLMProvider

__all__ = [
    # Base types
    "LLMMessage",
    "LLMProvider",
    "LLMResponse",
    "TaskType",
    # Adapters
    "GeminiAdapter",
    "MockLLMProvider",
]
