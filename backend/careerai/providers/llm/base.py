"""Abstract base class and types for LLM providers.

LLMProvider abstract interface with TaskType enum, message types,
schema-constrained JSON generation and streaming.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from careerai.providers.config import ProviderConfig


class TaskType(Enum):
    """Task types for model routing and logging."""

    CAREER_SUGGESTIONS = "career_suggestions"
    ROADMAP_GENERATION = "roadmap_generation"
    RESUME_FEEDBACK = "resume_feedback"
    MENTOR_CHAT = "mentor_chat"
    MOCK_INTERVIEW = "mock_interview"


@dataclass
class LLMMessage:
    """Provider-agnostic message format.

    Attributes:
        role: Message role ("system", "user", "assistant").
        content: Text content.
    """

    role: str
    content: str


@dataclass
class LLMResponse:
    """Provider-agnostic response format.

    Attributes:
        content: Text response (None if the provider returned no text).
        model: Actual model used (for logging).
        input_tokens: Number of input tokens used.
        output_tokens: Number of output tokens generated.
        finish_reason: Why generation stopped ("STOP", "MAX_TOKENS", ...).
        latency_ms: Response time in milliseconds.
    """

    content: str | None
    model: str
    input_tokens: int
    output_tokens: int
    finish_reason: str
    latency_ms: float


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize with provider configuration.

        Args:
            config: Provider configuration including API key and defaults.
        """
        self.config = config

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider identifier (e.g., 'gemini')."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Generate a completion (non-streaming).

        Args:
            messages: Conversation as list of LLMMessage. A leading "system"
                message is the persona/system instruction.
            task: Task type for model routing.
            max_tokens: Override default max tokens.
            temperature: Override default temperature.
            json_mode: If True, request JSON output.
            response_schema: Optional schema the JSON output must conform
                to. Implies json_mode.

        Returns:
            LLMResponse with the generated text.

        Raises:
            ProviderError: On API failure (no retries).
        """
        ...

    @abstractmethod
    async def stream(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> AsyncIterator[str]:
        """Generate a streaming completion.

        Args:
            messages: Conversation as list of LLMMessage.
            task: Task type for model routing.
            max_tokens: Override default max tokens.
            temperature: Override default temperature.

        Yields:
            Content fragments in arrival order.

        Raises:
            ProviderError: On API failure, possibly after some fragments.
        """
        # Bare yield makes mypy treat this as an async generator body,
        # which is required for abstract async generator methods.
        yield ""  # pragma: no cover

    @abstractmethod
    def get_model_for_task(self, task: TaskType) -> str:
        """Return the model identifier for a given task.

        Args:
            task: The task type to get the model for.

        Returns:
            Model identifier string (e.g., "gemini-2.5-flash").
        """
        ...
