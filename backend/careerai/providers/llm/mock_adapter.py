"""Mock LLM provider for testing.

MockLLMProvider enables unit testing without hitting the Gemini API.
"""

from collections.abc import AsyncIterator
from typing import Any

from careerai.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)


class MockLLMProvider(LLMProvider):
    """Mock provider for testing.

    Attributes:
        responses: Pre-configured responses keyed by TaskType.
        stream_chunks: Explicit fragment lists for stream(), keyed by TaskType.
            When absent, stream() splits the configured response into words.
        errors: Exceptions to raise instead of responding, keyed by TaskType.
        calls: Record of all method invocations for test assertions.
        last_task: The most recent TaskType used in a call.
    """

    @property
    def provider_name(self) -> str:
        """Return 'mock' for testing."""
        return "mock"

    def __init__(self, responses: dict[TaskType, str] | None = None) -> None:
        """Initialize mock provider with optional pre-configured responses.

        Args:
            responses: Dict mapping TaskType to response content. If not provided
                for a task, returns a default "Mock response for {task}" string.
        """
        # Don't call super().__init__() - we don't need a config for mock
        self.responses: dict[TaskType, str] = dict(responses) if responses else {}
        self.stream_chunks: dict[TaskType, list[str]] = {}
        self.errors: dict[TaskType, BaseException] = {}
        self.calls: list[dict[str, Any]] = []
        self.last_task: TaskType | None = None

    def set_response(self, task: TaskType, content: str) -> None:
        """Set or update the response for a specific task type."""
        self.responses[task] = content

    def set_stream_chunks(self, task: TaskType, chunks: list[str]) -> None:
        """Set the exact fragments stream() yields for a task type."""
        self.stream_chunks[task] = list(chunks)

    def set_error(self, task: TaskType, error: BaseException | None) -> None:
        """Make calls for a task raise ``error`` (None clears it).

        For stream(), configured chunks are yielded first and the error is
        raised afterwards, simulating a mid-stream failure. With no chunks
        configured the error is raised before any fragment.
        """
        if error is None:
            self.errors.pop(task, None)
        else:
            self.errors[task] = error

    def count_calls(self, task: TaskType) -> int:
        """Return how many calls were made for a task type."""
        return sum(1 for c in self.calls if c["task"] == task)

    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Generate a mock completion.

        Records the call for test assertions and returns a pre-configured
        or default response.
        """
        self.calls.append(
            {
                "method": "complete",
                "messages": list(messages),
                "task": task,
                "kwargs": {
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "json_mode": json_mode,
                    "response_schema": response_schema,
                },
            }
        )
        self.last_task = task

        if task in self.errors:
            raise self.errors[task]

        content = self.responses.get(task, f"Mock response for {task.value}")

        return LLMResponse(
            content=content,
            model="mock-model",
            input_tokens=100,
            output_tokens=50,
            finish_reason="STOP",
            latency_ms=10,
        )

    async def stream(  # type: ignore[override]
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> AsyncIterator[str]:
        """Generate a mock streaming completion.

        Yields configured chunks, or the configured response word-by-word
        with trailing spaces.
        """
        self.calls.append(
            {
                "method": "stream",
                "messages": list(messages),
                "task": task,
                "kwargs": {
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                },
            }
        )
        self.last_task = task

        if task in self.stream_chunks:
            chunks = self.stream_chunks[task]
        elif task in self.errors:
            chunks = []
        else:
            content = self.responses.get(task, f"Mock response for {task.value}")
            chunks = [word + " " for word in content.split()]

        for chunk in chunks:
            yield chunk

        if task in self.errors:
            raise self.errors[task]

    def get_model_for_task(self, _task: TaskType) -> str:
        """Return 'mock-model' for any task."""
        return "mock-model"

    def assert_called_with_task(self, task: TaskType) -> None:
        """Test helper to verify a task was called.

        Raises:
            AssertionError: If the task was not called.
        """
        tasks_called = [c["task"] for c in self.calls]
        assert task in tasks_called, f"Expected {task}, got {tasks_called}"
