"""Google Gemini LLM adapter.

Uses the unified google-genai SDK. Supports free-text generation,
schema-constrained JSON generation and streaming.
"""

import time
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

import structlog
from google import genai
from google.genai import types

from careerai.providers.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    TransientError,
)
from careerai.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)

if TYPE_CHECKING:
    from careerai.providers.config import ProviderConfig

logger = structlog.get_logger()


def _classify_gemini_error(error: Exception) -> ProviderError:
    """Map Gemini exceptions to internal error taxonomy."""
    error_msg = str(error).lower()
    if ("resource" in error_msg and "exhausted" in error_msg) or "429" in error_msg:
        return RateLimitError(str(error))
    if (
        "permission" in error_msg
        or "unauthenticated" in error_msg
        or "api key" in error_msg
    ):
        return AuthenticationError(str(error))
    if "not found" in error_msg or "404" in error_msg:
        return ModelNotFoundError(str(error))
    if "context" in error_msg or "token" in error_msg:
        return ContextLengthError(str(error))
    if "safety" in error_msg or "blocked" in error_msg:
        return ContentFilterError(str(error))
    if "unavailable" in error_msg or "503" in error_msg or "timeout" in error_msg:
        return TransientError(str(error))
    return ProviderError(str(error))


def _convert_gemini_messages(
    messages: list[LLMMessage],
) -> tuple[str | None, list[types.Content]]:
    """Convert LLMMessages to Gemini format, extracting system instruction."""
    system_instruction = None
    contents: list[types.Content] = []

    for msg in messages:
        if msg.role == "system":
            system_instruction = msg.content
        else:
            role = "model" if msg.role == "assistant" else msg.role
            contents.append(
                types.Content(
                    role=role,
                    parts=[types.Part(text=msg.content or "")],
                )
            )

    return system_instruction, contents


def _parse_gemini_response(response: object) -> tuple[str | None, str]:
    """Parse Gemini response into content text and finish_reason."""
    content = None

    if response.candidates:  # type: ignore[attr-defined]
        candidate = response.candidates[0]  # type: ignore[attr-defined]
        if candidate.content and candidate.content.parts:
            texts = [part.text for part in candidate.content.parts if part.text]
            content = "".join(texts) if texts else None
        finish_reason = (
            candidate.finish_reason.name if candidate.finish_reason else "UNKNOWN"
        )
    else:
        finish_reason = "UNKNOWN"

    return content, finish_reason


class GeminiAdapter(LLMProvider):
    """Google Gemini adapter using unified google-genai SDK."""

    @property
    def provider_name(self) -> str:
        """Return 'gemini' for logging."""
        return "gemini"

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize Gemini adapter.

        Args:
            config: Provider configuration with Google API key.

        Raises:
            AuthenticationError: If no API key is configured.
        """
        super().__init__(config)
        if not config.google_api_key:
            raise AuthenticationError("GOOGLE_API_KEY is not configured")
        self.client = genai.Client(api_key=config.google_api_key)
        self.model_routing: dict[str, str] = {}
        if config.gemini_model_routing:
            self.model_routing.update(config.gemini_model_routing)

    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Generate completion using Gemini."""
        model_name = self.get_model_for_task(task)
        system_instruction, contents = _convert_gemini_messages(messages)

        wants_json = json_mode or response_schema is not None
        gen_config = types.GenerateContentConfig(
            max_output_tokens=max_tokens or self.config.default_max_tokens,
            temperature=(
                temperature
                if temperature is not None
                else self.config.default_temperature
            ),
            system_instruction=system_instruction,
            response_mime_type="application/json" if wants_json else None,
            response_schema=response_schema,
        )

        logger.info(
            "llm_request_start",
            provider="gemini",
            model=model_name,
            task=task.value,
            message_count=len(messages),
            schema_constrained=response_schema is not None,
        )

        start_time = time.monotonic()

        try:
            response = await self.client.aio.models.generate_content(
                model=model_name,
                contents=contents,  # type: ignore[arg-type]
                config=gen_config,
            )
        except Exception as e:
            latency_ms = (time.monotonic() - start_time) * 1000
            logger.error(
                "llm_request_failed",
                provider="gemini",
                model=model_name,
                task=task.value,
                error=str(e),
                error_type=type(e).__name__,
                latency_ms=latency_ms,
            )
            raise _classify_gemini_error(e) from e

        latency_ms = (time.monotonic() - start_time) * 1000
        content, finish_reason = _parse_gemini_response(response)

        input_tokens = (
            response.usage_metadata.prompt_token_count if response.usage_metadata else 0
        )
        output_tokens = (
            response.usage_metadata.candidates_token_count
            if response.usage_metadata
            else 0
        )

        logger.info(
            "llm_request_complete",
            provider="gemini",
            model=model_name,
            task=task.value,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )

        return LLMResponse(
            content=content,
            model=model_name,
            input_tokens=input_tokens or 0,
            output_tokens=output_tokens or 0,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )

    async def stream(  # type: ignore[override]
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> AsyncIterator[str]:
        """Stream completion using Gemini."""
        model_name = self.get_model_for_task(task)
        system_instruction, contents = _convert_gemini_messages(messages)

        gen_config = types.GenerateContentConfig(
            max_output_tokens=max_tokens or self.config.default_max_tokens,
            temperature=(
                temperature
                if temperature is not None
                else self.config.default_temperature
            ),
            system_instruction=system_instruction,
        )

        logger.info(
            "llm_request_start",
            provider="gemini",
            model=model_name,
            task=task.value,
            message_count=len(messages),
            streaming=True,
        )

        start_time = time.monotonic()
        chunk_count = 0

        try:
            async for chunk in await self.client.aio.models.generate_content_stream(
                model=model_name,
                contents=contents,  # type: ignore[arg-type]
                config=gen_config,
            ):
                if chunk.text:
                    chunk_count += 1
                    yield chunk.text
        except Exception as e:
            latency_ms = (time.monotonic() - start_time) * 1000
            logger.error(
                "llm_request_failed",
                provider="gemini",
                model=model_name,
                task=task.value,
                error=str(e),
                error_type=type(e).__name__,
                latency_ms=latency_ms,
                chunks_received=chunk_count,
            )
            raise _classify_gemini_error(e) from e

        logger.info(
            "llm_stream_complete",
            provider="gemini",
            model=model_name,
            task=task.value,
            chunks_received=chunk_count,
            latency_ms=(time.monotonic() - start_time) * 1000,
        )

    def get_model_for_task(self, task: TaskType) -> str:
        """Get model for task using routing overrides.

        Args:
            task: The task type to get the model for.

        Returns:
            Model identifier string (e.g., "gemini-2.5-flash").
        """
        return self.model_routing.get(task.value, self.config.gemini_model)
