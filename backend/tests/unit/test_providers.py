"""Tests for the mock provider, provider config and the provider factory."""

from unittest.mock import patch

import pytest
from pydantic import SecretStr

from careerai.core.config import Settings, settings
from careerai.providers import factory
from careerai.providers.config import ProviderConfig
from careerai.providers.errors import AuthenticationError, TransientError
from careerai.providers.llm.base import LLMMessage, TaskType
from careerai.providers.llm.gemini_adapter import GeminiAdapter
from careerai.providers.llm.mock_adapter import MockLLMProvider

# =============================================================================
# Mock provider
# =============================================================================


class TestMockLLMProvider:
    """The mock provider used by every other test."""

    @pytest.mark.asyncio
    async def test_default_response(self):
        mock = MockLLMProvider()

        response = await mock.complete([], TaskType.MENTOR_CHAT)

        assert response.content == "Mock response for mentor_chat"
        assert mock.last_task == TaskType.MENTOR_CHAT

    @pytest.mark.asyncio
    async def test_records_calls(self):
        mock = MockLLMProvider({TaskType.RESUME_FEEDBACK: "ok"})
        messages = [LLMMessage(role="user", content="x")]

        await mock.complete(messages, TaskType.RESUME_FEEDBACK, json_mode=True)

        assert mock.calls[0]["method"] == "complete"
        assert mock.calls[0]["messages"] == messages
        assert mock.calls[0]["kwargs"]["json_mode"] is True
        assert mock.count_calls(TaskType.RESUME_FEEDBACK) == 1

    @pytest.mark.asyncio
    async def test_stream_splits_response_into_words(self):
        mock = MockLLMProvider({TaskType.MENTOR_CHAT: "a b c"})

        chunks = [c async for c in mock.stream([], TaskType.MENTOR_CHAT)]

        assert chunks == ["a ", "b ", "c "]

    @pytest.mark.asyncio
    async def test_configured_error_is_raised(self):
        mock = MockLLMProvider()
        mock.set_error(TaskType.MENTOR_CHAT, TransientError("down"))

        with pytest.raises(TransientError):
            await mock.complete([], TaskType.MENTOR_CHAT)

    def test_assert_called_with_task_fails_when_not_called(self):
        with pytest.raises(AssertionError):
            MockLLMProvider().assert_called_with_task(TaskType.MENTOR_CHAT)


# =============================================================================
# Provider config
# =============================================================================


class TestProviderConfig:
    def test_from_settings(self):
        custom = Settings(
            google_api_key=SecretStr("abc"),
            gemini_model="gemini-2.5-pro",
            default_max_tokens=1000,
            default_temperature=0.2,
        )

        config = ProviderConfig.from_settings(custom)

        assert config.llm_provider == "gemini"
        assert config.google_api_key == "abc"
        assert config.gemini_model == "gemini-2.5-pro"
        assert config.default_max_tokens == 1000
        assert config.default_temperature == 0.2

    def test_defaults(self):
        config = ProviderConfig()
        assert config.gemini_model == "gemini-2.5-flash"
        assert config.default_max_tokens == 8192


# =============================================================================
# Factory
# =============================================================================


class TestProviderFactory:
    """Tests for get_llm_provider and reset_providers."""

    @pytest.fixture(autouse=True)
    def _reset(self):
        factory.reset_providers()
        yield
        factory.reset_providers()

    def test_builds_gemini_adapter_once(self):
        with patch("careerai.providers.llm.gemini_adapter.genai"):
            first = factory.get_llm_provider(ProviderConfig(google_api_key="k"))
            second = factory.get_llm_provider()

        assert isinstance(first, GeminiAdapter)
        assert second is first

    def test_default_config_comes_from_settings(self):
        with patch("careerai.providers.llm.gemini_adapter.genai") as mock_genai:
            factory.get_llm_provider()

        mock_genai.Client.assert_called_once_with(
            api_key=settings.google_api_key.get_secret_value()
        )

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            factory.get_llm_provider(ProviderConfig(llm_provider="other"))

    def test_missing_key_raises(self):
        with pytest.raises(AuthenticationError):
            factory.get_llm_provider(ProviderConfig(google_api_key=""))

    def test_reset_clears_singleton(self):
        with patch("careerai.providers.llm.gemini_adapter.genai"):
            first = factory.get_llm_provider(ProviderConfig(google_api_key="k"))
            factory.reset_providers()
            second = factory.get_llm_provider(ProviderConfig(google_api_key="k"))

        assert second is not first
