"""Provider factory functions.

Singleton pattern for the LLM provider instance.
"""

from careerai.providers.config import ProviderConfig
from careerai.providers.llm.base import LLMProvider
from careerai.providers.llm.gemini_adapter import GeminiAdapter

_llm_provider: LLMProvider | None = None


def get_llm_provider(config: ProviderConfig | None = None) -> LLMProvider:
    """Get or create the LLM provider singleton.

    The first call sets the config (app startup); subsequent calls reuse
    the instance and its HTTP connections.

    Args:
        config: Optional provider configuration. If None and no provider
            exists, derives one from application settings.

    Returns:
        LLMProvider instance.

    Raises:
        ValueError: If the configured provider is unknown.
        AuthenticationError: If the Gemini API key is missing.
    """
    global _llm_provider

    if _llm_provider is None:
        if config is None:
            from careerai.core.config import settings

            config = ProviderConfig.from_settings(settings)

        if config.llm_provider == "gemini":
            _llm_provider = GeminiAdapter(config)
        else:
            raise ValueError(f"Unknown LLM provider: {config.llm_provider}")

    return _llm_provider


def reset_providers() -> None:
    """Reset provider singletons.

    Used in tests to ensure isolation between test cases.
    """
    global _llm_provider
    _llm_provider = None
