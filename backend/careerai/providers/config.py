"""Provider configuration management.

Centralized configuration for the LLM provider, derived from application
settings or built directly in tests.
"""

from dataclasses import dataclass

from careerai.core.config import Settings


@dataclass(frozen=True)
class ProviderConfig:
    """Centralized provider configuration.

    Attributes:
        llm_provider: Which LLM provider to use (only "gemini" is built).
        google_api_key: Google AI API key.
        gemini_model: Default Gemini model identifier.
        gemini_model_routing: Optional per-task model overrides keyed by
            TaskType value.
        default_max_tokens: Default max output tokens.
        default_temperature: Default sampling temperature.
    """

    llm_provider: str = "gemini"
    google_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_model_routing: dict[str, str] | None = None
    default_max_tokens: int = 8192
    default_temperature: float = 0.7

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderConfig":
        """Build provider configuration from application settings.

        Args:
            settings: Validated application settings.

        Returns:
            ProviderConfig instance for the Gemini provider.
        """
        return cls(
            llm_provider="gemini",
            google_api_key=settings.google_api_key.get_secret_value(),
            gemini_model=settings.gemini_model,
            default_max_tokens=settings.default_max_tokens,
            default_temperature=settings.default_temperature,
        )
