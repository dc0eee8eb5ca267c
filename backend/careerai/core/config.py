"""Application configuration loaded from environment variables.

Settings for the Gemini credential, model defaults, logging, CORS and
rate limiting. Uses pydantic-settings for validation and .env file support.

The Google API key is mandatory: constructing Settings without it fails,
so the application refuses to start rather than erroring on the first
LLM call.
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM provider
    # API_KEY is accepted as an alternative name for the credential.
    google_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("google_api_key", "api_key"),
    )
    gemini_model: str = _DEFAULT_GEMINI_MODEL
    default_max_tokens: int = 8192
    default_temperature: float = 0.7

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # CORS
    # Default allows the Vite dev server used by the web client.
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Application
    environment: Literal["development", "staging", "production", "test"] = (
        "development"
    )
    log_level: str = "INFO"
    log_json: bool = False

    # Rate Limiting
    # Format: "count/period" (e.g., "10/minute", "100/hour")
    rate_limit_llm: str = "10/minute"
    rate_limit_enabled: bool = True

    @model_validator(mode="after")
    def check_required_credentials(self) -> "Settings":
        """Validate that the LLM credential is present.

        Checks:
        - GOOGLE_API_KEY (or API_KEY) must be set and non-blank
        - CORS must not use a wildcard origin
        """
        if not self.google_api_key.get_secret_value().strip():
            msg = (
                "GOOGLE_API_KEY environment variable is not set. "
                "The application cannot start without an API credential."
            )
            raise ValueError(msg)

        if "*" in self.allowed_origins:
            msg = "ALLOWED_ORIGINS must not contain '*' (wildcard)."
            raise ValueError(msg)

        if self.default_max_tokens <= 0:
            msg = f"DEFAULT_MAX_TOKENS must be positive. Got: {self.default_max_tokens}"
            raise ValueError(msg)

        return self


settings = Settings()
