"""Provider error taxonomy.

Adapters translate SDK exceptions into these classes so that services and
controllers handle LLM failures without knowing which SDK raised them.
No error in this module is retried automatically; every LLM call is
attempted exactly once.
"""

__all__ = [
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "ModelNotFoundError",
    "ContentFilterError",
    "ContextLengthError",
    "TransientError",
]


class ProviderError(Exception):
    """Base class for all provider errors.

    Callers catch this single type to treat any backend failure as a
    failed turn or a failed generation.
    """

    pass


class RateLimitError(ProviderError):
    """Provider quota or rate limit exceeded."""

    def __init__(self, message: str, retry_after_seconds: float | None = None):
        """Initialize RateLimitError.

        Args:
            message: Error description from the provider.
            retry_after_seconds: Optional hint from provider, surfaced in logs.
        """
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class AuthenticationError(ProviderError):
    """Missing, invalid or expired API key."""

    pass


class ModelNotFoundError(ProviderError):
    """Configured model doesn't exist or isn't accessible with this key."""

    pass


class ContentFilterError(ProviderError):
    """Prompt or response blocked by the provider's safety filter."""

    pass


class ContextLengthError(ProviderError):
    """Input exceeded the model's context window (e.g. a very long resume)."""

    pass


class TransientError(ProviderError):
    """Temporary failure (network, server overload, 5xx)."""

    pass
