"""Error taxonomy shared by the domain services and adapters."""

from typing import Optional


class FactCheckError(Exception):
    """Base class for all errors raised by the fact-checking service."""


class ConfigurationError(FactCheckError):
    """A required setting (usually an API key) is missing or a placeholder."""


class InputValidationError(FactCheckError):
    """User input was rejected before any outbound call was made."""


class ProviderUnavailableError(FactCheckError):
    """An external provider could not be reached or answered with an error."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class SearchProviderError(ProviderUnavailableError):
    """The search provider answered with a non-successful HTTP response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        super().__init__("search", message)


class ImageHostError(ProviderUnavailableError):
    """The image host rejected or failed an upload."""

    def __init__(self, message: str):
        super().__init__("image-host", message)


class MalformedModelResponseError(FactCheckError):
    """The model answer was not valid JSON or did not match the result schema.

    Only raised inside the response decoder; callers always receive the
    fallback result instead.
    """


class RateLimitExceeded(FactCheckError):
    """The caller used up its request allowance for the current window."""

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded. Try again in {retry_after} seconds")
