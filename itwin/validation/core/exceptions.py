"""Custom exception hierarchy."""

from __future__ import annotations


class ValidationClientError(Exception):
    """Base exception for all library errors."""

    pass


class AuthenticationRequiredError(ValidationClientError):
    """No access token could be resolved for a request.

    Raised before any network call is attempted when neither an explicit
    access token nor an access token callback is available.
    """

    def __init__(self, message: str = "Access token or callback is required") -> None:
        super().__init__(message)


class TransportError(ValidationClientError):
    """Network failure or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class RateLimitError(TransportError):
    """Service rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60, url: str | None = None) -> None:
        super().__init__(message, status_code=429, url=url)
        self.retry_after = retry_after


class ProtocolError(ValidationClientError):
    """Successful response whose body does not have the expected shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ConfigurationError(ValidationClientError):
    """Invalid client configuration."""

    pass
