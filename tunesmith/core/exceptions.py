"""
Exception hierarchy for the Tunesmith service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TunesmithException(Exception):
    """Base exception for all Tunesmith application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TunesmithException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(TunesmithException):
    """Raised when required configuration (e.g. the provider credential) is missing."""

    def __init__(self, setting: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["setting"] = setting
        super().__init__(f"{setting} is not configured", details)


class ProviderError(TunesmithException):
    """Raised when the provider answers with an error status or error code."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        api_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message reported by the provider (or a fallback)
            status_code: HTTP status of the provider response
            api_code: ``code`` field from the provider JSON body
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        if api_code is not None:
            details["api_code"] = api_code
        self.status_code = status_code
        self.api_code = api_code
        super().__init__(message, details)


class ProviderTransportError(ProviderError):
    """Raised when the provider could not be reached at all."""

    pass


class ArtifactFetchError(TunesmithException):
    """Raised when a remote artifact download fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class UnsafeFilenameError(ValidationError):
    """Raised when a filename fails the content directory safety rules."""

    def __init__(self, filename: str) -> None:
        super().__init__("Unsafe filename rejected", field="filename", details={"filename": filename})


class PromptTooLongError(ValidationError):
    """Raised when a lyrics prompt exceeds the word limit."""

    def __init__(self, max_words: int, word_count: int) -> None:
        super().__init__(
            f"Prompt must be at most {max_words} words (currently {word_count})",
            field="prompt",
            details={"word_count": word_count, "max_words": max_words},
        )
