"""Custom exception hierarchy for mushaf.

Exception Hierarchy:
    MushafError (base)
    ├── ApiError - data provider calls
    │   ├── ApiConnectionError (retryable)
    │   ├── ApiResponseError
    │   └── EntryNotFoundError
    ├── ConfigurationError - settings/configuration issues
    └── InvalidSelectionError - activation of an entry outside the visible list

Usage:
    from mushaf.exceptions import ApiConnectionError

    try:
        response = await client.get(url)
    except httpx.TransportError as e:
        raise ApiConnectionError("Could not reach provider", url=url) from e
"""

from typing import Any, Optional


class MushafError(Exception):
    """Base exception for all mushaf errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., ids, urls)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# API Errors
# =============================================================================


class ApiError(MushafError):
    """Base exception for data provider calls."""

    pass


class ApiConnectionError(ApiError):
    """Failed to reach the provider - typically retryable."""

    def __init__(
        self,
        message: str = "API connection failed",
        *,
        url: Optional[str] = None,
        **context: Any,
    ) -> None:
        if url:
            context["url"] = url
        super().__init__(message, retryable=True, **context)


class ApiResponseError(ApiError):
    """The provider answered, but not with a usable payload."""

    def __init__(
        self,
        message: str = "Unexpected API response",
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ) -> None:
        if url:
            context["url"] = url
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, **context)


class EntryNotFoundError(ApiError):
    """The provider has no entry for the requested identifier."""

    def __init__(
        self,
        message: str = "Entry not found",
        *,
        entry_id: Optional[int] = None,
        **context: Any,
    ) -> None:
        if entry_id is not None:
            context["entry_id"] = entry_id
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MushafError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


# =============================================================================
# Selection Errors
# =============================================================================


class InvalidSelectionError(MushafError):
    """An entry was activated that is not part of the visible list."""

    def __init__(
        self,
        message: str = "Entry is not in the visible list",
        *,
        entry_id: Optional[int] = None,
        **context: Any,
    ) -> None:
        if entry_id is not None:
            context["entry_id"] = entry_id
        super().__init__(message, **context)
