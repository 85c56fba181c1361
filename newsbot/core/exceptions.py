"""
Exception hierarchy for the NewsBot application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class NewsBotException(Exception):
    """Base exception for all NewsBot application errors."""

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


class ValidationError(NewsBotException):
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


class ProviderError(NewsBotException):
    """Raised when an embedding or completion provider call fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            provider: Provider/model that failed
            operation: Operation that failed (embed, complete)
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageError(NewsBotException):
    """Raised when the session log or corpus store is unavailable."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (append, history, clear, list_articles)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class DataIntegrityError(NewsBotException):
    """Raised when a stored embedding cannot be compared with the query."""

    def __init__(
        self,
        message: str,
        article_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize data integrity error.

        Args:
            message: Error message
            article_id: Article whose vector is malformed
            details: Additional context
        """
        details = details or {}
        if article_id is not None:
            details["article_id"] = article_id
        super().__init__(message, details)


class ChatProcessingError(NewsBotException):
    """Raised when the chat pipeline fails after the user turn was stored."""

    def __init__(
        self,
        message: str = "Failed to process chat message",
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chat processing error.

        Args:
            message: Error message shown to callers
            session_id: Session the failed exchange belongs to
            details: Additional context
        """
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)
