"""Centralized error types for rusend."""

from enum import Enum
from typing import Any, Dict, Optional, Type

from rusend.utils.logging import get_logger

logger = get_logger(__name__)


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    NETWORK = "network"
    API = "api"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


## Custom Exceptions


class RusendError(Exception):
    """Base exception for all rusend errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise RusendError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def add_context(self, context: str) -> None:
        """Prefix the message with the step that failed."""
        if context:
            self.message = f"{context}: {self.message}"
            self.args = (self.message,)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Remote Errors


class NetworkError(RusendError):
    """Transport-level failure talking to the email service."""

    category = ErrorCategory.NETWORK
    user_message = "A network error occurred"


class ResendAPIError(RusendError):
    """Non-success response from the email service."""

    category = ErrorCategory.API
    user_message = "The email service rejected the request"

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")


class NoEmailsAvailableError(RusendError):
    """Raised when an id must be resolved from an empty listing."""

    category = ErrorCategory.API
    user_message = "No emails available"


## Authentication Errors


class MissingCredentialsError(RusendError):
    """No API key stored."""

    category = ErrorCategory.AUTHENTICATION
    user_message = "API key not configured (run `rusend config`)"


## Validation Errors


class ValidationError(RusendError):
    """Base exception for validation-related errors."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class MissingRequiredFieldError(ValidationError):
    """Exception for missing required fields."""

    user_message = "A required field is missing"


class InvalidBatchFileError(ValidationError):
    """Batch input file could not be parsed or validated."""

    user_message = "Invalid batch file"


## File System Errors


class FileSystemError(RusendError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Configuration Errors


class ConfigurationError(RusendError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class InvalidConfigError(ConfigurationError):
    """Exception for unreadable configuration content."""

    user_message = "Invalid configuration file"


## Context Manager for Error Handling


class error_context:
    """Attach a short description of the failing step to any error.

    ``RusendError`` instances get the context prefixed to their message and
    propagate unchanged; anything else is wrapped in ``wrap_as``.
    """

    def __init__(self, context: str = "", wrap_as: Type[RusendError] = RusendError):
        self.context = context
        self.wrap_as = wrap_as

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        if exc_type is None:
            return False

        if not issubclass(exc_type, Exception):
            return False

        if isinstance(exc_value, RusendError):
            exc_value.add_context(self.context)
            return False

        logger.debug(f"{self.context}: {exc_type.__name__}: {exc_value}")
        raise self.wrap_as(
            f"{self.context}: {exc_value}" if self.context else str(exc_value),
            details={"context": self.context, "cause": exc_type.__name__},
        ) from exc_value
