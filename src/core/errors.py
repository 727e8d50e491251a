"""
Error taxonomy for the Student Registration application.

This module provides the error categories and custom exception hierarchy
used for consistent error handling throughout the application.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    VALIDATION = "validation"
    STORAGE = "storage"
    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    RULE_FAILED = "RULE_FAILED"

    # Storage errors
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"
    STORAGE_CORRUPT = "STORAGE_CORRUPT"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"

    # System errors
    OS_ERROR = "OS_ERROR"
    MEMORY_ERROR = "MEMORY_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with comprehensive metadata.

    This is the root of all custom application errors, providing
    structured information for consistent error handling and user feedback.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    retriable: bool = False
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        """Return detailed error representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"type={self.type.value}, "
            f"code={self.code.value}, "
            f"message='{self.user_message}'"
            f")"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "retriable": self.retriable,
            "context": self.context,
        }


class ValidationError(BaseAppError):
    """Form field validation errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        retriable: bool = True,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


class StorageError(BaseAppError):
    """Record store read/write errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        retriable: bool = True,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.STORAGE,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class ConfigError(BaseAppError):
    """Configuration related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class SystemError(BaseAppError):
    """Operating system and runtime errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


# Exception mapping configuration
_EXCEPTION_MAPPING: dict[type[Exception], tuple[ErrorType, ErrorCode, str]] = {
    json.JSONDecodeError: (ErrorType.STORAGE, ErrorCode.STORAGE_CORRUPT, "Stored records could not be read"),
    OSError: (ErrorType.SYSTEM, ErrorCode.OS_ERROR, "System error occurred"),
    ValueError: (ErrorType.VALIDATION, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    TypeError: (ErrorType.VALIDATION, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    MemoryError: (ErrorType.SYSTEM, ErrorCode.MEMORY_ERROR, "Insufficient memory"),
}

_ERROR_CLASSES: dict[ErrorType, type[BaseAppError]] = {
    ErrorType.VALIDATION: ValidationError,
    ErrorType.STORAGE: StorageError,
    ErrorType.CONFIG: ConfigError,
    ErrorType.SYSTEM: SystemError,
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to a custom application error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    # Walk the MRO so subclasses (e.g. FileNotFoundError) map like their base
    exc_type = type(exc)
    for candidate in exc_type.__mro__:
        if candidate in _EXCEPTION_MAPPING:
            error_type, error_code, default_message = _EXCEPTION_MAPPING[candidate]
            error_class = _ERROR_CLASSES[error_type]
            result: BaseAppError = error_class(  # type: ignore[call-arg]
                code=error_code,
                user_message=str(exc) if str(exc) else default_message,
                technical_message=f"{exc_type.__name__}: {exc}",
                context=context,
            )
            return result

    logger.warning(f"Unknown exception type: {exc_type.__name__}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{exc_type.__name__}: {exc}",
        context=context,
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Convert any exception to a BaseAppError.

    This is an alias for map_exception for convenience.
    """
    return map_exception(exc, context)
