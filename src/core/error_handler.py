"""
Centralized error handling and logging infrastructure for the Student
Registration application.

This module provides a singleton ErrorHandler that captures, logs, and
normalizes exceptions while keeping sensitive form values out of the logs.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from .config import get_app_data_dir
from .errors import BaseAppError, from_exception

SENSITIVE_CONTEXT_MARKERS = ("password", "token", "key", "secret")


class ErrorHandler(QObject):
    """
    Centralized error handler with logging.

    This singleton class provides:
    - Exception capture and normalization
    - Structured logging with rotation
    - Qt signal emission for UI integration
    """

    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the error handler (called only once due to singleton)."""
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture and normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with normalized metadata
        """
        safe_context = self._sanitize_context(context or {})

        app_error = from_exception(exception, safe_context)
        if safe_context and app_error.context is not safe_context:
            app_error.context.update(safe_context)

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(
        self,
        exception: Exception,
        context: dict[str, Any] | None = None,
        level: int = logging.ERROR,
    ) -> BaseAppError:
        """
        Handle an exception by capturing, logging, and emitting signals.

        Args:
            exception: The exception to handle
            context: Optional context information
            level: Logging level for the record

        Returns:
            BaseAppError for further processing
        """
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)

        if self._logger:
            self._logger.log(
                level,
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                    "retriable": app_error.retriable,
                },
                exc_info=exception if level >= logging.ERROR else None,
            )

        self.errorOccurred.emit(app_error)

        return app_error

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            logs_dir = get_app_data_dir() / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger("student_registration.errors")
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            # Avoid duplicate handlers
            if not ErrorHandler._logger.handlers:
                file_handler = logging.handlers.RotatingFileHandler(
                    logs_dir / "app.log",
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )

                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                if __debug__:
                    console_handler = logging.StreamHandler()
                    console_handler.setFormatter(formatter)
                    console_handler.setLevel(logging.WARNING)
                    ErrorHandler._logger.addHandler(console_handler)

        except OSError as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """
        Sanitize context to prevent sensitive data leakage.

        Args:
            context: Raw context dictionary

        Returns:
            Sanitized context dictionary
        """
        safe_context: dict[str, Any] = {}
        max_items = 20

        for item_count, (key, value) in enumerate(context.items()):
            if item_count >= max_items:
                safe_context["..."] = f"({len(context) - max_items} more items truncated)"
                break

            if any(marker in key.lower() for marker in SENSITIVE_CONTEXT_MARKERS):
                safe_context[key] = "[REDACTED]"
            elif isinstance(value, str) and len(value) > 200:
                safe_context[key] = value[:200] + "..."
            else:
                safe_context[key] = repr(value)[:200]

        return safe_context

    def install_hooks(self) -> None:
        """Install an exception hook for unhandled exceptions."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            if issubclass(exc_type, KeyboardInterrupt) or not isinstance(exc_value, Exception):
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return
            self.handle(exc_value, {"source": "sys.excepthook"}, level=logging.CRITICAL)

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """Get the global ErrorHandler instance."""
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling for the application.

    This should be called once during application startup.
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: str = "INFO") -> None:
    """
    Initialize logging configuration.

    Args:
        level: Name of the root logging level
    """
    get_error_handler()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
