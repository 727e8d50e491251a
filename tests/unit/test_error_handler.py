"""
Tests for the ErrorHandler.

Tests cover:
- Singleton pattern behavior
- Exception capture and context sanitizing
- Logging and signal emission
- sys.excepthook installation
"""

import logging
import sys
from unittest.mock import patch

import pytest

from core.error_handler import ErrorHandler, get_error_handler, init_logging, setup_error_handling
from core.errors import ErrorCode, StorageError


@pytest.fixture
def handler(qapp):
    return get_error_handler()


class TestErrorHandlerSingleton:
    """Test the singleton pattern implementation."""

    def test_singleton_pattern(self, handler):
        assert ErrorHandler() is handler
        assert get_error_handler() is handler

    def test_initialization_only_once(self, handler):
        with patch.object(ErrorHandler, "_setup_logging") as mock_setup:
            ErrorHandler()
            ErrorHandler()
        mock_setup.assert_not_called()


class TestCapture:
    """Test exception capture and normalization."""

    def test_capture_builtin_exception(self, handler):
        error = handler.capture(ValueError("bad value"))
        assert error.code is ErrorCode.INVALID_INPUT
        assert error.technical_message == "ValueError: bad value"
        assert "traceback" in error.context

    def test_capture_app_error_keeps_identity(self, handler):
        original = StorageError(ErrorCode.STORAGE_WRITE_FAILED, "Could not save")
        assert handler.capture(original) is original

    def test_sensitive_context_is_redacted(self, handler):
        error = handler.capture(ValueError("x"), {"password": "Secur3!Pass", "field": "name"})
        assert error.context["password"] == "[REDACTED]"
        assert "Secur3!Pass" not in str(error.context)
        assert error.context["field"] == "'name'"

    def test_long_values_are_truncated(self, handler):
        error = handler.capture(ValueError("x"), {"note": "a" * 500})
        assert len(error.context["note"]) == 203

    def test_context_size_is_capped(self, handler):
        context = {f"k{i}": i for i in range(25)}
        error = handler.capture(ValueError("x"), context)
        assert error.context["..."] == "(5 more items truncated)"


class TestHandle:
    """Test logging and signal emission."""

    def test_emits_error_signal(self, handler, qtbot):
        with qtbot.waitSignal(handler.errorOccurred, timeout=1000) as blocker:
            result = handler.handle(OSError("disk full"), level=logging.WARNING)

        assert blocker.args == [result]
        assert result.code is ErrorCode.OS_ERROR

    def test_logs_with_app_code(self, handler):
        with patch.object(ErrorHandler._logger, "log") as mock_log:
            handler.handle(ValueError("bad"), level=logging.WARNING)

        level, message = mock_log.call_args.args
        assert level == logging.WARNING
        assert message == "[INVALID_INPUT] bad"
        assert mock_log.call_args.kwargs["extra"]["app_code"] == "INVALID_INPUT"
        assert mock_log.call_args.kwargs["exc_info"] is None

    def test_system_exit_is_reraised(self, handler):
        with pytest.raises(SystemExit):
            handler.handle(SystemExit(1))  # type: ignore[arg-type]


class TestHooks:
    """Test sys.excepthook installation."""

    def test_install_and_restore(self, handler):
        original = sys.excepthook
        setup_error_handling()
        try:
            assert sys.excepthook is not original
        finally:
            handler.restore_hooks()
        assert sys.excepthook is handler._original_excepthook

    def test_unhandled_exception_goes_to_handler(self, handler):
        handler.install_hooks()
        try:
            with patch.object(handler, "handle") as mock_handle:
                error = RuntimeError("crash")
                sys.excepthook(RuntimeError, error, None)
        finally:
            handler.restore_hooks()

        mock_handle.assert_called_once_with(error, {"source": "sys.excepthook"}, level=logging.CRITICAL)


def test_init_logging_sets_level():
    with patch("core.error_handler.logging.basicConfig") as mock_config:
        init_logging("debug")
    assert mock_config.call_args.kwargs["level"] == logging.DEBUG
