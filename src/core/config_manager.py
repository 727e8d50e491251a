"""
Configuration manager for the Student Registration application.

Provides QSettings-backed configuration management with default fallbacks
and type safety.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, setup_qsettings
from .error_handler import get_error_handler
from .errors import ConfigError, ErrorCode

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    QSettings-backed configuration manager with robust defaults.

    Values live under the "config/" group so they never collide with the
    record store, which shares the same QSettings file.
    """

    GROUP = "config"

    def __init__(self) -> None:
        """Initialize the ConfigManager with QSettings."""
        setup_qsettings()
        self._settings = QSettings()
        self._defaults = DEFAULT_CONFIG.copy()

    def _qualified(self, key: str) -> str:
        return f"{self.GROUP}/{key}"

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Configuration value with type coercion and default fallback
        """
        fallback = default if default is not None else self._defaults.get(key)

        value = self._settings.value(self._qualified(key), fallback)

        if fallback is not None:
            try:
                expected_type = type(fallback)
                if expected_type is bool:
                    # QSettings returns strings for booleans in INI files
                    value = value.lower() in ("true", "1", "yes", "on") if isinstance(value, str) else bool(value)
                elif expected_type in (int, float, str):
                    value = expected_type(value)
                elif not isinstance(value, expected_type):
                    raise TypeError(f"expected {expected_type.__name__}, got {type(value).__name__}")
            except (ValueError, TypeError) as e:
                self._report_invalid(key, value, e)
                value = fallback

        return value

    def _report_invalid(self, key: str, value: Any, cause: Exception) -> None:
        error = ConfigError(
            code=ErrorCode.CONFIG_INVALID,
            user_message=f"Invalid value for setting '{key}', using the default",
            technical_message=f"{type(cause).__name__}: {cause}",
            context={"setting": key, "value": value},
        )
        get_error_handler().handle(error, level=logging.WARNING)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Value to store
        """
        self._settings.setValue(self._qualified(key), value)
        self._settings.sync()

    def load_all(self) -> dict[str, Any]:
        """
        Load all configuration values merged with defaults.

        Returns:
            Dictionary with all configuration keys
        """
        return {key: self.get(key) for key in self._defaults}

    def reset_to_defaults(self) -> None:
        """Remove every stored configuration value."""
        self._settings.remove(self.GROUP)
        self._settings.sync()

        logger.info("Configuration reset to defaults")

    def has_key(self, key: str) -> bool:
        """Check if a configuration key exists in storage."""
        return self._settings.contains(self._qualified(key))

    def remove_key(self, key: str) -> None:
        """Remove a configuration key from storage."""
        self._settings.remove(self._qualified(key))
        self._settings.sync()

    @property
    def success_message_duration_ms(self) -> int:
        """How long the success banner stays visible."""
        duration = self.get("success_message_duration_ms")
        if duration <= 0:
            logger.warning(f"Ignoring non-positive banner duration {duration}")
            return int(self._defaults["success_message_duration_ms"])
        return duration

    @property
    def storage_key(self) -> str:
        """Key of the submitted-records sequence."""
        return self.get("storage_key") or str(self._defaults["storage_key"])
