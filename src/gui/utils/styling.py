"""
Shared styling utilities for the Student Registration GUI.

This module contains the color palette and stylesheet helpers used by the
form fields, the success banner and the password strength meter.
"""

from typing import Any, Protocol

from core.rules import PasswordStrength


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...
    def setProperty(self, name: str, value: Any) -> bool: ...


class AccessiblePalette:
    """
    Centralized color palette with WCAG AA accessibility compliance.

    All text/background combinations meet a contrast ratio of 4.5:1.
    """

    # Field borders
    BORDER_DEFAULT = "#e0e0e0"  # Untouched field
    BORDER_ERROR = "#ff6b6b"  # Invalid field
    BORDER_SUCCESS = "#198754"  # Valid field

    # Error slot under each field
    ERROR_TEXT = "#c0392b"

    # Success banner
    SUCCESS_TEXT = "#0f5132"
    SUCCESS_BG = "#d1e7dd"
    SUCCESS_BORDER = "#badbcc"

    # Password strength meter
    STRENGTH_NONE = "#adb5bd"
    STRENGTH_WEAK = "#dc3545"
    STRENGTH_FAIR = "#fd7e14"
    STRENGTH_GOOD = "#0dcaf0"
    STRENGTH_STRONG = "#198754"

    BACKGROUND_DEFAULT = "#ffffff"
    TEXT_PRIMARY = "#212529"
    TEXT_SECONDARY = "#6c757d"


# Field visual states
STATE_UNTOUCHED = "untouched"
STATE_VALID = "valid"
STATE_INVALID = "invalid"

_BORDER_COLORS = {
    STATE_UNTOUCHED: AccessiblePalette.BORDER_DEFAULT,
    STATE_VALID: AccessiblePalette.BORDER_SUCCESS,
    STATE_INVALID: AccessiblePalette.BORDER_ERROR,
}

_STRENGTH_COLORS = {
    PasswordStrength.NONE: AccessiblePalette.STRENGTH_NONE,
    PasswordStrength.WEAK: AccessiblePalette.STRENGTH_WEAK,
    PasswordStrength.FAIR: AccessiblePalette.STRENGTH_FAIR,
    PasswordStrength.GOOD: AccessiblePalette.STRENGTH_GOOD,
    PasswordStrength.STRONG: AccessiblePalette.STRENGTH_STRONG,
}


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_field_style(state: str) -> str:
        """Get the border stylesheet for a field in the given visual state."""
        color = _BORDER_COLORS.get(state, AccessiblePalette.BORDER_DEFAULT)
        return f"border: 2px solid {color}; border-radius: 4px; padding: 4px;"

    @staticmethod
    def get_error_label_style() -> str:
        return f"""
            QLabel {{
                color: {AccessiblePalette.ERROR_TEXT};
                font-size: 12px;
            }}
        """

    @staticmethod
    def get_success_banner_style() -> str:
        return f"""
            QLabel {{
                color: {AccessiblePalette.SUCCESS_TEXT};
                font-size: 14px;
                font-weight: bold;
                padding: 10px;
                background-color: {AccessiblePalette.SUCCESS_BG};
                border: 1px solid {AccessiblePalette.SUCCESS_BORDER};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_strength_bar_style(strength: PasswordStrength) -> str:
        """Get the stylesheet of the strength meter's colored bar."""
        return f"""
            QProgressBar {{
                border: 1px solid {AccessiblePalette.BORDER_DEFAULT};
                border-radius: 3px;
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                max-height: 6px;
            }}
            QProgressBar::chunk {{
                background-color: {get_strength_color(strength)};
            }}
        """


def get_strength_color(strength: PasswordStrength) -> str:
    """
    Get the meter color for a password strength class.

    Args:
        strength: Strength class

    Returns:
        Color hex string
    """
    return _STRENGTH_COLORS.get(strength, AccessiblePalette.STRENGTH_NONE)


def apply_validation_style(widget: StyleableWidget, state: str) -> None:
    """
    Apply validation-based styling to an input widget.

    Args:
        widget: The input widget to style
        state: One of "untouched", "valid" or "invalid"
    """
    widget.setProperty("validationState", state)
    widget.setProperty("hasError", state == STATE_INVALID)
    widget.setStyleSheet(StyleSheets.get_field_style(state))

    # Force style refresh
    widget.style().unpolish(widget)
    widget.style().polish(widget)


def get_common_form_layout_config() -> dict[str, Any]:
    """
    Get common configuration for form layouts.

    Returns:
        Dictionary with layout configuration parameters
    """
    return {
        "margins": (20, 20, 20, 20),
        "spacing": 6,
        "section_spacing": 14,
    }
