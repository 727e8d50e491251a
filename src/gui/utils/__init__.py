"""
GUI-specific utilities for the Student Registration application.

This module contains utility functions and classes that are specific
to the GUI implementation.
"""

from .styling import (
    STATE_INVALID,
    STATE_UNTOUCHED,
    STATE_VALID,
    AccessiblePalette,
    StyleSheets,
    apply_validation_style,
    get_common_form_layout_config,
    get_strength_color,
)

__all__ = [
    "STATE_INVALID",
    "STATE_UNTOUCHED",
    "STATE_VALID",
    "AccessiblePalette",
    "StyleSheets",
    "apply_validation_style",
    "get_common_form_layout_config",
    "get_strength_color",
]
