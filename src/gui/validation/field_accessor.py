"""
Field access for the registration form.

The form controller never touches widgets directly; it reads values and
sets visual state through a FieldAccessor keyed by field identifier.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Protocol

from PySide6.QtWidgets import QCheckBox, QComboBox, QLabel, QLineEdit, QWidget

from core.rules import FieldValue
from gui.utils.styling import STATE_INVALID, STATE_UNTOUCHED, STATE_VALID, apply_validation_style


class FieldState(Enum):
    """Visual validation state of a single field."""

    UNTOUCHED = STATE_UNTOUCHED
    VALID = STATE_VALID
    INVALID = STATE_INVALID


class FieldAccessor(Protocol):
    """Read values and drive the visual state of named form fields."""

    def field_ids(self) -> list[str]: ...
    def get_value(self, field_id: str) -> FieldValue: ...
    def set_state(self, field_id: str, state: FieldState) -> None: ...
    def set_message(self, field_id: str, message: str) -> None: ...
    def reset_values(self) -> None: ...


class WidgetFieldAccessor:
    """
    FieldAccessor over Qt input widgets.

    Supports QLineEdit (text), QComboBox (item data, falling back to the
    item text) and QCheckBox (checked state). Each field may have an
    adjacent QLabel that receives its error message.
    """

    def __init__(self, fields: Mapping[str, QWidget], error_labels: Mapping[str, QLabel] | None = None) -> None:
        self._fields = dict(fields)
        self._error_labels = dict(error_labels or {})
        self._logger = logging.getLogger(__name__)

    def field_ids(self) -> list[str]:
        return list(self._fields)

    def widget(self, field_id: str) -> QWidget | None:
        return self._fields.get(field_id)

    def get_value(self, field_id: str) -> FieldValue:
        """
        Get a field's current value.

        Returns:
            The text, the selected option's value, the checked state, or
            None when no such field exists
        """
        widget = self._fields.get(field_id)
        if widget is None:
            return None
        if isinstance(widget, QCheckBox):
            return widget.isChecked()
        if isinstance(widget, QComboBox):
            data = widget.currentData()
            return data if isinstance(data, str) else widget.currentText()
        if isinstance(widget, QLineEdit):
            return widget.text()

        self._logger.warning(f"Unsupported widget type for field '{field_id}': {type(widget).__name__}")
        return None

    def set_state(self, field_id: str, state: FieldState) -> None:
        widget = self._fields.get(field_id)
        if widget is not None:
            apply_validation_style(widget, state.value)

    def set_message(self, field_id: str, message: str) -> None:
        label = self._error_labels.get(field_id)
        if label is not None:
            label.setText(message)

    def reset_values(self) -> None:
        """Restore every field to its initial empty value."""
        for widget in self._fields.values():
            # Programmatic resets must not look like user changes
            widget.blockSignals(True)
            try:
                if isinstance(widget, QCheckBox):
                    widget.setChecked(False)
                elif isinstance(widget, QComboBox):
                    widget.setCurrentIndex(0)
                elif isinstance(widget, QLineEdit):
                    widget.clear()
            finally:
                widget.blockSignals(False)
