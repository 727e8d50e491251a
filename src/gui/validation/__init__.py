"""
Form validation system for the Student Registration GUI.

This package binds the declarative rule table to the form's widgets,
providing immediate per-field feedback and the submit/reset lifecycle.
"""

from .event_binding import FocusEventFilter, FormEventBinder
from .field_accessor import FieldAccessor, FieldState, WidgetFieldAccessor
from .form_controller import FormController

__all__ = [
    "FieldAccessor",
    "FieldState",
    "FocusEventFilter",
    "FormController",
    "FormEventBinder",
    "WidgetFieldAccessor",
]
