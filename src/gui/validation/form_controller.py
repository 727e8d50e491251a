"""
Form controller for the student registration form.

This module drives per-field and whole-form validation, the per-field
visual state, and the submit/reset lifecycle on top of the declarative
rule table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol

from PySide6.QtCore import QObject, Signal

from core.config import SENSITIVE_FIELDS
from core.error_handler import get_error_handler
from core.errors import ErrorCode, ValidationError
from core.rules import FIELD_RULES, FieldRule, FieldValue, PasswordStrength, password_strength
from core.student_store import StudentRecordStore, build_snapshot

from .field_accessor import FieldAccessor, FieldState

PASSWORD_FIELD = "password"
CONFIRM_PASSWORD_FIELD = "confirmPassword"
NAME_FIELD = "name"


class SuccessNotifier(Protocol):
    def show_success(self, message: str) -> None: ...


class StrengthDisplay(Protocol):
    def set_strength(self, strength: PasswordStrength) -> None: ...


def success_message(name: str) -> str:
    return f"Thank you {name}! Your registration has been submitted."


class FormController(QObject):
    """
    Validation and submission controller for the registration form.

    Fields are read through a FieldAccessor; rules come from a mapping of
    field identifier to FieldRule. Every operation runs to completion on
    the calling event.
    """

    # Signals
    fieldValidityChanged = Signal(str, bool, str)  # field_id, valid, message
    submissionSucceeded = Signal(dict)  # stored record
    submissionRejected = Signal(list)  # invalid field ids

    def __init__(
        self,
        accessor: FieldAccessor,
        store: StudentRecordStore,
        notifier: SuccessNotifier,
        strength_display: StrengthDisplay | None = None,
        rules: Mapping[str, FieldRule] = FIELD_RULES,
        clock: Callable[[], datetime] = datetime.now,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._error_handler = get_error_handler()

        self._accessor = accessor
        self._store = store
        self._notifier = notifier
        self._strength_display = strength_display
        self._rules = rules
        self._clock = clock

        self._states: dict[str, FieldState] = {field_id: FieldState.UNTOUCHED for field_id in accessor.field_ids()}
        self._messages: dict[str, str] = {field_id: "" for field_id in accessor.field_ids()}

    def field_ids(self) -> list[str]:
        return self._accessor.field_ids()

    def field_state(self, field_id: str) -> FieldState:
        return self._states.get(field_id, FieldState.UNTOUCHED)

    def field_error(self, field_id: str) -> str:
        """
        Get the error message currently shown for a field.

        Returns:
            Error message or empty string
        """
        return self._messages.get(field_id, "")

    def _lookup(self, field_id: str) -> FieldValue:
        return self._accessor.get_value(field_id)

    def validate_field(self, field_id: str) -> bool:
        """
        Validate one field and update its message and visual state.

        Fields without a rule, or that the accessor cannot find, are valid
        and left untouched.

        Returns:
            True if valid, False otherwise
        """
        rule = self._rules.get(field_id)
        if rule is None:
            return True

        value = self._accessor.get_value(field_id)
        if value is None:
            self._logger.debug(f"Field '{field_id}' not found, treating as valid")
            return True

        try:
            is_valid = rule.check(value, self._lookup)
        except Exception as e:
            self._error_handler.handle(
                ValidationError(
                    code=ErrorCode.RULE_FAILED,
                    user_message=rule.message,
                    field=field_id,
                    technical_message=f"Rule for '{field_id}' raised {type(e).__name__}: {e}",
                )
            )
            is_valid = False

        message = "" if is_valid else rule.message
        state = FieldState.VALID if is_valid else FieldState.INVALID

        self._accessor.set_message(field_id, message)
        self._accessor.set_state(field_id, state)

        changed = self._states.get(field_id) != state or self._messages.get(field_id) != message
        self._states[field_id] = state
        self._messages[field_id] = message
        if changed:
            self.fieldValidityChanged.emit(field_id, is_valid, message)

        return is_valid

    def validate_form(self) -> bool:
        """
        Validate every registered field.

        All fields are validated, even after the first failure, so every
        error message is on screen when this returns.
        """
        results = [self.validate_field(field_id) for field_id in self._accessor.field_ids()]
        return all(results)

    def invalid_fields(self) -> list[str]:
        return [field_id for field_id, state in self._states.items() if state is FieldState.INVALID]

    def on_field_exit(self, field_id: str) -> None:
        """Validate a field when it loses focus or its value is committed."""
        self.validate_field(field_id)

    def on_field_entry(self, field_id: str) -> None:
        """Clear a field's message when the user starts editing it."""
        self._accessor.set_message(field_id, "")
        if field_id in self._messages:
            self._messages[field_id] = ""

    def on_password_input(self) -> None:
        """Refresh the strength meter for the current password."""
        if self._strength_display is None:
            return
        value = self._accessor.get_value(PASSWORD_FIELD)
        self._strength_display.set_strength(password_strength(value if isinstance(value, str) else ""))

    def on_confirm_password_input(self) -> None:
        """Re-check the confirmation against the current password."""
        self.validate_field(CONFIRM_PASSWORD_FIELD)

    def collect_values(self) -> dict[str, Any]:
        """Current value of every non-sensitive field that exists."""
        values: dict[str, Any] = {}
        for field_id in self._accessor.field_ids():
            if field_id in SENSITIVE_FIELDS:
                continue
            value = self._accessor.get_value(field_id)
            if value is not None:
                values[field_id] = value
        return values

    def submit(self) -> bool:
        """
        Validate, store, notify and reset.

        Returns:
            True if the registration was accepted, False if any field is invalid
        """
        if not self.validate_form():
            invalid = self.invalid_fields()
            self._logger.info(f"Form has validation errors: {', '.join(invalid)}")
            self.submissionRejected.emit(invalid)
            return False

        record = build_snapshot(self.collect_values(), submitted_at=self._clock())
        self._logger.info(f"Form submitted: {record}")

        self._store.append(record)

        name = record.get(NAME_FIELD, "")
        self._notifier.show_success(success_message(str(name).strip()))

        self.reset()
        self.submissionSucceeded.emit(record)
        return True

    def reset(self) -> None:
        """Return every field to its initial value and untouched state."""
        self._accessor.reset_values()
        for field_id in self._accessor.field_ids():
            self._accessor.set_message(field_id, "")
            self._accessor.set_state(field_id, FieldState.UNTOUCHED)
            self._states[field_id] = FieldState.UNTOUCHED
            self._messages[field_id] = ""

        if self._strength_display is not None:
            self._strength_display.set_strength(PasswordStrength.NONE)
