"""
Shared fixtures for the Student Registration tests.
"""

import os
from datetime import date

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QStandardPaths  # noqa: E402

from core.rules import PasswordStrength  # noqa: E402
from core.student_store import MemoryStorage, StudentRecordStore  # noqa: E402

# Keep QSettings and log files out of the real user directories
QStandardPaths.setTestModeEnabled(True)


class FakeFieldAccessor:
    """In-memory FieldAccessor recording every visual update."""

    def __init__(self, values):
        self.values = dict(values)
        self.states = {}
        self.messages = {}
        self.state_history = []

    def field_ids(self):
        return list(self.values)

    def get_value(self, field_id):
        return self.values.get(field_id)

    def set_state(self, field_id, state):
        self.states[field_id] = state
        self.state_history.append((field_id, state))

    def set_message(self, field_id, message):
        self.messages[field_id] = message

    def reset_values(self):
        for field_id, value in self.values.items():
            self.values[field_id] = False if isinstance(value, bool) else ""


class FakeNotifier:
    """Records success notifications instead of showing them."""

    def __init__(self):
        self.messages = []

    def show_success(self, message):
        self.messages.append(message)


class FakeStrengthDisplay:
    """Records the strength classes shown."""

    def __init__(self):
        self.history = []

    def set_strength(self, strength):
        self.history.append(strength)

    @property
    def current(self):
        return self.history[-1] if self.history else PasswordStrength.NONE


def birth_date_for_age(age: int) -> str:
    return f"{date.today().year - age}-06-15"


@pytest.fixture
def valid_values():
    """A complete, valid registration."""
    return {
        "name": "Jordan Lee",
        "email": "jordan.lee@example.com",
        "phone": "(555) 123-4567",
        "studentId": "STU-2024",
        "course": "computer-science",
        "dob": birth_date_for_age(20),
        "password": "Secur3!Pass",
        "confirmPassword": "Secur3!Pass",
        "terms": True,
    }


@pytest.fixture
def accessor(valid_values):
    return FakeFieldAccessor(valid_values)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def strength_display():
    return FakeStrengthDisplay()


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def record_store(memory_storage):
    return StudentRecordStore(memory_storage)


@pytest.fixture
def controller(qapp, accessor, record_store, notifier, strength_display):
    from gui.validation.form_controller import FormController

    return FormController(accessor, record_store, notifier, strength_display=strength_display)
