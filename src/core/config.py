"""
Configuration for the Student Registration application.

This module provides the configuration defaults, the form's field
identifiers, the JSON Schema for persisted student records and the
QSettings setup helpers.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "StudentRegistration"
APP_NAME = "Form"

# Key under which the submitted records are kept
STUDENTS_STORAGE_KEY = "students"

# Registered form fields, in display order
FIELD_IDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "studentId",
    "course",
    "dob",
    "password",
    "confirmPassword",
    "terms",
)

# Fields that are validated but never persisted
SENSITIVE_FIELDS: frozenset[str] = frozenset({"password", "confirmPassword"})

COURSES: tuple[tuple[str, str], ...] = (
    ("computer-science", "Computer Science"),
    ("engineering", "Engineering"),
    ("business", "Business Administration"),
    ("medicine", "Medicine"),
    ("arts", "Arts & Humanities"),
)

DEFAULT_CONFIG: dict[str, Any] = {
    "success_message_duration_ms": 3000,
    "storage_key": STUDENTS_STORAGE_KEY,
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
}

# JSON Schema for the persisted record sequence (draft-07)
STUDENT_RECORDS_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Submitted student registrations",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["submittedAt"],
        "properties": {
            "name": {"type": "string"},
            "email": {"type": "string"},
            "phone": {"type": "string"},
            "studentId": {"type": "string"},
            "course": {"type": "string"},
            "dob": {"type": "string"},
            "terms": {"type": "boolean"},
            "submittedAt": {"type": "string", "minLength": 1},
        },
        "not": {"anyOf": [{"required": [name]} for name in sorted(SENSITIVE_FIELDS)]},
    },
}


def get_app_data_dir() -> Path:
    """
    Get the writable application data directory using QStandardPaths.

    Returns:
        Path to the application data directory
    """
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not location:
        location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
        return Path(location) / APP_ORGANIZATION / APP_NAME
    return Path(location)


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
