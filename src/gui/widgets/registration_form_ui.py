"""
UI setup and layout for the registration window.

This module builds the form's widgets and layout, separating layout
concerns from validation and submission logic.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config import COURSES, FIELD_IDS
from gui.utils.styling import STATE_UNTOUCHED, StyleSheets, apply_validation_style, get_common_form_layout_config
from gui.widgets.strength_indicator import StrengthIndicatorWidget

# field_id -> (label, placeholder)
FIELD_LABELS: dict[str, tuple[str, str]] = {
    "name": ("Full Name", "Enter your full name"),
    "email": ("Email Address", "you@example.com"),
    "phone": ("Phone Number", "10-digit phone number"),
    "studentId": ("Student ID", "Enter your student ID"),
    "course": ("Course", ""),
    "dob": ("Date of Birth (YYYY-MM-DD)", ""),
    "password": ("Password", "At least 8 characters"),
    "confirmPassword": ("Confirm Password", "Re-enter your password"),
    "terms": ("I agree to the terms and conditions", ""),
}

# Digits required in every position; empty reads back as "--"
DATE_INPUT_MASK = "9999-99-99;_"


class RegistrationFormUI:
    """
    Handles UI setup and layout for the registration window.

    After setup_ui() the widgets are reachable by field identifier through
    `fields` and `error_labels`.
    """

    def __init__(self, main_window: QMainWindow) -> None:
        """
        Initialize the UI manager.

        Args:
            main_window: The window to set up
        """
        self.main_window = main_window
        self.central_widget: QWidget | None = None

        self.fields: dict[str, QWidget] = {}
        self.error_labels: dict[str, QLabel] = {}

        self.strength_indicator: StrengthIndicatorWidget | None = None
        self.success_banner: QLabel | None = None
        self.submit_button: QPushButton | None = None

    def setup_ui(self) -> None:
        """Set up the complete user interface."""
        self.main_window.setWindowTitle("Student Registration")
        self.main_window.setMinimumSize(480, 640)

        self.central_widget = QWidget()
        self.main_window.setCentralWidget(self.central_widget)

        layout_config = get_common_form_layout_config()
        layout = QVBoxLayout(self.central_widget)
        layout.setContentsMargins(*layout_config["margins"])
        layout.setSpacing(layout_config["spacing"])

        title = QLabel("Student Registration")
        title.setObjectName("formTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(title)
        layout.addSpacing(layout_config["section_spacing"])

        self.success_banner = QLabel()
        self.success_banner.setObjectName("successMessage")
        self.success_banner.setWordWrap(True)
        self.success_banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.success_banner)

        for field_id in FIELD_IDS:
            self._add_field(layout, field_id)
            if field_id == "password":
                self.strength_indicator = StrengthIndicatorWidget()
                layout.addWidget(self.strength_indicator)

        layout.addSpacing(layout_config["section_spacing"])

        self.submit_button = QPushButton("Register")
        self.submit_button.setObjectName("submitButton")
        self.submit_button.setAutoDefault(False)
        self.submit_button.setMinimumHeight(40)
        layout.addWidget(self.submit_button)

        layout.addStretch()

    def _add_field(self, layout: QVBoxLayout, field_id: str) -> None:
        label_text, placeholder = FIELD_LABELS[field_id]
        widget = self._create_input(field_id, label_text, placeholder)
        widget.setObjectName(field_id)

        if not isinstance(widget, QCheckBox):
            label = QLabel(label_text)
            label.setBuddy(widget)
            layout.addWidget(label)
        layout.addWidget(widget)

        error_label = QLabel()
        error_label.setObjectName(f"{field_id}Error")
        error_label.setStyleSheet(StyleSheets.get_error_label_style())
        layout.addWidget(error_label)

        apply_validation_style(widget, STATE_UNTOUCHED)

        self.fields[field_id] = widget
        self.error_labels[field_id] = error_label

    def _create_input(self, field_id: str, label_text: str, placeholder: str) -> QWidget:
        if field_id == "course":
            combo = QComboBox()
            combo.addItem("Select a course", "")
            for value, text in COURSES:
                combo.addItem(text, value)
            return combo

        if field_id == "terms":
            return QCheckBox(label_text)

        line_edit = QLineEdit()
        line_edit.setPlaceholderText(placeholder)
        if field_id in ("password", "confirmPassword"):
            line_edit.setEchoMode(QLineEdit.EchoMode.Password)
        elif field_id == "dob":
            line_edit.setInputMask(DATE_INPUT_MASK)
        return line_edit
