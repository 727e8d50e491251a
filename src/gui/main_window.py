"""
Main window for the Student Registration application.

This module contains the MainWindow class which hosts the registration
form and owns the validation, storage and notification objects behind it.
"""

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QPushButton

from core.config_manager import ConfigManager
from core.student_store import QSettingsStorage, StorageBackend, StudentRecordStore
from gui.validation.event_binding import FormEventBinder
from gui.validation.field_accessor import WidgetFieldAccessor
from gui.validation.form_controller import FormController
from gui.widgets.notification_manager import NotificationManager
from gui.widgets.registration_form_ui import RegistrationFormUI
from gui.widgets.strength_indicator import StrengthIndicatorWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Provides the student registration form.
    """

    def __init__(self, config_manager: ConfigManager | None = None, storage: StorageBackend | None = None) -> None:
        """
        Initialize the main window.

        Args:
            config_manager: Configuration source (a QSettings-backed one by default)
            storage: Storage backend for submitted records (QSettings by default)
        """
        super().__init__()

        self.config_manager = config_manager or ConfigManager()

        # Set up the UI
        self.ui = RegistrationFormUI(self)
        self.ui.setup_ui()

        # Initialize managers
        self.store = StudentRecordStore(storage or QSettingsStorage(), key=self.config_manager.storage_key)
        self.notification_manager = NotificationManager(
            self.success_banner, duration_ms=self.config_manager.success_message_duration_ms, parent=self
        )
        self.field_accessor = WidgetFieldAccessor(self.ui.fields, self.ui.error_labels)
        self.form_controller = FormController(
            self.field_accessor,
            self.store,
            self.notification_manager,
            strength_display=self.strength_indicator,
            parent=self,
        )

        # Connect signals
        self.event_binder = FormEventBinder(self.form_controller, self.ui.fields, self.submit_button)
        self.event_binder.bind()

        logger.debug(f"Registration form ready, {self.store.count()} registrations stored")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event."""
        self.notification_manager.cleanup()
        event.accept()

    # Property accessors for UI components
    @property
    def success_banner(self) -> QLabel:
        """Get the success banner label."""
        if self.ui.success_banner is not None:
            return self.ui.success_banner
        raise AttributeError("success_banner not found in UI")

    @property
    def submit_button(self) -> QPushButton:
        """Get the submit button."""
        if self.ui.submit_button is not None:
            return self.ui.submit_button
        raise AttributeError("submit_button not found in UI")

    @property
    def strength_indicator(self) -> StrengthIndicatorWidget:
        """Get the password strength indicator."""
        if self.ui.strength_indicator is not None:
            return self.ui.strength_indicator
        raise AttributeError("strength_indicator not found in UI")
