"""
Notification management for the Student Registration GUI.

This module shows transient feedback in an inline banner label. Each
notification stays visible for a fixed duration and is then hidden by a
single-shot timer; showing a new notification restarts that timer.
"""

import logging

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QLabel

from gui.utils.styling import StyleSheets

DEFAULT_DURATION_MS = 3000


class NotificationManager(QObject):
    """
    Manages the success banner of the registration form.

    The banner label is owned by the form UI; this object only drives its
    text, visibility and the auto-hide timer.
    """

    notificationShown = Signal(str)
    notificationHidden = Signal()

    def __init__(self, banner: QLabel, duration_ms: int = DEFAULT_DURATION_MS, parent: QObject | None = None) -> None:
        """
        Initialize the notification manager.

        Args:
            banner: Label used to display the message
            duration_ms: How long a notification stays visible
            parent: Parent object
        """
        super().__init__(parent)
        self._banner = banner
        self._duration_ms = duration_ms
        self._logger = logging.getLogger(__name__)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.hide)

        self._banner.setStyleSheet(StyleSheets.get_success_banner_style())
        self._banner.setVisible(False)

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def set_duration(self, duration_ms: int) -> None:
        self._duration_ms = duration_ms

    def show_success(self, message: str) -> None:
        """
        Show a success message and schedule it to hide.

        Args:
            message: Text to display
        """
        self._banner.setText(message)
        self._banner.setVisible(True)
        self._hide_timer.start(self._duration_ms)

        self._logger.debug(f"Showing notification for {self._duration_ms} ms: {message}")
        self.notificationShown.emit(message)

    def hide(self) -> None:
        """Hide the banner immediately."""
        self._hide_timer.stop()
        was_visible = self.is_showing()
        self._banner.setVisible(False)
        if was_visible:
            self.notificationHidden.emit()

    def cancel(self) -> None:
        """Cancel a pending auto-hide, leaving the banner as it is."""
        self._hide_timer.stop()

    def is_showing(self) -> bool:
        """Whether a notification is currently displayed."""
        return not self._banner.isHidden()

    def is_hide_pending(self) -> bool:
        return self._hide_timer.isActive()

    def message(self) -> str:
        return self._banner.text() if self.is_showing() else ""

    def cleanup(self) -> None:
        """Clean up resources."""
        self._hide_timer.stop()
