"""
Wiring between the form's Qt widgets and the FormController.

Focus changes arrive through an event filter installed on every field
widget; value commits, keystrokes and the submit button arrive through the
widgets' own signals. Everything is connected once by bind().
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QFocusEvent
from PySide6.QtWidgets import QAbstractButton, QCheckBox, QComboBox, QLineEdit, QWidget

from .form_controller import CONFIRM_PASSWORD_FIELD, PASSWORD_FIELD, FormController


def _is_popup_focus(event: QEvent) -> bool:
    # Opening a combo box popup moves focus without the user leaving the field
    return isinstance(event, QFocusEvent) and event.reason() == Qt.FocusReason.PopupFocusReason


class FocusEventFilter(QObject):
    """Forwards focus-in/focus-out of field widgets to the controller."""

    def __init__(self, controller: FormController, widget_ids: Mapping[QObject, str], parent: QObject | None = None):
        super().__init__(parent)
        self._controller = controller
        self._widget_ids = dict(widget_ids)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        field_id = self._widget_ids.get(watched)
        if field_id is not None:
            if event.type() == QEvent.Type.FocusIn:
                self._controller.on_field_entry(field_id)
            elif event.type() == QEvent.Type.FocusOut and not _is_popup_focus(event):
                self._controller.on_field_exit(field_id)
        return super().eventFilter(watched, event)


class FormEventBinder:
    """
    Subscribes a FormController to its form's widgets.

    The subscriptions live as long as the widgets; there is no unbind. The
    binder owns the focus filter, so keep it alive with the form.
    """

    def __init__(
        self,
        controller: FormController,
        fields: Mapping[str, QWidget],
        submit_button: QAbstractButton | None = None,
    ) -> None:
        self._controller = controller
        self._fields = dict(fields)
        self._submit_button = submit_button
        self._focus_filter: FocusEventFilter | None = None
        self._bound = False
        self._logger = logging.getLogger(__name__)

    @property
    def focus_filter(self) -> FocusEventFilter | None:
        return self._focus_filter

    def bind(self) -> None:
        """Connect every field and the submit button to the controller."""
        if self._bound:
            self._logger.debug("Form events already bound")
            return

        controller = self._controller

        self._focus_filter = FocusEventFilter(
            controller,
            {widget: field_id for field_id, widget in self._fields.items()},
        )

        for field_id, widget in self._fields.items():
            widget.installEventFilter(self._focus_filter)

            if isinstance(widget, QComboBox):
                widget.currentIndexChanged.connect(lambda _index, fid=field_id: controller.on_field_exit(fid))
            elif isinstance(widget, QCheckBox):
                widget.toggled.connect(lambda _checked, fid=field_id: controller.on_field_exit(fid))

        password = self._fields.get(PASSWORD_FIELD)
        if isinstance(password, QLineEdit):
            password.textEdited.connect(lambda _text: controller.on_password_input())

        confirm = self._fields.get(CONFIRM_PASSWORD_FIELD)
        if isinstance(confirm, QLineEdit):
            confirm.textEdited.connect(lambda _text: controller.on_confirm_password_input())

        if self._submit_button is not None:
            self._submit_button.clicked.connect(lambda _checked=False: controller.submit())

        self._bound = True
        self._logger.debug(f"Bound form events for {len(self._fields)} fields")
