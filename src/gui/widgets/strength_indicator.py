"""
Password strength indicator widget.

Shows a colored bar and a short label for the current password's strength
class. Purely informational; it never blocks submission.
"""

from PySide6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QWidget

from core.rules import PasswordStrength
from gui.utils.styling import StyleSheets, get_strength_color


class StrengthIndicatorWidget(QWidget):
    """
    Widget for displaying the password strength class.

    The bar fills one quarter per satisfied check.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        """Initialize the strength indicator widget."""
        super().__init__(parent)
        self._strength = PasswordStrength.NONE
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setObjectName("passwordStrength")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 4)
        self.strength_bar.setTextVisible(False)
        layout.addWidget(self.strength_bar, 1)

        self.strength_text = QLabel()
        self.strength_text.setMinimumWidth(60)
        layout.addWidget(self.strength_text)

        self.set_strength(PasswordStrength.NONE)

    def set_strength(self, strength: PasswordStrength) -> None:
        """
        Set the displayed strength class.

        Args:
            strength: The new strength class
        """
        self._strength = strength

        self.strength_bar.setValue(strength.score)
        self.strength_bar.setStyleSheet(StyleSheets.get_strength_bar_style(strength))

        self.strength_text.setText(strength.label)
        self.strength_text.setStyleSheet(f"color: {get_strength_color(strength)}; font-weight: bold;")

        # Exposed for stylesheets keyed on the class name
        self.setProperty("strength", strength.css_class)

    def strength(self) -> PasswordStrength:
        """Get the displayed strength class."""
        return self._strength

    def reset(self) -> None:
        """Clear the indicator."""
        self.set_strength(PasswordStrength.NONE)
