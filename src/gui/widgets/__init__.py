"""
Reusable GUI widgets for the Student Registration application.

This module contains the form layout and the custom widgets it is built
from.
"""

from .notification_manager import NotificationManager
from .strength_indicator import StrengthIndicatorWidget

__all__ = ["NotificationManager", "StrengthIndicatorWidget"]
