"""
Tests for the password strength indicator widget.
"""

import pytest

from core.rules import PasswordStrength
from gui.utils.styling import get_strength_color
from gui.widgets.strength_indicator import StrengthIndicatorWidget


@pytest.fixture
def indicator(qtbot):
    widget = StrengthIndicatorWidget()
    qtbot.addWidget(widget)
    return widget


def test_starts_empty(indicator):
    assert indicator.strength() is PasswordStrength.NONE
    assert indicator.strength_bar.value() == 0
    assert indicator.property("strength") == "none"


@pytest.mark.parametrize("strength", list(PasswordStrength))
def test_displays_each_class(indicator, strength):
    indicator.set_strength(strength)

    assert indicator.strength() is strength
    assert indicator.strength_bar.value() == strength.score
    assert indicator.strength_text.text() == strength.label
    assert indicator.property("strength") == strength.css_class
    assert get_strength_color(strength) in indicator.strength_text.styleSheet()


def test_reset(indicator):
    indicator.set_strength(PasswordStrength.STRONG)
    indicator.reset()
    assert indicator.strength() is PasswordStrength.NONE
    assert indicator.strength_bar.value() == 0
