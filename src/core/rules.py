"""
Declarative validation rules for the student registration form.

Each registered field maps to a FieldRule: a predicate over the field's
current value plus the message shown when the predicate fails. Predicates
receive a read-only lookup for sibling field values so cross-field rules
(password vs. name, confirmPassword vs. password) stay testable in isolation.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any

FieldValue = str | bool | None
FieldLookup = Callable[[str], FieldValue]
Predicate = Callable[[Any, FieldLookup], bool]

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Only ASCII 0-9 count as phone digits
NON_DIGITS = re.compile(r"\D", re.ASCII)

WEAK_PHONE_NUMBERS = frozenset({"1234567890", "0123456789", "9876543210"})
PASSWORD_SYMBOLS = frozenset(string.punctuation)

MIN_NAME_LENGTH = 5
MIN_STUDENT_ID_LENGTH = 4
MIN_PASSWORD_LENGTH = 8
MIN_AGE = 16
MAX_AGE = 100


def _no_siblings(field_id: str) -> FieldValue:
    return None


@dataclass(frozen=True)
class FieldRule:
    """A field's validation predicate and the message shown when it fails."""

    predicate: Predicate
    message: str

    def check(self, value: Any, lookup: FieldLookup | None = None) -> bool:
        return bool(self.predicate(value, lookup or _no_siblings))


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one field value."""

    valid: bool
    message: str = ""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def is_valid_name(value: Any, lookup: FieldLookup) -> bool:
    return len(_text(value).strip()) >= MIN_NAME_LENGTH


def is_valid_email(value: Any, lookup: FieldLookup) -> bool:
    text = _text(value)
    return "@" in text and EMAIL_PATTERN.fullmatch(text) is not None


def is_valid_phone(value: Any, lookup: FieldLookup) -> bool:
    digits = NON_DIGITS.sub("", _text(value))
    if len(digits) != 10:
        return False
    if digits in WEAK_PHONE_NUMBERS:
        return False
    return len(set(digits)) > 1


def is_valid_student_id(value: Any, lookup: FieldLookup) -> bool:
    return len(_text(value).strip()) >= MIN_STUDENT_ID_LENGTH


def is_course_selected(value: Any, lookup: FieldLookup) -> bool:
    return _text(value) != ""


def age_in_years(birth_date: str, today: date | None = None) -> int | None:
    """
    Age from the birth year alone.

    Month and day are ignored, so a birthday later this year already
    counts. Returns None when the date cannot be parsed.
    """
    try:
        born = date.fromisoformat(birth_date.strip())
    except (AttributeError, ValueError):
        return None
    return (today or date.today()).year - born.year


def is_valid_age(value: Any, lookup: FieldLookup) -> bool:
    age = age_in_years(_text(value))
    return age is not None and MIN_AGE <= age <= MAX_AGE


def is_valid_password(value: Any, lookup: FieldLookup) -> bool:
    password = _text(value)
    if len(password) < MIN_PASSWORD_LENGTH:
        return False

    lowered = password.casefold()
    if lowered == "password":
        return False

    name = _text(lookup("name")).strip().casefold()
    if name and name in lowered:
        return False

    has_letter = any(ch in string.ascii_letters for ch in password)
    has_digit = any(ch in string.digits for ch in password)
    has_symbol = any(ch in PASSWORD_SYMBOLS for ch in password)
    return has_letter and has_digit and has_symbol


def passwords_match(value: Any, lookup: FieldLookup) -> bool:
    confirmation = _text(value)
    return confirmation != "" and confirmation == _text(lookup("password"))


def is_checked(value: Any, lookup: FieldLookup) -> bool:
    return bool(value)


FIELD_RULES: Mapping[str, FieldRule] = MappingProxyType(
    {
        "name": FieldRule(is_valid_name, "Name must be at least 5 characters long"),
        "email": FieldRule(is_valid_email, "Please enter a valid email address"),
        "phone": FieldRule(is_valid_phone, "Phone number must be 10 digits and not a simple sequence"),
        "studentId": FieldRule(is_valid_student_id, "Student ID must be at least 4 characters"),
        "course": FieldRule(is_course_selected, "Please select a course"),
        "dob": FieldRule(is_valid_age, "Age must be between 16 and 100 years"),
        "password": FieldRule(
            is_valid_password,
            "Password must be at least 8 characters with a letter, a number and a symbol, "
            "and must not contain your name",
        ),
        "confirmPassword": FieldRule(passwords_match, "Passwords do not match"),
        "terms": FieldRule(is_checked, "You must agree to the terms and conditions"),
    }
)


def evaluate(
    field_id: str,
    value: Any,
    lookup: FieldLookup | None = None,
    rules: Mapping[str, FieldRule] = FIELD_RULES,
) -> bool:
    """Evaluate a field's rule; fields without a rule are valid."""
    rule = rules.get(field_id)
    if rule is None:
        return True
    return rule.check(value, lookup)


def validate_value(
    field_id: str,
    value: Any,
    lookup: FieldLookup | None = None,
    rules: Mapping[str, FieldRule] = FIELD_RULES,
) -> ValidationResult:
    """Evaluate a field's rule and pair the outcome with its message."""
    rule = rules.get(field_id)
    if rule is None or rule.check(value, lookup):
        return ValidationResult(True)
    return ValidationResult(False, rule.message)


class PasswordStrength(Enum):
    """Display-only password strength classes."""

    NONE = (0, "none", "")
    WEAK = (1, "weak", "Weak")
    FAIR = (2, "fair", "Fair")
    GOOD = (3, "good", "Good")
    STRONG = (4, "strong", "Strong")

    def __init__(self, score: int, css_class: str, label: str) -> None:
        self.score = score
        self.css_class = css_class
        self.label = label

    @classmethod
    def from_score(cls, score: int) -> PasswordStrength:
        for strength in cls:
            if strength.score == score:
                return strength
        raise ValueError(f"Password strength score out of range: {score}")


def password_strength(value: str) -> PasswordStrength:
    """
    Score a password for the strength meter.

    One point each for: at least 8 characters, mixed case, a digit and a
    symbol. This never affects whether the password field is valid.
    """
    checks = (
        len(value) >= MIN_PASSWORD_LENGTH,
        any(ch.islower() for ch in value) and any(ch.isupper() for ch in value),
        any(ch in string.digits for ch in value),
        any(ch in PASSWORD_SYMBOLS for ch in value),
    )
    return PasswordStrength.from_score(sum(checks))
