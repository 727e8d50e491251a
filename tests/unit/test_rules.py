"""
Tests for the declarative field rule table.
"""

from datetime import date

import pytest

from core.rules import (
    FIELD_RULES,
    FieldRule,
    PasswordStrength,
    ValidationResult,
    age_in_years,
    evaluate,
    password_strength,
    validate_value,
)


def _lookup(**values):
    return lambda field_id: values.get(field_id)


def _birth_date(age: int) -> str:
    return f"{date.today().year - age}-01-01"


class TestRuleTable:
    """Test the shape of the rule table itself."""

    def test_every_form_field_has_a_rule(self):
        assert set(FIELD_RULES) == {
            "name",
            "email",
            "phone",
            "studentId",
            "course",
            "dob",
            "password",
            "confirmPassword",
            "terms",
        }

    def test_rules_are_immutable(self):
        with pytest.raises(TypeError):
            FIELD_RULES["extra"] = FieldRule(lambda value, lookup: True, "never")  # type: ignore[index]

        rule = FIELD_RULES["name"]
        with pytest.raises(AttributeError):
            rule.message = "changed"  # type: ignore[misc]

    def test_missing_rule_is_valid(self):
        assert evaluate("nickname", "") is True
        assert validate_value("nickname", "") == ValidationResult(True, "")

    def test_validate_value_pairs_message(self):
        result = validate_value("name", "Al")
        assert result == ValidationResult(False, "Name must be at least 5 characters long")


class TestName:
    def test_short_name_rejected(self):
        assert evaluate("name", "Al") is False

    def test_length_is_counted_after_trimming(self):
        assert evaluate("name", "  Ana  ") is False
        assert evaluate("name", "  Alice ") is True

    def test_five_characters_accepted(self):
        assert evaluate("name", "Alice") is True


class TestEmail:
    @pytest.mark.parametrize("value", ["student@example.com", "a.b+c@uni.edu.au"])
    def test_valid_addresses(self, value):
        assert evaluate("email", value) is True

    @pytest.mark.parametrize(
        "value",
        ["", "student.example.com", "student@example", "stu dent@example.com", "@example.com", "a@@b.com"],
    )
    def test_invalid_addresses(self, value):
        assert evaluate("email", value) is False

    def test_trailing_newline_rejected(self):
        assert evaluate("email", "student@example.com\n") is False


class TestPhone:
    def test_formatting_characters_are_ignored(self):
        assert evaluate("phone", "(555) 123-4567") is True

    @pytest.mark.parametrize("value", ["555123456", "55512345678", ""])
    def test_wrong_digit_count_rejected(self, value):
        assert evaluate("phone", value) is False

    @pytest.mark.parametrize("value", ["1234567890", "0123456789", "9876543210", "123-456-7890"])
    def test_sequences_rejected(self, value):
        assert evaluate("phone", value) is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digit_rejected(self, digit):
        assert evaluate("phone", digit * 10) is False

    # Arabic-Indic and fullwidth forms of 5551234567
    @pytest.mark.parametrize(
        "value",
        [
            "\u0665\u0665\u0665\u0661\u0662\u0663\u0664\u0665\u0666\u0667",
            "\uff15\uff15\uff15\uff11\uff12\uff13\uff14\uff15\uff16\uff17",
        ],
    )
    def test_non_ascii_digits_rejected(self, value):
        assert evaluate("phone", value) is False


class TestStudentIdAndCourse:
    def test_student_id_length(self):
        assert evaluate("studentId", " S12 ") is False
        assert evaluate("studentId", "S123") is True

    def test_course_placeholder_rejected(self):
        assert evaluate("course", "") is False
        assert evaluate("course", "engineering") is True


class TestDateOfBirth:
    @pytest.mark.parametrize("age", [16, 40, 100])
    def test_ages_in_range_accepted(self, age):
        assert evaluate("dob", _birth_date(age)) is True

    @pytest.mark.parametrize("age", [15, 101, 0])
    def test_ages_out_of_range_rejected(self, age):
        assert evaluate("dob", _birth_date(age)) is False

    @pytest.mark.parametrize("value", ["", "not-a-date", "2001-13-40"])
    def test_unparseable_dates_rejected(self, value):
        assert evaluate("dob", value) is False

    def test_age_ignores_month_and_day(self):
        # Birthday not reached yet this year still counts as passed
        assert age_in_years("2008-12-31", today=date(2024, 1, 1)) == 16
        assert age_in_years("2008-01-01", today=date(2024, 12, 31)) == 16

    def test_age_of_unparseable_date_is_none(self):
        assert age_in_years("yesterday") is None


class TestPassword:
    def test_short_password_rejected(self):
        assert evaluate("password", "short1!", _lookup(name="alice")) is False

    def test_password_containing_name_rejected(self):
        assert evaluate("password", "alicepass1!", _lookup(name="alice")) is False

    def test_name_check_is_case_insensitive(self):
        assert evaluate("password", "xxALICE99!", _lookup(name="Alice")) is False

    def test_literal_password_rejected(self):
        assert evaluate("password", "PassWord", _lookup(name="alice")) is False

    @pytest.mark.parametrize("value", ["abcdefgh1", "abcdefgh!", "12345678!"])
    def test_missing_character_class_rejected(self, value):
        assert evaluate("password", value, _lookup(name="alice")) is False

    def test_strong_password_accepted(self):
        assert evaluate("password", "Secur3!Pass", _lookup(name="Jordan Lee")) is True

    def test_empty_name_does_not_block(self):
        assert evaluate("password", "Secur3!Pass", _lookup(name="")) is True
        assert evaluate("password", "Secur3!Pass") is True


class TestConfirmPassword:
    def test_matching_confirmation_accepted(self):
        assert evaluate("confirmPassword", "Secur3!Pass", _lookup(password="Secur3!Pass")) is True

    def test_mismatch_rejected(self):
        assert evaluate("confirmPassword", "Secur3!Pas", _lookup(password="Secur3!Pass")) is False

    def test_empty_confirmation_rejected_even_if_password_empty(self):
        assert evaluate("confirmPassword", "", _lookup(password="")) is False

    def test_reads_password_at_evaluation_time(self):
        current = {"password": "first-Pa55!"}
        lookup = current.get
        assert evaluate("confirmPassword", "first-Pa55!", lookup) is True

        current["password"] = "second-Pa55!"
        assert evaluate("confirmPassword", "first-Pa55!", lookup) is False


class TestTerms:
    def test_checked_box_accepted(self):
        assert evaluate("terms", True) is True

    def test_unchecked_box_rejected(self):
        assert evaluate("terms", False) is False


class TestPasswordStrength:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", PasswordStrength.NONE),
            ("abc", PasswordStrength.NONE),
            ("abcdefgh", PasswordStrength.WEAK),
            ("abc1", PasswordStrength.WEAK),
            ("Abcdefgh", PasswordStrength.FAIR),
            ("Abcdefg1", PasswordStrength.GOOD),
            ("Abcdef1!", PasswordStrength.STRONG),
        ],
    )
    def test_score_maps_to_class(self, value, expected):
        assert password_strength(value) is expected

    def test_class_names(self):
        assert [s.css_class for s in PasswordStrength] == ["none", "weak", "fair", "good", "strong"]
        assert [s.score for s in PasswordStrength] == [0, 1, 2, 3, 4]

    def test_from_score_out_of_range(self):
        with pytest.raises(ValueError):
            PasswordStrength.from_score(5)
