"""
Project Backend — Validation Unit Tests
=========================================

What:  Tests for the per-field checks and their composition.
Why:   The reported reason is part of the API contract: clients show the
       description verbatim, so the right rule must win.

What we test:
    ✅ Each password rule, and the length → upper → lower → digit order
    ✅ Passwords over 72 bytes and non-ASCII letters/digits
    ✅ Email format accepted/rejected, case-insensitive normalization
    ✅ Required fields and positive roleId
    ✅ Request-level order (roleId → name → phoneNumber → email → password)
"""

import pytest

from app.schemas.user import UserRequest
from app.validation import (
    ErrorMessage,
    ValidationResult,
    normalize_email,
    validate_email,
    validate_password,
    validate_role_id,
    validate_user_request,
)


def make_request(**overrides) -> UserRequest:
    data = {
        "role_id": 1,
        "name": "name",
        "phone_number": "12345678",
        "email": "albert@gmail.com",
        "password": "Albert1234",
    }
    data.update(overrides)
    return UserRequest(**data)


class TestPasswordValidation:
    """Tests for validate_password."""

    def test_valid_password(self):
        assert validate_password("Albert1234").ok

    def test_missing_uppercase(self):
        assert validate_password("albert1234").error is ErrorMessage.PASSWORD_UPPERCASE

    def test_missing_lowercase(self):
        assert validate_password("ALBERT1234").error is ErrorMessage.PASSWORD_LOWERCASE

    def test_missing_digit(self):
        assert validate_password("albertALBERT").error is ErrorMessage.PASSWORD_NUMBER

    def test_too_short(self):
        assert validate_password("albert").error is ErrorMessage.PASSWORD_LENGTH

    def test_exactly_eight_characters_passes(self):
        assert validate_password("Abcdef12").ok

    def test_length_reported_before_other_rules(self):
        """A short password missing everything else still reports length."""
        assert validate_password("abc").error is ErrorMessage.PASSWORD_LENGTH

    def test_uppercase_reported_before_digit(self):
        assert validate_password("albertalbert").error is ErrorMessage.PASSWORD_UPPERCASE

    def test_missing_password(self):
        assert validate_password(None).error is ErrorMessage.PASSWORD_LENGTH

    def test_eighty_character_password_too_long(self):
        assert validate_password("Albert1234" + "x" * 70).error is ErrorMessage.PASSWORD_TOO_LONG

    def test_seventy_two_bytes_passes(self):
        assert validate_password("Albert1234" + "x" * 62).ok

    def test_length_limit_counts_utf8_bytes(self):
        """38 characters, 74 bytes."""
        assert validate_password("A1" + "é" * 36).error is ErrorMessage.PASSWORD_TOO_LONG

    def test_superscript_is_not_a_digit(self):
        assert validate_password("Albertxyz²").error is ErrorMessage.PASSWORD_NUMBER

    def test_non_ascii_uppercase_does_not_count(self):
        assert validate_password("Ålbertxyz1").error is ErrorMessage.PASSWORD_UPPERCASE

    def test_non_ascii_lowercase_does_not_count(self):
        assert validate_password("ALBERTéè1").error is ErrorMessage.PASSWORD_LOWERCASE


class TestEmailValidation:
    """Tests for validate_email."""

    @pytest.mark.parametrize("email", ["albert@gmail.com", "first.last@mail.co.uk"])
    def test_valid_email(self, email):
        assert validate_email(email).ok

    @pytest.mark.parametrize(
        "email",
        ["albert", "albert@", "@gmail.com", "albert@@gmail.com", "albert gmail.com", "", None],
    )
    def test_invalid_email(self, email):
        assert validate_email(email).error is ErrorMessage.EMAIL

    def test_normalize_email_ignores_case(self):
        assert normalize_email("Albert@Gmail.com") == "albert@gmail.com"
        assert normalize_email("albert@gmail.com") == "albert@gmail.com"


class TestFieldValidation:
    """Tests for the required/positive field checks."""

    @pytest.mark.parametrize("role_id", [0, -1, None])
    def test_role_id_must_be_positive(self, role_id):
        assert validate_role_id(role_id).error is ErrorMessage.ROLE_ID_POSITIVE

    def test_blank_name_rejected(self):
        result = validate_user_request(make_request(name="   "))
        assert result.error is ErrorMessage.NAME_REQUIRED

    def test_missing_phone_number_rejected(self):
        result = validate_user_request(make_request(phone_number=None))
        assert result.error is ErrorMessage.PHONE_NUMBER_REQUIRED


class TestRequestValidation:
    """Tests for validate_user_request composition."""

    def test_valid_request(self):
        assert validate_user_request(make_request()) == ValidationResult.success()

    def test_email_reported_before_password(self):
        result = validate_user_request(make_request(email="albert", password="short"))
        assert result.error is ErrorMessage.EMAIL

    def test_role_id_reported_first(self):
        result = validate_user_request(make_request(role_id=0, name="", email="albert"))
        assert result.error is ErrorMessage.ROLE_ID_POSITIVE

    def test_catalog_values_are_descriptions(self):
        assert ErrorMessage.PASSWORD_UPPERCASE.value == "password must contain uppercase"
        assert ErrorMessage.EMAIL.value == "email format is invalid"
