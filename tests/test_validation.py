"""Tests for form validation and the error types."""

import pytest

from pronet.errors import NotFoundError, ValidationError
from pronet.validation import (
    is_valid_email,
    validate_confirm_password,
    validate_email,
    validate_full_name,
    validate_password,
    validate_signin,
    validate_signup,
)


class TestFieldValidators:
    @pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@example.org"])
    def test_valid_emails(self, email):
        assert is_valid_email(email)
        assert validate_email(email) is None

    @pytest.mark.parametrize("email", ["plain", "a@b", "a@b.c", "@example.com"])
    def test_invalid_emails(self, email):
        assert validate_email(email) == "Please enter a valid email address"

    def test_required_messages(self):
        assert validate_email("") == "Email is required"
        assert validate_password("") == "Password is required"
        assert validate_full_name("") == "Full name is required"
        assert validate_confirm_password("secret", "") == "Please confirm your password"

    def test_length_limits(self):
        assert validate_password("12345") == "Password must be at least 6 characters"
        assert validate_password("123456") is None
        assert validate_full_name("A") == "Full name must be at least 2 characters"
        assert validate_full_name("Al") is None

    def test_mismatch(self):
        assert validate_confirm_password("secret1", "secret2") == "Passwords do not match"


class TestFormValidation:
    def test_valid_signup(self):
        validate_signup("alex@example.com", "secret1", "secret1", "Alex Morgan")

    def test_collects_every_failure(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_signup("bad", "123", "456", "")
        assert set(excinfo.value.errors) == {"email", "password", "confirm_password", "full_name"}
        assert "email: Please enter a valid email address" in str(excinfo.value)

    def test_signin(self):
        validate_signin("alex@example.com", "secret1")
        with pytest.raises(ValidationError) as excinfo:
            validate_signin("alex@example.com", "")
        assert excinfo.value.errors == {"password": "Password is required"}


class TestErrors:
    def test_not_found_message(self):
        error = NotFoundError("jobs", "abc")
        assert error.kind == "jobs"
        assert str(error) == "jobs abc not found"
