"""Form field validation for sign-up and sign-in screens.

Each ``validate_*`` function returns the message to show next to the field,
or None when the value is acceptable.
"""

import re
from typing import Dict, Optional

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email or "") is not None


def validate_email(email: str) -> Optional[str]:
    if not email:
        return "Email is required"
    if not is_valid_email(email):
        return "Please enter a valid email address"
    return None


def validate_password(password: str) -> Optional[str]:
    if not password:
        return "Password is required"
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return None


def validate_full_name(full_name: str) -> Optional[str]:
    if not full_name:
        return "Full name is required"
    if len(full_name) < MIN_NAME_LENGTH:
        return f"Full name must be at least {MIN_NAME_LENGTH} characters"
    return None


def validate_confirm_password(password: str, confirm_password: str) -> Optional[str]:
    if not confirm_password:
        return "Please confirm your password"
    if password != confirm_password:
        return "Passwords do not match"
    return None


def validate_signup(email: str, password: str, confirm_password: str, full_name: str) -> None:
    """
    Validate a complete sign-up form.

    Raises:
        ValidationError: listing every field that failed.
    """
    checks = {
        "email": validate_email(email),
        "password": validate_password(password),
        "confirm_password": validate_confirm_password(password, confirm_password),
        "full_name": validate_full_name(full_name),
    }
    errors: Dict[str, str] = {name: msg for name, msg in checks.items() if msg}
    if errors:
        raise ValidationError(errors)


def validate_signin(email: str, password: str) -> None:
    """Validate a sign-in form. Raises ValidationError on failure."""
    checks = {
        "email": validate_email(email),
        "password": validate_password(password),
    }
    errors = {name: msg for name, msg in checks.items() if msg}
    if errors:
        raise ValidationError(errors)
