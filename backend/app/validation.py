"""
Project Backend — Request Validation
======================================

What:  One validation function per UserRequest field, plus the composition
       that checks a whole request.
Why:   User validation failures are reported in-band (statusCode 401 with a
       catalog description), so each check must name exactly which rule
       failed instead of raising.
How:   Every check returns a ValidationResult: ok, or the ErrorMessage of
       the first rule that failed. Checks are pure; they never touch the
       store.

Check order for a request (first failure wins):
    roleId → name → phoneNumber → email → password

Check order for a password (first failure wins):
    length ≥ 8 → at most 72 UTF-8 bytes → uppercase → lowercase → digit

Letter and digit rules are ASCII only: "²" is not a digit and "Å" is not an
uppercase letter.
"""

import enum
import string
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from email_validator import EmailNotValidError, validate_email as check_email_address

from app.schemas.user import UserRequest

MIN_PASSWORD_LENGTH = 8

# bcrypt only accepts this many bytes of input
MAX_PASSWORD_BYTES = 72


class ErrorMessage(str, enum.Enum):
    """Message catalog: the value is the description sent to clients."""

    PASSWORD_LENGTH = "password must be at least 8 characters"
    PASSWORD_TOO_LONG = "password must be at most 72 bytes"
    PASSWORD_UPPERCASE = "password must contain uppercase"
    PASSWORD_LOWERCASE = "password must contain lowercase"
    PASSWORD_NUMBER = "password must contain numeric"
    EMAIL = "email format is invalid"
    NAME_REQUIRED = "name is required"
    PHONE_NUMBER_REQUIRED = "phone number is required"
    ROLE_ID_POSITIVE = "role id must be a positive number"
    EMAIL_ALREADY_USED = "email is already registered"
    USER_NOT_FOUND = "user not found"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a check: `error` is None when the value passed."""

    error: Optional[ErrorMessage] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, error: ErrorMessage) -> "ValidationResult":
        return cls(error=error)


def _first_failure(checks: Iterable[Callable[[], ValidationResult]]) -> ValidationResult:
    """Run checks lazily in order and stop at the first failure."""
    for check in checks:
        result = check()
        if not result.ok:
            return result
    return ValidationResult.success()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_role_id(role_id: Optional[int]) -> ValidationResult:
    if role_id is None or role_id <= 0:
        return ValidationResult.failure(ErrorMessage.ROLE_ID_POSITIVE)
    return ValidationResult.success()


def validate_name(name: Optional[str]) -> ValidationResult:
    if _is_blank(name):
        return ValidationResult.failure(ErrorMessage.NAME_REQUIRED)
    return ValidationResult.success()


def validate_phone_number(phone_number: Optional[str]) -> ValidationResult:
    if _is_blank(phone_number):
        return ValidationResult.failure(ErrorMessage.PHONE_NUMBER_REQUIRED)
    return ValidationResult.success()


def validate_email(email: Optional[str]) -> ValidationResult:
    """
    Check that `email` is a syntactically valid address.

    Deliverability (DNS) checks are off: validation must stay pure and
    work offline.
    """
    if _is_blank(email):
        return ValidationResult.failure(ErrorMessage.EMAIL)
    try:
        check_email_address(email, check_deliverability=False)
    except EmailNotValidError:
        return ValidationResult.failure(ErrorMessage.EMAIL)
    return ValidationResult.success()


def validate_password(password: Optional[str]) -> ValidationResult:
    """Check password complexity; the first failing rule is reported."""
    value = password or ""
    if len(value) < MIN_PASSWORD_LENGTH:
        return ValidationResult.failure(ErrorMessage.PASSWORD_LENGTH)
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return ValidationResult.failure(ErrorMessage.PASSWORD_TOO_LONG)
    if not any(ch in string.ascii_uppercase for ch in value):
        return ValidationResult.failure(ErrorMessage.PASSWORD_UPPERCASE)
    if not any(ch in string.ascii_lowercase for ch in value):
        return ValidationResult.failure(ErrorMessage.PASSWORD_LOWERCASE)
    if not any(ch in string.digits for ch in value):
        return ValidationResult.failure(ErrorMessage.PASSWORD_NUMBER)
    return ValidationResult.success()


def validate_user_request(request: UserRequest) -> ValidationResult:
    """Validate every field of a create/update request in fixed order."""
    return _first_failure((
        lambda: validate_role_id(request.role_id),
        lambda: validate_name(request.name),
        lambda: validate_phone_number(request.phone_number),
        lambda: validate_email(request.email),
        lambda: validate_password(request.password),
    ))


def normalize_email(email: str) -> str:
    """
    Canonical form used to store and look up an address.

    The address must already have passed validate_email. Matching is
    case-insensitive, so `Albert@Gmail.com` and `albert@gmail.com` are the
    same user.
    """
    return check_email_address(email, check_deliverability=False).normalized.lower()
