"""
Exception-based counterpart - The same rules, signalled by raising.

Kept for side-by-side comparison with the Result pipeline. Each function
is derived from its Result-returning twin, so both styles always agree on
outcomes and messages; only the signalling mechanism differs.

Compare:

    try:
        payload = build_registration_payload_or_raise(email, password, age)
    except ValidationRejected as exc:
        ...  # exc.error is one of the domain errors

with:

    build_registration_payload(email, password, age).match(on_ok, on_error)
"""

from typing import NoReturn

from .errors import DomainError
from .registration import RegistrationPayload, build_registration_payload
from .validators import validate_age, validate_email, validate_password


class ValidationRejected(Exception):
    """Raised when input breaks a registration rule."""

    def __init__(self, error: DomainError) -> None:
        super().__init__(error.detail)
        self.error = error


def _raise(error: DomainError) -> NoReturn:
    raise ValidationRejected(error)


def _identity(value):
    return value


def validate_email_or_raise(email: str) -> str:
    """
    Raises:
        ValidationRejected: carrying an EmailError
    """
    return validate_email(email).match(_identity, _raise)


def validate_password_or_raise(password: str) -> str:
    """
    Raises:
        ValidationRejected: carrying a PasswordError
    """
    return validate_password(password).match(_identity, _raise)


def validate_age_or_raise(age: int) -> int:
    """
    Raises:
        ValidationRejected: carrying an AgeError
    """
    return validate_age(age).match(_identity, _raise)


def build_registration_payload_or_raise(email: str, password: str, age: int) -> RegistrationPayload:
    """
    Validate all fields, raising on the first failure.

    Raises:
        ValidationRejected: carrying an EmailError, PasswordError or AgeError
    """
    return build_registration_payload(email, password, age).match(_identity, _raise)


__all__ = [
    "ValidationRejected",
    "build_registration_payload_or_raise",
    "validate_age_or_raise",
    "validate_email_or_raise",
    "validate_password_or_raise",
]
