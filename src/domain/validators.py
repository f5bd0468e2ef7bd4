"""
Field validators - Pure, total checks for registration input.

Each validator returns a Result whose Failure carries only its own error
kind. Rules are checked in a fixed order and the first violated rule wins,
so the same input always yields the same message.
"""

import re

from .errors import AgeError, EmailError, PasswordError
from .result import Failure, Result, Success

MIN_PASSWORD_LENGTH = 8
MIN_AGE = 13
MAX_AGE = 120

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")


def validate_email(email: str) -> Result[str, EmailError]:
    """
    Check email shape and normalize it.

    Rules (in order):
    1. Must contain "@"  -> "Missing @ symbol"
    2. Must contain "."  -> "Missing domain"

    Returns:
        Success with the lowercased, stripped email
    """
    if "@" not in email:
        return Failure(EmailError("Missing @ symbol"))
    if "." not in email:
        return Failure(EmailError("Missing domain"))
    return Success(email.lower().strip())


def validate_password(password: str) -> Result[str, PasswordError]:
    """
    Check password strength.

    Rules (in order):
    1. At least 8 characters    -> "Too short"
    2. An uppercase letter A-Z  -> "Missing uppercase"
    3. A digit 0-9              -> "Missing number"

    Returns:
        Success with the password unchanged
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Failure(PasswordError("Too short"))
    if not _UPPERCASE.search(password):
        return Failure(PasswordError("Missing uppercase"))
    if not _DIGIT.search(password):
        return Failure(PasswordError("Missing number"))
    return Success(password)


def validate_age(age: int) -> Result[int, AgeError]:
    """Accept ages 13 through 120 inclusive."""
    if age < MIN_AGE:
        return Failure(AgeError("Must be 13 or older"))
    if age > MAX_AGE:
        return Failure(AgeError("Invalid age"))
    return Success(age)
