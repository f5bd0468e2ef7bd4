"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration validation core: a closed error
taxonomy, the Result value that carries those errors, the field
validators, and the fail-fast and collect-all composers built from them.
Nothing here prints, logs, or raises for a validation outcome.
"""

from .accumulate import ValidationIssue, validate_all, validate_registration_all
from .error_log import ErrorLog, ErrorLogEntry
from .errors import (
    AgeError,
    DatabaseError,
    DomainError,
    DuplicateEmailError,
    EmailError,
    ErrorKind,
    PasswordError,
)
from .ports import EmailLookup, LookupUnavailable
from .registration import RegistrationPayload, RegistrationService, build_registration_payload
from .result import Failure, Result, Success, failure, success
from .validators import validate_age, validate_email, validate_password

__all__ = [
    "AgeError",
    "DatabaseError",
    "DomainError",
    "DuplicateEmailError",
    "EmailError",
    "EmailLookup",
    "ErrorKind",
    "ErrorLog",
    "ErrorLogEntry",
    "Failure",
    "LookupUnavailable",
    "PasswordError",
    "RegistrationPayload",
    "RegistrationService",
    "Result",
    "Success",
    "ValidationIssue",
    "build_registration_payload",
    "failure",
    "success",
    "validate_age",
    "validate_all",
    "validate_email",
    "validate_password",
    "validate_registration_all",
]
