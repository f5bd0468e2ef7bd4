"""
Collect-all validation - Report every invalid field at once.

Where build_registration_payload stops at the first problem, the
composers here run every validator unconditionally and gather each
failure as a ValidationIssue, in field order.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import DomainError
from .result import Failure, Result, Success
from .validators import validate_age, validate_email, validate_password


@dataclass(frozen=True)
class ValidationIssue:
    """A field error with its type erased, so mixed errors fit one list."""

    field: str
    message: str


def to_issue(field: str) -> Callable[[DomainError], ValidationIssue]:
    """Build a map_error function tagging an error with its field name."""

    def convert(error: DomainError) -> ValidationIssue:
        return ValidationIssue(field=field, message=error.message)

    return convert


def collect(
    *named_results: tuple[str, Result[Any, DomainError]],
) -> Result[dict[str, Any], list[ValidationIssue]]:
    """
    Merge independent field results.

    Args:
        named_results: (field, result) pairs, in reporting order

    Returns:
        Success with {field: value} if every result succeeded, otherwise
        Failure with one issue per failed field in the given order
    """
    values: dict[str, Any] = {}
    issues: list[ValidationIssue] = []

    for field, result in named_results:
        match result.map_error(to_issue(field)):
            case Success(value):
                values[field] = value
            case Failure(issue):
                issues.append(issue)

    if issues:
        return Failure(issues)
    return Success(values)


def validate_all(email: str, password: str) -> Result[dict[str, str], list[ValidationIssue]]:
    """
    Validate email and password, reporting both problems if both fail.

    Returns:
        Success with {"email", "password"} normalized values, or Failure
        with the email issue (if any) followed by the password issue
    """
    return collect(
        ("email", validate_email(email)),
        ("password", validate_password(password)),
    )


def validate_registration_all(
    email: str, password: str, age: int
) -> Result[dict[str, Any], list[ValidationIssue]]:
    """Collect-all validation over email, password and age."""
    return collect(
        ("email", validate_email(email)),
        ("password", validate_password(password)),
        ("age", validate_age(age)),
    )
