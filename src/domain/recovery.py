"""
Recovery combinators - Partial, conditional handling of email errors.

Recovery is a decision about one specific failure, not a blanket catch:
the handlers below replace only the failures they recognise and return
every other Failure untouched.

Failures are recognised by message text ("Missing @", "domain"), which
couples control flow to wording. ErrorKind would be the sturdier key, but
all email failures share ErrorKind.EMAIL, so the message is what tells
them apart today.
"""

from typing import Any

from .errors import EmailError
from .result import Failure, Result, Success
from .validators import validate_age, validate_email

FALLBACK_EMAIL = "user@default.com"
SUGGESTED_EMAIL = "user@gmail.com"
DEFAULT_EMAIL = "default@example.com"
DEFAULT_AGE = 25


def with_fallback(email: str, fallback: str = FALLBACK_EMAIL) -> Result[str, EmailError]:
    """
    Validate email, substituting a fallback when "@" is missing.

    Any other failure (e.g. "Missing domain") is returned unchanged.
    """

    def recover(error: EmailError) -> Result[str, EmailError]:
        if "Missing @" in error.message:
            return Success(fallback)
        return Failure(error)

    return validate_email(email).or_else(recover)


def with_conditional_handling(
    email: str, suggestion: str = SUGGESTED_EMAIL
) -> Result[str, EmailError]:
    """Validate email, suggesting an address when the domain is missing."""

    def recover(error: EmailError) -> Result[str, EmailError]:
        if "domain" in error.message:
            return Success(suggestion)
        return Failure(error)

    return validate_email(email).or_else(recover)


def with_defaults(
    email: str,
    age: int,
    default_email: str = DEFAULT_EMAIL,
    default_age: int = DEFAULT_AGE,
) -> Result[dict[str, Any], EmailError]:
    """
    Validate email and age, replacing whichever is invalid with a default.

    Always succeeds; the Failure type is kept so callers compose it like
    any other validation step.
    """
    return Success(
        {
            "email": validate_email(email).unwrap_or(default_email),
            "age": validate_age(age).unwrap_or(default_age),
        }
    )
