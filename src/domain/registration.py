"""
Registration pipeline - Fail-fast composition of the field validators.

Two stages, composed so the slow one never runs on bad input:

1. Local checks (synchronous): email -> password -> age, chained with
   and_then. The first failing validator in that order decides the error.
2. Remote check (asynchronous): the duplicate-email lookup, attempted only
   after stage 1 produced a payload.

Precedence of reported errors:
    EmailError > PasswordError > AgeError > DuplicateEmailError / DatabaseError

Nothing here raises for a validation outcome; every path returns a Result.
"""

from dataclasses import dataclass

from .errors import AgeError, DatabaseError, DuplicateEmailError, EmailError, PasswordError
from .ports import EmailLookup, LookupUnavailable
from .result import Failure, Result, Success
from .validators import validate_age, validate_email, validate_password

FieldError = EmailError | PasswordError | AgeError
AvailabilityError = DuplicateEmailError | DatabaseError
RegistrationFailure = FieldError | AvailabilityError


@dataclass(frozen=True)
class RegistrationPayload:
    """Registration input whose every field passed its validator."""

    email: str
    password: str
    age: int


def build_registration_payload(
    email: str, password: str, age: int
) -> Result[RegistrationPayload, FieldError]:
    """
    Validate all three fields and assemble a payload.

    Args:
        email: Raw email (normalized on success)
        password: Raw password
        age: Age in years

    Returns:
        Success with the payload, or Failure with the first error in
        email > password > age order
    """
    return (
        validate_email(email)
        .and_then(
            lambda valid_email: validate_password(password).map(
                lambda valid_password: (valid_email, valid_password)
            )
        )
        .and_then(
            lambda partial: validate_age(age).map(
                lambda valid_age: RegistrationPayload(
                    email=partial[0], password=partial[1], age=valid_age
                )
            )
        )
    )


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates local validation and the remote duplicate-email check.
    The lookup collaborator is injected so tests and the API can swap it.
    """

    lookup: EmailLookup

    async def check_available(self, email: str) -> Result[str, AvailabilityError]:
        """
        Ask the lookup collaborator whether the email is free.

        A collaborator that cannot answer becomes a DatabaseError value.

        Returns:
            Success with the email, or Failure with DuplicateEmailError /
            DatabaseError
        """
        try:
            exists = await self.lookup.exists(email)
        except (LookupUnavailable, OSError) as exc:
            return Failure(DatabaseError(str(exc) or type(exc).__name__))

        if exists:
            return Failure(DuplicateEmailError(email))
        return Success(email)

    async def register(
        self, email: str, password: str, age: int
    ) -> Result[RegistrationPayload, RegistrationFailure]:
        """
        Validate input, then confirm the email is not already registered.

        The lookup is awaited only when local validation succeeded.

        Returns:
            Success with the payload, or Failure with the first error
        """
        return await build_registration_payload(email, password, age).and_then_async(
            self._ensure_unregistered
        )

    async def _ensure_unregistered(
        self, payload: RegistrationPayload
    ) -> Result[RegistrationPayload, AvailabilityError]:
        available = await self.check_available(payload.email)
        return available.map(lambda _: payload)
