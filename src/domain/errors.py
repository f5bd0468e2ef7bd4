"""
Domain errors - Closed taxonomy of registration failures.

Errors here are plain immutable values, not exceptions. Validators return
them inside a Failure; nothing in the domain raises them.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """
    Tag identifying which rule family produced an error.

    Uses str mixin so the tag serializes directly in API responses.
    """

    EMAIL = "email"
    PASSWORD = "password"
    AGE = "age"
    DUPLICATE_EMAIL = "duplicate_email"
    DATABASE = "database"


@dataclass(frozen=True)
class EmailError:
    """Email failed a format rule."""

    message: str
    kind: ErrorKind = ErrorKind.EMAIL

    @property
    def detail(self) -> str:
        return f"Email validation failed: {self.message}"


@dataclass(frozen=True)
class PasswordError:
    """Password failed a strength rule."""

    message: str
    kind: ErrorKind = ErrorKind.PASSWORD

    @property
    def detail(self) -> str:
        return f"Password validation failed: {self.message}"


@dataclass(frozen=True)
class AgeError:
    """Age outside the accepted range."""

    message: str
    kind: ErrorKind = ErrorKind.AGE

    @property
    def detail(self) -> str:
        return f"Age validation failed: {self.message}"


@dataclass(frozen=True)
class DuplicateEmailError:
    """Email is already registered according to the lookup collaborator."""

    email: str
    kind: ErrorKind = ErrorKind.DUPLICATE_EMAIL

    @property
    def message(self) -> str:
        return f"Email already registered: {self.email}"

    @property
    def detail(self) -> str:
        return self.message


@dataclass(frozen=True)
class DatabaseError:
    """The lookup collaborator could not answer."""

    message: str
    kind: ErrorKind = ErrorKind.DATABASE

    @property
    def detail(self) -> str:
        return f"Database error: {self.message}"


DomainError = EmailError | PasswordError | AgeError | DuplicateEmailError | DatabaseError
