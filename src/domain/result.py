"""
Result value - Success or Failure, never both.

Errors travel through the program as ordinary return values. Every
combinator returns a new Result (or the same immutable one) instead of
unwinding the stack, so N dependent steps compose as N chained calls:

    build = (
        validate_email(email)
        .and_then(lambda e: validate_password(password).map(lambda p: (e, p)))
    )

Both variants are frozen dataclasses, so structural pattern matching works:

    match result:
        case Success(value): ...
        case Failure(error): ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> "Success[U]":
        """Transform the contained value."""
        return Success(f(self.value))

    def map_error(self, f: Callable[[NoReturn], F]) -> "Success[T]":
        """No error to transform; returns self."""
        return self

    def and_then(self, f: Callable[[T], "Result[U, F]"]) -> "Result[U, F]":
        """Feed the value into the next step and return its Result as-is."""
        return f(self.value)

    async def and_then_async(self, f: Callable[[T], Awaitable["Result[U, F]"]]) -> "Result[U, F]":
        """Await the next step with the value."""
        return await f(self.value)

    def or_else(self, f: Callable[[NoReturn], "Result[T, F]"]) -> "Success[T]":
        """Nothing to recover from; returns self."""
        return self

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[NoReturn], R]) -> R:
        """Collapse to a plain value using the success handler."""
        return on_success(self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome holding an error value."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, f: Callable[[NoReturn], U]) -> "Failure[E]":
        """Nothing to transform; returns self with the error untouched."""
        return self

    def map_error(self, f: Callable[[E], F]) -> "Failure[F]":
        """Transform the contained error."""
        return Failure(f(self.error))

    def and_then(self, f: Callable[[NoReturn], "Result[U, F]"]) -> "Failure[E]":
        """Short-circuit: f is never called."""
        return self

    async def and_then_async(self, f: Callable[[NoReturn], Awaitable["Result[U, F]"]]) -> "Failure[E]":
        """Short-circuit: f is never awaited."""
        return self

    def or_else(self, f: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        """Give the error to a recovery step, which decides the new outcome."""
        return f(self.error)

    def match(self, on_success: Callable[[NoReturn], R], on_failure: Callable[[E], R]) -> R:
        """Collapse to a plain value using the failure handler."""
        return on_failure(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Wrap a value in Success."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Wrap an error in Failure."""
    return Failure(error)
