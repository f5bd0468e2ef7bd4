"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol


class LookupUnavailable(Exception):
    """
    Raised by an EmailLookup adapter that cannot answer.

    The domain converts it into a DatabaseError value at the call site,
    so it never escapes a registration attempt.
    """

    pass


class EmailLookup(Protocol):
    """Port interface for the duplicate-email check."""

    async def exists(self, email: str) -> bool:
        """
        Report whether an email is already registered.

        Args:
            email: Normalized email address

        Returns:
            True if the email is taken, False otherwise

        Raises:
            LookupUnavailable: If the backing service cannot be reached
        """
        ...
