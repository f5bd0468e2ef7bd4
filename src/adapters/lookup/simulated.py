"""
Simulated email lookup adapter - Implements EmailLookup protocol.

This module stands in for a remote user directory. It sleeps to mimic
network latency, then answers from a marker substring and an optional
set of known addresses. No real I/O is performed.
"""

import asyncio
import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class SimulatedEmailLookup:
    """
    Implements EmailLookup protocol with an artificial delay.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Any email containing the marker (default "existing") is reported as
    taken, as is any email passed in ``registered``.
    """

    def __init__(
        self,
        delay_seconds: float = 0.01,
        marker: str = "existing",
        registered: Iterable[str] = (),
    ) -> None:
        """
        Initialize the lookup.

        Args:
            delay_seconds: Simulated latency per lookup
            marker: Substring that marks an email as already registered
            registered: Additional emails to treat as registered
        """
        self._delay_seconds = delay_seconds
        self._marker = marker
        self._registered = frozenset(email.strip().lower() for email in registered)

    async def exists(self, email: str) -> bool:
        """
        Report whether the email is already registered.

        Args:
            email: Normalized email address

        Returns:
            True if the email contains the marker or is a known address
        """
        await asyncio.sleep(self._delay_seconds)
        found = (bool(self._marker) and self._marker in email) or email in self._registered
        logger.debug("[LOOKUP] Email: %s Exists: %s", email, found)
        return found
