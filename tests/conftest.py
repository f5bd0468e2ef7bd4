"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A zero-latency simulated email lookup
- A registration service wired to it
- An error log with a fixed clock
"""

from datetime import datetime, timezone

import pytest

from src.adapters.lookup.simulated import SimulatedEmailLookup
from src.domain.error_log import ErrorLog
from src.domain.registration import RegistrationService

FIXED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def lookup() -> SimulatedEmailLookup:
    """Simulated lookup without the artificial delay."""
    return SimulatedEmailLookup(delay_seconds=0)


@pytest.fixture
def service(lookup: SimulatedEmailLookup) -> RegistrationService:
    """Registration service wired to the simulated lookup."""
    return RegistrationService(lookup=lookup)


@pytest.fixture
def error_log() -> ErrorLog:
    """Error log whose timestamps are always FIXED_TIME."""
    return ErrorLog(clock=lambda: FIXED_TIME)
