"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Request

from src.adapters.lookup.simulated import SimulatedEmailLookup
from src.config.settings import get_settings
from src.domain.error_log import ErrorLog
from src.domain.registration import RegistrationService


@lru_cache
def get_email_lookup() -> SimulatedEmailLookup:
    """Get simulated email lookup (singleton, configured from settings)."""
    settings = get_settings()
    return SimulatedEmailLookup(
        delay_seconds=settings.lookup_delay_seconds,
        marker=settings.duplicate_marker,
    )


def get_registration_service() -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the lookup collaborator into the domain service.
    """
    return RegistrationService(lookup=get_email_lookup())


def get_error_log(request: Request) -> ErrorLog:
    """
    Get the application's error log from app state.

    The log is created during app lifespan startup and stored in app.state.
    It is owned by the API layer; the domain never writes to it.
    """
    return request.app.state.error_log
