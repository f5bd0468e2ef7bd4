"""Lookup adapters - Duplicate-email check implementations."""

from .simulated import SimulatedEmailLookup

__all__ = ["SimulatedEmailLookup"]
