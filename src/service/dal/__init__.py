"""
Data Access Layer (DAL) for the VerifyResponse function.

This module provides the interface for external service lookups and the
factory used by the handler layer.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class LocationLookup(Protocol):
    """Protocol defining the location lookup interface."""

    def get_calling_ip(self) -> str:
        """Return the caller's apparent public IP address."""
        ...


class BaseLocationLookup(ABC):
    """Abstract base class for location lookup implementations."""

    @abstractmethod
    def get_calling_ip(self) -> str:
        """Return the caller's apparent public IP address."""
        pass


def get_location_lookup() -> LocationLookup:
    """
    Factory function to get the location lookup.

    Returns:
        Location lookup instance with its own shared HTTP client
    """
    # Import here to avoid circular imports
    from service.dal.location_client import CheckIpClient

    return CheckIpClient()


__all__ = [
    'LocationLookup',
    'BaseLocationLookup',
    'get_location_lookup',
]
