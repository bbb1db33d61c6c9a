"""Geolocation cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Optional


class GeoCache(ABC):
    """Abstract base class for geolocation cache implementations.

    Values are opaque strings (the resolver stores JSON). Implementations are
    best effort: a failing backend reports a miss from ``get`` and drops the
    write in ``set`` instead of raising.
    """

    backend: str = "abstract"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the cached value for key.

        Args:
            key: Cache key (``ip:<address>`` for geolocation records).

        Returns:
            Cached value or None if missing, expired or unreadable.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value for key with an expiry.

        Args:
            key: Cache key.
            value: Serialized value to store.
            ttl_seconds: Time-to-live in seconds.
        """
        pass
