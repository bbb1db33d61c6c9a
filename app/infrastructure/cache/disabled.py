"""No-op geolocation cache used when no cache store is available."""

from typing import Optional

from infrastructure.cache.cache import GeoCache


class DisabledGeoCache(GeoCache):
    """Cache that never stores anything; every lookup is a miss."""

    backend = "disabled"

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        return None
