"""Geolocation cache.

Optional key-value store with expiry in front of the geolocation provider.
The backend is selected once at startup by ``create_geo_cache``.

Usage:

    from infrastructure.cache import create_geo_cache

    cache = create_geo_cache(settings.redis)

    cached = cache.get("ip:203.0.113.5")
    if cached is None:
        cache.set("ip:203.0.113.5", payload, ttl_seconds=86400)
"""

from infrastructure.cache.cache import GeoCache
from infrastructure.cache.disabled import DisabledGeoCache
from infrastructure.cache.factory import create_geo_cache
from infrastructure.cache.redis import RedisGeoCache

__all__ = [
    "GeoCache",
    "DisabledGeoCache",
    "RedisGeoCache",
    "create_geo_cache",
]
