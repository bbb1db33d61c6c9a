"""Redis-backed geolocation cache implementation."""

from typing import Optional

import redis
import structlog

from infrastructure.cache.cache import GeoCache

logger = structlog.get_logger()


class RedisGeoCache(GeoCache):
    """Redis-backed geolocation cache.

    Entries are plain string keys written with ``SET key value EX ttl`` so
    Redis evicts them on expiry; nothing is ever updated in place.

    Runtime Redis failures are logged and reported as a miss / dropped write.
    """

    backend = "redis"

    def __init__(self, client: redis.Redis):
        """Initialize the cache.

        Args:
            client: Connected redis client (``decode_responses=True``).
        """
        self._client = client

    def get(self, key: str) -> Optional[str]:
        """Get cached value for key.

        Args:
            key: Cache key.

        Returns:
            Cached value or None on miss or Redis error.
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            logger.warning("geo_cache_get_error", key=key, error=str(e))
            return None

        if value is None:
            logger.debug("geo_cache_miss", key=key)
            return None

        logger.debug("geo_cache_hit", key=key)
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value for key with the given TTL.

        Args:
            key: Cache key.
            value: Serialized value.
            ttl_seconds: Time-to-live in seconds.
        """
        try:
            self._client.set(key, value, ex=ttl_seconds)
        except redis.RedisError as e:
            logger.warning("geo_cache_set_error", key=key, error=str(e))
            return

        logger.debug("geo_cache_set_success", key=key, ttl_seconds=ttl_seconds)
