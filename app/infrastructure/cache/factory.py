"""Geolocation cache factory.

The cache backend is chosen once, at startup: Redis when it answers a PING,
the disabled cache otherwise. There is no reconnect loop; a Redis instance
that comes up later is only picked up by a restart.
"""

from typing import TYPE_CHECKING

import redis

from infrastructure.cache.cache import GeoCache
from infrastructure.cache.disabled import DisabledGeoCache
from infrastructure.cache.redis import RedisGeoCache
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import RedisSettings

logger = get_module_logger()


def create_redis_client(redis_settings: "RedisSettings") -> redis.Redis:
    """Build a redis client from settings without connecting."""
    return redis.Redis(
        host=redis_settings.REDIS_HOST,
        port=redis_settings.REDIS_PORT,
        password=redis_settings.REDIS_PASSWORD or None,
        db=redis_settings.REDIS_DB,
        socket_timeout=redis_settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        socket_connect_timeout=redis_settings.REDIS_SOCKET_TIMEOUT_SECONDS,
        decode_responses=True,
    )


def create_geo_cache(redis_settings: "RedisSettings") -> GeoCache:
    """Create the geolocation cache for this process.

    Args:
        redis_settings: Redis section of the application settings.

    Returns:
        RedisGeoCache if Redis is enabled and reachable, DisabledGeoCache otherwise.
    """
    if not redis_settings.REDIS_ENABLED:
        logger.info("geo_cache_disabled", reason="redis_disabled_by_config")
        return DisabledGeoCache()

    client = create_redis_client(redis_settings)
    try:
        client.ping()
    except redis.RedisError as e:
        logger.warning(
            "geo_cache_disabled",
            reason="redis_unavailable",
            host=redis_settings.REDIS_HOST,
            port=redis_settings.REDIS_PORT,
            error=str(e),
        )
        client.close()
        return DisabledGeoCache()

    logger.info(
        "geo_cache_connected",
        backend="redis",
        host=redis_settings.REDIS_HOST,
        port=redis_settings.REDIS_PORT,
        db=redis_settings.REDIS_DB,
    )
    return RedisGeoCache(client)
