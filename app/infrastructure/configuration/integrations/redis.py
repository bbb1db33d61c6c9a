"""Redis cache integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class RedisSettings(IntegrationSettings):
    """Redis connection used for the geolocation cache.

    The cache is optional: when Redis is disabled or unreachable at startup
    the service runs without it.

    Environment Variables:
        REDIS_ENABLED: Set to false to skip the cache entirely (default: true)
        REDIS_HOST: Redis hostname (default: localhost)
        REDIS_PORT: Redis port (default: 6379)
        REDIS_PASSWORD: Redis password, empty for none
        REDIS_DB: Redis database number (default: 0)
        REDIS_SOCKET_TIMEOUT_SECONDS: Connect/read deadline for Redis calls (default: 1)
    """

    REDIS_ENABLED: bool = Field(default=True, alias="REDIS_ENABLED")
    REDIS_HOST: str = Field(default="localhost", alias="REDIS_HOST")
    REDIS_PORT: int = Field(default=6379, alias="REDIS_PORT")
    REDIS_PASSWORD: str = Field(default="", alias="REDIS_PASSWORD")
    REDIS_DB: int = Field(default=0, alias="REDIS_DB")
    REDIS_SOCKET_TIMEOUT_SECONDS: float = Field(
        default=1.0, alias="REDIS_SOCKET_TIMEOUT_SECONDS"
    )
