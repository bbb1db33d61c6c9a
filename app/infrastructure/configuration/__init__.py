"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class
    GeolocationSettings, RedisSettings, ServerSettings: Domain sections

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    port = settings.server.PORT
    redis_host = settings.redis.REDIS_HOST

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import (
    GeolocationSettings,
    RedisSettings,
)
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "GeolocationSettings", "RedisSettings", "ServerSettings"]
