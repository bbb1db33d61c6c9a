"""Top-level settings object combining the application values and each section."""

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import ENV_CONFIG
from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.configuration.integrations import (
    GeolocationSettings,
    RedisSettings,
)

SECTIONS = {
    "geolocation": GeolocationSettings,
    "redis": RedisSettings,
    "server": ServerSettings,
}


class Settings(BaseSettings):
    """Application settings.

    ``PREFIX`` names the environment (empty in production), ``LOG_LEVEL``
    sets the root level and ``GIT_SHA`` is stamped on every log line as
    ``app_version``. Sections not passed explicitly are read from the
    environment:

        settings = get_settings()
        ttl = settings.geolocation.GEO_CACHE_TTL_SECONDS
    """

    model_config = ENV_CONFIG

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    geolocation: GeolocationSettings
    redis: RedisSettings
    server: ServerSettings

    def __init__(self, **kwargs):
        for name, section in SECTIONS.items():
            if name not in kwargs:
                kwargs[name] = section()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        return not self.PREFIX
