"""Geolocation provider and public address discovery settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GeolocationSettings(IntegrationSettings):
    """Outbound lookup configuration.

    The free ip-api.com tier allows about 45 requests per minute, which is
    why results are cached for a day by default.

    Environment Variables:
        GEOLOCATION_API_URL: Base URL of the geolocation provider; the IP is
            appended as the last path segment (default: http://ip-api.com/json)
        PUBLIC_IP_URL: Service returning the caller's public IP as plain text
            (default: https://api.ipify.org)
        HTTP_TIMEOUT_SECONDS: Deadline for each outbound HTTP call (default: 3)
        GEO_CACHE_TTL_SECONDS: Lifetime of cached geolocation records
            (default: 86400s = 24h)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_url = settings.geolocation.GEOLOCATION_API_URL
        ```
    """

    GEOLOCATION_API_URL: str = Field(
        default="http://ip-api.com/json", alias="GEOLOCATION_API_URL"
    )
    PUBLIC_IP_URL: str = Field(default="https://api.ipify.org", alias="PUBLIC_IP_URL")
    HTTP_TIMEOUT_SECONDS: float = Field(default=3.0, alias="HTTP_TIMEOUT_SECONDS")
    GEO_CACHE_TTL_SECONDS: int = Field(default=86400, alias="GEO_CACHE_TTL_SECONDS")
