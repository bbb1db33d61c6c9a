"""
Geolocation resolution with an optional cache in front of the provider.

Cached records are stored under ``ip:<address>`` as ``{"country", "code"}``
JSON and are never modified; a miss or an expired entry is simply replaced
by a fresh provider lookup.
"""

import ipaddress
import json
from typing import Optional

from infrastructure.cache import GeoCache
from infrastructure.clients.ip_api import GeoRecord, IpApiClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()

CACHE_KEY_PREFIX = "ip:"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60


def cache_key(ip_address: str) -> str:
    return f"{CACHE_KEY_PREFIX}{ip_address}"


def encode_record(record: GeoRecord) -> str:
    return json.dumps({"country": record.country, "code": record.country_code})


def decode_record(raw: str) -> Optional[GeoRecord]:
    """Decode a cached value, or return None if it is not a valid record."""
    try:
        data = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    country, code = data.get("country"), data.get("code")
    if not isinstance(country, str) or not isinstance(code, str):
        return None
    return GeoRecord(country=country, country_code=code)


class GeolocationResolver:
    """Maps an IP address to a GeoRecord, through the cache when one is configured.

    Args:
        client: Geolocation provider client
        cache: Cache adapter (the disabled cache when no store is available)
        ttl_seconds: Lifetime of cached records
    """

    def __init__(
        self,
        client: IpApiClient,
        cache: GeoCache,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        self.client = client
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    def resolve(self, ip_address: str) -> OperationResult:
        """Resolve the country for an IP address.

        Args:
            ip_address: IP literal to geolocate

        Returns:
            OperationResult with a GeoRecord on success; any provider failure
            is returned as an error result
        """
        log = logger.bind(ip_address=ip_address, operation="resolve")

        try:
            ipaddress.ip_address(ip_address)
        except ValueError:
            log.warning("invalid_ip_format")
            return OperationResult.permanent_error(
                message=f"Invalid IP address format: {ip_address!r}",
                error_code="INVALID_IP_FORMAT",
            )

        key = cache_key(ip_address)
        cached = self.cache.get(key)
        if cached is not None:
            record = decode_record(cached)
            if record is not None:
                log.debug("geolocation_cache_hit")
                return OperationResult.success(data=record, message="cache hit")
            log.warning("geolocation_cache_decode_failed")

        log.info("geolocation_cache_miss", backend=self.cache.backend)
        result = self.client.lookup(ip_address)
        if not result.is_success:
            log.warning(
                "geolocation_failed", status=result.status, error=result.message
            )
            return result

        self.cache.set(key, encode_record(result.data), self.ttl_seconds)
        return result
