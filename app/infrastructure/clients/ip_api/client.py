"""ip-api.com client for geolocation lookups.

Every lookup returns an OperationResult; transport failures, malformed bodies
and provider refusals are never raised to the caller.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import requests
import structlog

from infrastructure.operations import OperationResult, classify_request_error

if TYPE_CHECKING:
    from infrastructure.configuration import GeolocationSettings

logger = structlog.get_logger()

PROVIDER_SUCCESS_STATUS = "success"


@dataclass(frozen=True)
class GeoRecord:
    """Country information for an IP address."""

    country: str
    country_code: str


class IpApiClient:
    """Client for the ip-api.com JSON endpoint.

    The provider answers ``GET <base>/<ip>`` with a JSON object carrying a
    ``status`` field; ``"success"`` bodies include ``country`` and
    ``countryCode``, anything else includes a ``message``.

    Args:
        settings: GeolocationSettings with GEOLOCATION_API_URL and HTTP_TIMEOUT_SECONDS
    """

    def __init__(self, settings: "GeolocationSettings") -> None:
        self._base_url = settings.GEOLOCATION_API_URL.rstrip("/")
        self._timeout = settings.HTTP_TIMEOUT_SECONDS
        self._logger = logger.bind(component="ip_api_client")

    def lookup(self, ip_address: str) -> OperationResult:
        """Look up the country of an IP address.

        Args:
            ip_address: IPv4 or IPv6 literal

        Returns:
            OperationResult with a GeoRecord on success, or an error result
        """
        log = self._logger.bind(ip_address=ip_address)
        log.debug("geolocation_request")

        try:
            response = requests.get(
                f"{self._base_url}/{ip_address}", timeout=self._timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            result = classify_request_error(e)
            log.warning(
                "geolocation_request_failed",
                error_code=result.error_code,
                error=result.message,
            )
            return result

        try:
            payload = response.json()
        except ValueError as e:
            log.warning("geolocation_malformed_response", error=str(e))
            return OperationResult.permanent_error(
                message=f"Malformed geolocation response: {e}",
                error_code="MALFORMED_RESPONSE",
            )

        if not isinstance(payload, dict):
            log.warning("geolocation_malformed_response", error="not an object")
            return OperationResult.permanent_error(
                message="Malformed geolocation response: expected a JSON object",
                error_code="MALFORMED_RESPONSE",
            )

        if payload.get("status") != PROVIDER_SUCCESS_STATUS:
            provider_message = payload.get("message", "")
            log.warning("geolocation_provider_error", provider_message=provider_message)
            return OperationResult.permanent_error(
                message=f"ip-api error: {provider_message}",
                error_code="PROVIDER_ERROR",
            )

        record = GeoRecord(
            country=str(payload.get("country") or ""),
            country_code=str(payload.get("countryCode") or ""),
        )
        log.debug("geolocation_success", country_code=record.country_code)
        return OperationResult.success(data=record, message="IP geolocated successfully")
