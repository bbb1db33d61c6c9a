"""Public address discovery through a plain-text "what is my IP" service."""

import ipaddress
from typing import TYPE_CHECKING

import requests
import structlog

from infrastructure.operations import OperationResult, classify_request_error

if TYPE_CHECKING:
    from infrastructure.configuration import GeolocationSettings

logger = structlog.get_logger()


class PublicIpClient:
    """Fetches the host's own public address.

    The service (api.ipify.org by default) answers with the address as the
    whole response body.

    Args:
        settings: GeolocationSettings with PUBLIC_IP_URL and HTTP_TIMEOUT_SECONDS
    """

    def __init__(self, settings: "GeolocationSettings") -> None:
        self._url = settings.PUBLIC_IP_URL
        self._timeout = settings.HTTP_TIMEOUT_SECONDS
        self._logger = logger.bind(component="public_ip_client", url=self._url)

    def discover(self) -> OperationResult:
        """Fetch the public address.

        Returns:
            OperationResult with the address string as data, or an error result
            when the service is unreachable or answers with something that is
            not an IP literal
        """
        try:
            response = requests.get(self._url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            result = classify_request_error(e)
            self._logger.warning(
                "public_ip_request_failed",
                error_code=result.error_code,
                error=result.message,
            )
            return result

        body = response.text.strip()
        try:
            ipaddress.ip_address(body)
        except ValueError:
            self._logger.warning("public_ip_invalid_body", body=body[:64])
            return OperationResult.permanent_error(
                message="Public IP service returned an invalid address",
                error_code="INVALID_PUBLIC_IP",
            )

        return OperationResult.success(data=body, message="Public IP discovered")
