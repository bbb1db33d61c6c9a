"""Server infrastructure settings."""

import ipaddress
from typing import Tuple, Union

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        HOST: Interface to bind (default: 0.0.0.0)
        PORT: Port to listen on (default: 8080)
        VPN_SUBNETS: Comma-separated CIDR list of VPN overlay networks whose
            clients are reported with the server's public address
            (default: 10.7.0.0/24)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        networks = settings.server.vpn_networks
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8080, alias="PORT")
    VPN_SUBNETS: str = Field(default="10.7.0.0/24", alias="VPN_SUBNETS")

    @field_validator("VPN_SUBNETS")
    @classmethod
    def validate_vpn_subnets(cls, v: str) -> str:
        """Reject entries that are not valid CIDR networks."""
        for entry in _split(v):
            try:
                ipaddress.ip_network(entry, strict=False)
            except ValueError:
                raise ValueError(f"Invalid VPN subnet: {entry}")
        return v

    @property
    def vpn_networks(self) -> Tuple[IPNetwork, ...]:
        """Parsed VPN_SUBNETS."""
        return tuple(
            ipaddress.ip_network(entry, strict=False)
            for entry in _split(self.VPN_SUBNETS)
        )


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]
