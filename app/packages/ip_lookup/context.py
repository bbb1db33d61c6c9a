"""Process-wide values the lookup route depends on."""

from dataclasses import dataclass

from packages.ip_lookup.classifier import DEFAULT_VPN_NETWORKS, IPNetwork
from packages.ip_lookup.service import GeolocationResolver


@dataclass(frozen=True)
class LookupContext:
    """Values fixed at startup and only read while serving.

    Attributes:
        resolver: Geolocation resolver (owns the cache adapter)
        server_public_ip: The server's public address, "" if discovery failed
        vpn_networks: VPN overlay networks treated as internal
    """

    resolver: GeolocationResolver
    server_public_ip: str = ""
    vpn_networks: tuple[IPNetwork, ...] = DEFAULT_VPN_NETWORKS
