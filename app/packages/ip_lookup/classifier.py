"""Decides when a client address should be replaced by the server's public address.

Clients on the internal VPN or on a private / loopback / link-local network
only expose a tunnel-internal address; the publicly meaningful address for
them is the server's own.
"""

import ipaddress
from typing import Iterable, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

DEFAULT_VPN_NETWORKS: tuple[IPNetwork, ...] = (ipaddress.ip_network("10.7.0.0/24"),)

# RFC 1918 and RFC 4193 only. ipaddress.is_private also covers reserved and
# documentation ranges, which must stay public here.
PRIVATE_NETWORKS: tuple[IPNetwork, ...] = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)


def _in_any(ip: IPAddress, networks: Iterable[IPNetwork]) -> bool:
    return any(ip.version == net.version and ip in net for net in networks)


def should_use_server_ip(
    client_ip: str, vpn_networks: Iterable[IPNetwork] = DEFAULT_VPN_NETWORKS
) -> bool:
    """Return True when client_ip is private, loopback, link-local or on the VPN.

    Args:
        client_ip: IP literal to classify.
        vpn_networks: VPN overlay networks.

    Returns:
        False for any other address and for input that is not an IP literal.
    """
    try:
        ip = ipaddress.ip_address(client_ip)
    except ValueError:
        return False

    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped

    if _in_any(ip, vpn_networks):
        return True

    return _in_any(ip, PRIVATE_NETWORKS) or ip.is_loopback or ip.is_link_local
