"""Client address extraction for reverse-proxy deployments.

Proxy headers are trusted first, then the transport-level peer address:

1. ``X-Forwarded-For`` -- leftmost entry
2. ``X-Real-IP``
3. the connection address (``host:port``, ``[v6]:port`` or a bare literal)

Every candidate must parse as an IP literal; invalid candidates fall through
to the next source.
"""

import ipaddress
from typing import Mapping, Optional, Tuple

from fastapi import Request

FORWARDED_FOR_HEADER = "x-forwarded-for"
REAL_IP_HEADER = "x-real-ip"


def is_ip_literal(value: str) -> bool:
    """True for a plain IPv4 or IPv6 literal; zone-scoped IPv6 (``fe80::1%eth0``) is rejected."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    return getattr(address, "scope_id", None) is None


def split_host_port(address: str) -> Optional[Tuple[str, str]]:
    """Split ``host:port`` or ``[host]:port``.

    Returns:
        (host, port), or None when the address has no port or is malformed.
    """
    if address.startswith("["):
        end = address.find("]")
        if end == -1 or address[end + 1 : end + 2] != ":":
            return None
        host, port = address[1:end], address[end + 2 :]
    else:
        host, sep, port = address.rpartition(":")
        # more than one colon without brackets is a bare IPv6 literal
        if not sep or ":" in host:
            return None
    if not port or "[" in host or "]" in host:
        return None
    return host, port


def extract_client_ip(
    headers: Mapping[str, str], remote_addr: Optional[str]
) -> Optional[str]:
    """Derive the client address from forwarding headers and the peer address.

    Args:
        headers: Request headers (case-insensitive mapping, as Starlette's).
        remote_addr: Connection address as ``host:port``, or None if unknown.

    Returns:
        A valid IP literal, or None when no source yields one.
    """
    forwarded = headers.get(FORWARDED_FOR_HEADER)
    if forwarded:
        candidate = forwarded.split(",")[0].strip()
        if is_ip_literal(candidate):
            return candidate

    real_ip = headers.get(REAL_IP_HEADER)
    if real_ip:
        candidate = real_ip.strip()
        if is_ip_literal(candidate):
            return candidate

    if not remote_addr:
        return None

    parts = split_host_port(remote_addr)
    if parts is not None and is_ip_literal(parts[0]):
        return parts[0]

    if is_ip_literal(remote_addr):
        return remote_addr

    return None


def connection_address(request: Request) -> Optional[str]:
    """Render the request's peer as ``host:port`` (``[host]:port`` for IPv6)."""
    client = request.client
    if client is None or not client.host:
        return None
    host = f"[{client.host}]" if ":" in client.host else client.host
    if client.port is None:
        return client.host
    return f"{host}:{client.port}"
