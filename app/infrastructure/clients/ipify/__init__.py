"""Public address discovery client."""

from infrastructure.clients.ipify.client import PublicIpClient

__all__ = ["PublicIpClient"]
