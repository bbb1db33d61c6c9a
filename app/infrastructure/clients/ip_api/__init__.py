"""ip-api.com geolocation client.

Public API:
- IpApiClient: Client for country lookups
- GeoRecord: Country name / ISO code pair returned on success
"""

from infrastructure.clients.ip_api.client import GeoRecord, IpApiClient

__all__ = [
    "IpApiClient",
    "GeoRecord",
]
