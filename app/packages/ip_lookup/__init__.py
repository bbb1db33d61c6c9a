"""IP lookup package - client address and country via ip-api.com."""

from packages.ip_lookup.routes import router as ip_lookup_router
from packages.ip_lookup.context import LookupContext
from packages.ip_lookup.service import GeolocationResolver

__all__ = [
    "ip_lookup_router",
    "LookupContext",
    "GeolocationResolver",
]
