from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.cache import create_geo_cache
from infrastructure.clients.ip_api import IpApiClient
from infrastructure.clients.ipify import PublicIpClient
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings
from packages.ip_lookup import GeolocationResolver, LookupContext

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _discover_public_ip(settings: "Settings", logger: BoundLogger) -> str:
    result = PublicIpClient(settings.geolocation).discover()
    if not result.is_success:
        logger.warning(
            "public_ip_discovery_failed",
            error_code=result.error_code,
            error=result.message,
        )
        return ""
    logger.info("public_ip_discovered", server_public_ip=result.data)
    return result.data


def build_lookup_context(settings: "Settings", logger: BoundLogger) -> LookupContext:
    """Resolve the process-wide values once, before serving begins."""
    cache = create_geo_cache(settings.redis)
    resolver = GeolocationResolver(
        client=IpApiClient(settings.geolocation),
        cache=cache,
        ttl_seconds=settings.geolocation.GEO_CACHE_TTL_SECONDS,
    )
    return LookupContext(
        resolver=resolver,
        server_public_ip=_discover_public_ip(settings, logger),
        vpn_networks=settings.server.vpn_networks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)

    app.state.settings = settings
    logger.info("application_startup")
    _list_configs(settings, logger)

    # a context injected by create_app (tests, embedding) wins over discovery
    if getattr(app.state, "lookup_context", None) is None:
        app.state.lookup_context = build_lookup_context(settings, logger)

    logger.info(
        "lookup_context_ready",
        cache_backend=app.state.lookup_context.resolver.cache.backend,
        server_public_ip=app.state.lookup_context.server_public_ip,
    )

    yield

    logger.info("application_shutdown")
