"""FastAPI routes for the IP lookup package."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from infrastructure.logging import get_module_logger
from packages.ip_lookup.classifier import should_use_server_ip
from packages.ip_lookup.dependencies import LookupContextDep
from packages.ip_lookup.extractor import connection_address, extract_client_ip
from packages.ip_lookup.schemas import IpInfoResponse

logger = get_module_logger()
router = APIRouter(tags=["ip"])

IP_UNDETERMINED_MESSAGE = "Could not determine client IP"


@router.get(
    "/ip",
    response_model=IpInfoResponse,
    summary="Client IP and country",
    description="Report the caller's public IP and the country it belongs to",
)
@router.get("/", response_model=IpInfoResponse, include_in_schema=False)
def get_ip(request: Request, response: Response, context: LookupContextDep):
    """Report the caller's IP address and country.

    Returns:
        IpInfoResponse; country fields are empty when geolocation fails.
        A plain-text 500 when no client address can be determined.
    """
    client_ip = extract_client_ip(request.headers, connection_address(request))
    if client_ip is None:
        logger.error(
            "client_ip_undetermined",
            client=str(request.client),
            x_forwarded_for=request.headers.get("x-forwarded-for"),
            x_real_ip=request.headers.get("x-real-ip"),
        )
        return PlainTextResponse(IP_UNDETERMINED_MESSAGE, status_code=500)

    display_ip = client_ip
    if should_use_server_ip(client_ip, context.vpn_networks):
        display_ip = context.server_public_ip

    log = logger.bind(client_ip=client_ip, display_ip=display_ip)

    country, country_code = "", ""
    if display_ip:
        result = context.resolver.resolve(display_ip)
        if result.is_success:
            country, country_code = result.data.country, result.data.country_code
        else:
            log.warning("country_unavailable", error=result.message)
    else:
        log.warning("country_unavailable", error="server public IP unknown")

    log.info("ip_lookup_served", country_code=country_code)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return IpInfoResponse(ip=display_ip, country=country, country_code=country_code)
