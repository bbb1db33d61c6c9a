"""HTTP tests for GET /ip and GET / through the assembled application."""

import ipaddress
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from infrastructure.operations import OperationResult
from packages.ip_lookup import GeolocationResolver, LookupContext
from server.server import create_app

pytestmark = pytest.mark.integration

SERVER_PUBLIC_IP = "203.0.113.9"


def with_peer(app, peer):
    """Wrap an ASGI app so every HTTP request arrives from the given peer."""

    async def asgi(scope, receive, send):
        if scope["type"] == "http":
            scope = dict(scope, client=peer)
        await app(scope, receive, send)

    return asgi


@pytest.fixture
def resolver(geo_client, recording_cache):
    return GeolocationResolver(client=geo_client, cache=recording_cache)


@pytest.fixture
def make_client(resolver):
    def _make(peer=("198.51.100.7", 54321), server_public_ip=SERVER_PUBLIC_IP):
        context = LookupContext(
            resolver=resolver,
            server_public_ip=server_public_ip,
        )
        app = create_app(lookup_context=context)
        return TestClient(with_peer(app, peer) if peer else app)

    return _make


def test_public_client_gets_own_ip_and_country(make_client, geo_client):
    response = make_client().get("/ip")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json() == {
        "ip": "198.51.100.7",
        "country": "Testland",
        "countryCode": "TT",
    }
    geo_client.lookup.assert_called_once_with("198.51.100.7")


def test_root_path_behaves_like_ip(make_client):
    response = make_client().get("/")

    assert response.status_code == 200
    assert response.json()["ip"] == "198.51.100.7"
    assert response.headers["access-control-allow-origin"] == "*"


def test_private_client_is_reported_with_server_address(make_client, geo_client):
    response = make_client(peer=("192.168.1.50", 1234)).get("/ip")

    assert response.status_code == 200
    assert response.json()["ip"] == SERVER_PUBLIC_IP
    geo_client.lookup.assert_called_once_with(SERVER_PUBLIC_IP)


def test_vpn_client_behind_proxy_is_substituted(make_client):
    response = make_client().get("/ip", headers={"X-Forwarded-For": "10.7.0.23"})

    assert response.json()["ip"] == SERVER_PUBLIC_IP


def test_forwarded_for_takes_priority(make_client):
    response = make_client(peer=("10.0.0.2", 443)).get(
        "/ip", headers={"X-Forwarded-For": "203.0.113.5, 10.0.0.1"}
    )

    assert response.json()["ip"] == "203.0.113.5"


def test_unknown_server_address_yields_empty_ip(make_client, geo_client):
    response = make_client(
        peer=("127.0.0.1", 5000), server_public_ip=""
    ).get("/ip")

    assert response.status_code == 200
    assert response.json() == {"ip": "", "country": "", "countryCode": ""}
    geo_client.lookup.assert_not_called()


def test_provider_failure_still_returns_200(make_client, geo_client):
    geo_client.lookup.return_value = OperationResult.permanent_error(
        "ip-api error: invalid query", error_code="PROVIDER_ERROR"
    )

    response = make_client().get("/ip")

    assert response.status_code == 200
    assert response.json() == {"ip": "198.51.100.7", "country": "", "countryCode": ""}


def test_resolver_is_served_from_cache_on_repeat(make_client, geo_client):
    client = make_client()

    client.get("/ip")
    client.get("/ip")

    assert geo_client.lookup.call_count == 1


def test_undeterminable_client_returns_500_plain_text(make_client):
    # TestClient's default peer is ("testclient", 50000), which is no IP literal
    response = make_client(peer=None).get("/ip")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert "IP" in response.text


def test_unknown_path_returns_404(make_client):
    response = make_client().get("/unknown-path")

    assert response.status_code == 404


def test_trailing_slash_is_not_redirected(make_client):
    response = make_client().get("/ip/", follow_redirects=False)

    assert response.status_code == 404


def test_correlation_id_is_echoed(make_client):
    response = make_client().get("/ip", headers={"X-Correlation-ID": "req-789"})

    assert response.headers["x-correlation-id"] == "req-789"


def test_correlation_id_is_generated(make_client):
    response = make_client().get("/ip")

    assert response.headers["x-correlation-id"]


def test_custom_vpn_networks_are_honoured(resolver):
    context = LookupContext(
        resolver=resolver,
        server_public_ip=SERVER_PUBLIC_IP,
        vpn_networks=(ipaddress.ip_network("100.96.0.0/24"),),
    )
    client = TestClient(with_peer(create_app(context), ("100.96.0.4", 51820)))

    assert client.get("/ip").json()["ip"] == SERVER_PUBLIC_IP


def test_cached_record_is_returned_without_provider_call(make_cache):
    provider = Mock()
    cache = make_cache({"ip:203.0.113.5": '{"country":"Testland","code":"TT"}'})
    context = LookupContext(
        resolver=GeolocationResolver(client=provider, cache=cache),
        server_public_ip=SERVER_PUBLIC_IP,
    )
    client = TestClient(with_peer(create_app(context), ("203.0.113.5", 40000)))

    response = client.get("/ip")

    assert response.json() == {
        "ip": "203.0.113.5",
        "country": "Testland",
        "countryCode": "TT",
    }
    provider.lookup.assert_not_called()
