"""Shared fixtures: settings sections, a recording cache and provider doubles."""

from typing import Optional
from unittest.mock import Mock

import pytest

from infrastructure.cache import GeoCache
from infrastructure.clients.ip_api import GeoRecord
from infrastructure.configuration import GeolocationSettings, RedisSettings
from infrastructure.operations import OperationResult


class RecordingGeoCache(GeoCache):
    """Dict-backed cache that remembers the TTL of every write."""

    backend = "memory"

    def __init__(self, entries: Optional[dict] = None):
        self.entries = dict(entries or {})
        self.ttls: dict[str, int] = {}

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.entries[key] = value
        self.ttls[key] = ttl_seconds


@pytest.fixture
def geolocation_settings():
    return GeolocationSettings(
        GEOLOCATION_API_URL="http://geo.test/json/",
        PUBLIC_IP_URL="http://whoami.test",
        HTTP_TIMEOUT_SECONDS=2.0,
    )


@pytest.fixture
def redis_settings():
    return RedisSettings(REDIS_HOST="redis.test", REDIS_PORT=6380, REDIS_DB=2)


@pytest.fixture
def recording_cache():
    return RecordingGeoCache()


@pytest.fixture
def make_cache():
    """Factory for a RecordingGeoCache pre-populated with entries."""
    return RecordingGeoCache


@pytest.fixture
def geo_client():
    """Provider client double answering Testland for every address."""
    client = Mock()
    client.lookup.return_value = OperationResult.success(
        data=GeoRecord(country="Testland", country_code="TT")
    )
    return client


@pytest.fixture
def http_response():
    """Factory for requests.Response doubles."""

    def _make(json_data=None, text="", status_code=200, json_error=None):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.raise_for_status.return_value = None
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make
