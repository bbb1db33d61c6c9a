"""Unit tests for create_geo_cache."""

from unittest.mock import MagicMock, patch

import pytest
import redis

from infrastructure.cache import DisabledGeoCache, RedisGeoCache, create_geo_cache
from infrastructure.configuration import RedisSettings

pytestmark = pytest.mark.unit


@patch("infrastructure.cache.factory.redis.Redis")
def test_reachable_redis_selects_redis_cache(mock_redis_class, redis_settings):
    client = MagicMock()
    mock_redis_class.return_value = client

    cache = create_geo_cache(redis_settings)

    assert isinstance(cache, RedisGeoCache)
    client.ping.assert_called_once()
    kwargs = mock_redis_class.call_args.kwargs
    assert kwargs["host"] == "redis.test"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 2
    assert kwargs["password"] is None
    assert kwargs["decode_responses"] is True


@patch("infrastructure.cache.factory.redis.Redis")
def test_failed_ping_selects_disabled_cache(mock_redis_class, redis_settings):
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("Connection refused")
    mock_redis_class.return_value = client

    cache = create_geo_cache(redis_settings)

    assert isinstance(cache, DisabledGeoCache)
    client.close.assert_called_once()


@patch("infrastructure.cache.factory.redis.Redis")
def test_disabled_by_config_never_connects(mock_redis_class):
    cache = create_geo_cache(RedisSettings(REDIS_ENABLED=False))

    assert isinstance(cache, DisabledGeoCache)
    mock_redis_class.assert_not_called()


@patch("infrastructure.cache.factory.redis.Redis")
def test_password_is_passed_when_configured(mock_redis_class):
    create_geo_cache(RedisSettings(REDIS_PASSWORD="hunter2"))

    assert mock_redis_class.call_args.kwargs["password"] == "hunter2"


@patch("infrastructure.cache.factory.redis.Redis")
def test_ping_is_one_shot(mock_redis_class, redis_settings):
    """A later Redis failure does not trigger reconnect attempts."""
    client = MagicMock()
    mock_redis_class.return_value = client

    cache = create_geo_cache(redis_settings)
    client.get.side_effect = redis.ConnectionError("gone")

    assert cache.get("ip:203.0.113.5") is None
    assert client.ping.call_count == 1
    assert mock_redis_class.call_count == 1
