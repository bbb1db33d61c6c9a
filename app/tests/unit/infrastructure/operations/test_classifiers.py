"""Unit tests for classify_request_error."""

from unittest.mock import Mock

import pytest
import requests

from infrastructure.operations import OperationStatus, classify_request_error

pytestmark = pytest.mark.unit


def _http_error(status_code, headers=None):
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    return requests.HTTPError(f"{status_code} error", response=response)


def test_timeout_is_transient():
    result = classify_request_error(requests.Timeout("read timed out"))
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "TIMEOUT"


def test_connect_timeout_is_classified_as_timeout():
    result = classify_request_error(requests.ConnectTimeout("connect timed out"))
    assert result.error_code == "TIMEOUT"


def test_connection_error_is_transient():
    result = classify_request_error(requests.ConnectionError("refused"))
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "CONNECTION_ERROR"


def test_rate_limited_uses_retry_after_header():
    result = classify_request_error(_http_error(429, {"Retry-After": "42"}))
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "RATE_LIMITED"
    assert result.retry_after == 42


def test_rate_limited_defaults_retry_after_when_header_malformed():
    result = classify_request_error(_http_error(429, {"Retry-After": "soon"}))
    assert result.retry_after == 60


def test_server_error_is_transient():
    result = classify_request_error(_http_error(503))
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "SERVER_ERROR"


def test_client_error_is_permanent():
    result = classify_request_error(_http_error(403))
    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "HTTP_ERROR"


def test_unknown_exception_is_transient():
    result = classify_request_error(RuntimeError("boom"))
    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "REQUEST_ERROR"
    assert "RuntimeError" in result.message
