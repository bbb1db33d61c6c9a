"""Error classifiers for outbound HTTP exceptions.

Converts ``requests`` exceptions and unexpected HTTP status codes into
standardized OperationResult objects so clients never leak transport
exceptions to the service layer.

Usage:
    from infrastructure.operations.classifiers import classify_request_error

    try:
        response = requests.get(url, timeout=3)
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_request_error(exc)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult


def _status_code(exc: requests.RequestException) -> Optional[int]:
    response = getattr(exc, "response", None)
    if response is None:
        return None
    return response.status_code


def classify_request_error(exc: Exception) -> OperationResult:
    """Classify ``requests`` errors into OperationResult.

    Mapping:
    - Timeout: TRANSIENT_ERROR (``TIMEOUT``)
    - ConnectionError: TRANSIENT_ERROR (``CONNECTION_ERROR``)
    - HTTP 429: TRANSIENT_ERROR with retry_after (``RATE_LIMITED``)
    - HTTP 5xx: TRANSIENT_ERROR (``SERVER_ERROR``)
    - HTTP 4xx: PERMANENT_ERROR (``HTTP_ERROR``)
    - Anything else: TRANSIENT_ERROR (``REQUEST_ERROR``)

    Args:
        exc: Exception raised while performing an outbound request

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}", error_code="TIMEOUT"
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}", error_code="CONNECTION_ERROR"
        )

    status_code = (
        _status_code(exc) if isinstance(exc, requests.RequestException) else None
    )

    if status_code == 429:
        retry_after = 60
        header_value = exc.response.headers.get("Retry-After")
        if header_value:
            try:
                retry_after = int(header_value)
            except (ValueError, TypeError):
                pass
        return OperationResult.transient_error(
            "Provider rate limited", error_code="RATE_LIMITED", retry_after=retry_after
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Provider server error ({status_code})", error_code="SERVER_ERROR"
        )

    if status_code and 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"Provider client error ({status_code})", error_code="HTTP_ERROR"
        )

    return OperationResult.transient_error(
        f"Request error: {type(exc).__name__}: {exc}", error_code="REQUEST_ERROR"
    )
