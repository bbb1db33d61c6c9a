"""Structlog processors added to the chain in ``setup.py``."""

from typing import Any

# Substrings of keys whose values are masked, matched case-insensitively
SENSITIVE_PATTERNS = frozenset(
    {"password", "secret", "token", "api_key", "authorization", "cookie"}
)


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in SENSITIVE_PATTERNS)


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Processor stamping ``app_name`` and ``app_version`` (the git SHA)."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(app_name=app_name, app_version=app_version)
        return event_dict

    return processor


def mask_sensitive_data(mask_value: str = "***REDACTED***"):
    """Processor replacing non-None values of sensitive keys.

    ``REDIS_PASSWORD`` is masked as well as ``password``.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if value is not None and _is_sensitive(key):
                event_dict[key] = mask_value
        return event_dict

    return processor
