"""Structured logging for the service.

``configure_logging()`` runs once in the lifespan, ``get_module_logger()``
gives each module its bound logger and ``bind_request_context()`` tags the
log lines of one request.
"""

from infrastructure.logging.context import bind_request_context
from infrastructure.logging.formatters import add_app_info, mask_sensitive_data
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "add_app_info",
    "mask_sensitive_data",
]
