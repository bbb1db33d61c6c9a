"""Infrastructure modules for the IP lookup service.

Centralized infrastructure components:
- configuration: Settings management (Settings and its domain sections)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- cache: Optional geolocation cache (Redis or disabled)
- clients: Outbound HTTP clients (ip-api.com, public IP discovery)
- services: Dependency injection providers (get_settings)
"""

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from infrastructure.services import get_settings

__all__ = [
    "get_module_logger",
    "OperationResult",
    "OperationStatus",
    "get_settings",
]
