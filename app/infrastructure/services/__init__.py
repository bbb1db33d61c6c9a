"""
Dependency injection services.

Provides application-scoped provider functions.
"""

from infrastructure.services.providers import get_settings

__all__ = [
    "get_settings",
]
