"""Result value returned by clients and services instead of raising."""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a lookup.

    ``data`` holds the payload on success. ``error_code`` is a short machine
    code such as ``TIMEOUT`` or ``PROVIDER_ERROR``. ``retry_after`` is only set
    when the remote side asked us to back off.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(OperationStatus.SUCCESS, message, data=data)

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Failure that may clear on its own, e.g. a timeout or HTTP 429."""
        return cls(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code=error_code,
            retry_after=retry_after,
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that will repeat for the same input, e.g. ``status: fail``."""
        return cls(OperationStatus.PERMANENT_ERROR, message, error_code=error_code)
