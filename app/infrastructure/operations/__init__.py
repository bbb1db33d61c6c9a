"""Operation result types and status enums.

Standardized result types returned by clients and services, plus the
classifier that turns outbound HTTP exceptions into results.
"""

from infrastructure.operations.classifiers import classify_request_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_request_error",
]
