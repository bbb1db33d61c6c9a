"""Outcome codes for lookups against the geolocation provider and the discovery service."""

from enum import Enum


class OperationStatus(Enum):
    """How an outbound lookup ended.

    TRANSIENT_ERROR covers network failures, timeouts and rate limits.
    PERMANENT_ERROR covers provider refusals and bad payloads; retrying the
    same input will not help.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
