"""Request-scoped values carried by every log line of a request."""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind ``correlation_id`` (generated when missing), path, method and any
    extra keys to structlog's context variables for the duration of the block.

    Yields the correlation id in effect, so callers can echo it back.

        with bind_request_context(request_path="/ip") as correlation_id:
            logger.info("processing_request")
    """
    bound = {"correlation_id": correlation_id or str(uuid.uuid4())}
    optional = {"request_path": request_path, "request_method": request_method}
    bound.update({key: value for key, value in optional.items() if value is not None})
    bound.update(extra_context)

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield bound["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*bound)
