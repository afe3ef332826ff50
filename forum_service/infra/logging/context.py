"""Context management for structured logging.

Request-scoped values (request id, viewer id) are stored in a ContextVar so
every log record emitted while serving a listing carries them, across await
points, without threading them through function signatures.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add key-value pairs to the logging context of the current task.

    Example:
        ```python
        set_log_context(request_id="abc-123")
        logger.info("Listing posts")  # record carries request_id
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all logging context for the current task."""
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the context into every LogRecord.

    Installed on the root logger by ``configure_logging`` so formatters
    (especially JSONFormatter) see ``request_id`` and friends as record
    attributes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject context into log record.

        Args:
            record: The log record to enhance with context.

        Returns:
            True (always allow the record to be logged).
        """
        for key, value in _log_context.get().items():
            # Explicit extra= values win over ambient context
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
