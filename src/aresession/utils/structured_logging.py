r"""Structured logging utilities for machine-readable log output.

The executor attaches structured fields (``method``, ``url``,
``attempt``, ``status_code``...) to the records of terminal outcomes.
``StructuredFormatter`` renders such records as one JSON object per line.
It is opt-in:

```python
import logging
from aresession.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())
logger = logging.getLogger("aresession")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)
```

A correlation ID set with ``set_correlation_id`` is added to every
record formatted in the same context (thread or asyncio task), which
ties the records of one logical request together.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes every LogRecord has; anything else was passed through ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the current correlation ID.

    Example:
        ```pycon
        >>> from aresession.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("req-123")
        >>> get_correlation_id()
        'req-123'
        >>> clear_correlation_id()
        >>> get_correlation_id() is None
        True

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Every record becomes a JSON object with the fields ``timestamp``
    (ISO 8601, UTC), ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``correlation_id`` when one is set,
    ``exception`` when the record carries exception info, and every
    field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aresession.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aresession", logging.INFO, "", 1, "done", None, None)
        >>> record.status_code = 200
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["status_code"]
        ('done', 200)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Fields added to the record. They show up in the output
            of ``StructuredFormatter``.
    """
    logger.log(level, message, extra=extra)
