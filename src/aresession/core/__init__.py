r"""Configuration and validation shared by the executor and the
client."""

from __future__ import annotations

__all__ = [
    "AUTH_STATUS_CODES",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "VENDOR_TIMEOUT_MARKERS",
    "ExecutorConfig",
    "validate_executor_params",
    "validate_timeout",
]

from aresession.core.config import (
    AUTH_STATUS_CODES,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    VENDOR_TIMEOUT_MARKERS,
    ExecutorConfig,
)
from aresession.core.validation import validate_executor_params, validate_timeout
