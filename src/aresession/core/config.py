r"""Configuration dataclass and defaults for the request executor.

This module provides configuration constants and a dataclass-based
configuration object shared by ``RequestExecutor`` and
``SessionClient``.
"""

from __future__ import annotations

__all__ = [
    "AUTH_STATUS_CODES",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "VENDOR_TIMEOUT_MARKERS",
    "ExecutorConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aresession.core.validation import validate_executor_params

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aresession.backoff import BaseBackoffStrategy
    from aresession.callbacks import (
        FailureInfo,
        ReauthInfo,
        RequestInfo,
        ResponseInfo,
        RetryInfo,
    )


# Default timeout in seconds for the httpx client created by SessionClient
DEFAULT_TIMEOUT = 10.0

# Default maximum number of retries after the first attempt
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 5

# 401: Unauthorized - the session expired, log in again and replay once
AUTH_STATUS_CODES = (401,)

# The backend answers with a "302 Found" page when its session timed out
VENDOR_TIMEOUT_MARKERS = ("<title>302 Found</title>",)


@dataclass
class ExecutorConfig:
    """Configuration for the request executor.

    Args:
        max_retries: Maximum number of retries after a transient transport
            failure. Must be >= 0.
        base_url: Optional base URL that relative request URLs are
            resolved against.
        auth_status_codes: HTTP status codes that trigger a re-login
            followed by a single replay of the request.
        vendor_timeout_markers: Substrings of a response body that signal
            a backend session timeout. Such responses fail immediately.
            Only the body is inspected: a real HTTP 302 redirecting to a
            login page with a different body is returned as a normal
            response unless ``is_vendor_timeout`` flags it.
        is_vendor_timeout: Optional extra predicate that flags a response
            as a vendor timeout signal, e.g.
            ``lambda r: r.headers.get("Location", "").endswith("/login")``.
        backoff_strategy: Optional delay strategy applied before each
            retry. If ``None``, retries are issued immediately.
        on_request: Optional callback called before each attempt.
        on_retry: Optional callback called before each retry.
        on_reauthenticate: Optional callback called after a successful
            re-login, before the replay.
        on_success: Optional callback called when a response is returned.
        on_failure: Optional callback called when the request fails.

    Example:
        ```pycon
        >>> from aresession.core.config import ExecutorConfig
        >>> config = ExecutorConfig()
        >>> config.max_retries
        5
        >>> merged = config.merge(max_retries=2)
        >>> merged.max_retries
        2
        >>> config.max_retries
        5

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_url: str | None = None
    auth_status_codes: tuple[int, ...] = field(default_factory=lambda: AUTH_STATUS_CODES)
    vendor_timeout_markers: tuple[str, ...] = field(
        default_factory=lambda: VENDOR_TIMEOUT_MARKERS
    )
    is_vendor_timeout: Callable[[httpx.Response], bool] | None = None
    backoff_strategy: BaseBackoffStrategy | None = None
    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_reauthenticate: Callable[[ReauthInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_executor_params(
            max_retries=self.max_retries,
            auth_status_codes=self.auth_status_codes,
            vendor_timeout_markers=self.vendor_timeout_markers,
        )

    def merge(self, **overrides: Any) -> ExecutorConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so ``merge`` cannot
        reset an optional field such as ``base_url`` or
        ``backoff_strategy`` to ``None``. Use ``dataclasses.replace`` for
        that.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ExecutorConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the executor configuration parameters.

        Example:
            ```pycon
            >>> from aresession.core.config import ExecutorConfig
            >>> ExecutorConfig(max_retries=3).to_dict()["max_retries"]
            3

            ```
        """
        return {
            "max_retries": self.max_retries,
            "base_url": self.base_url,
            "auth_status_codes": self.auth_status_codes,
            "vendor_timeout_markers": self.vendor_timeout_markers,
            "is_vendor_timeout": self.is_vendor_timeout,
            "backoff_strategy": self.backoff_strategy,
            "on_request": self.on_request,
            "on_retry": self.on_retry,
            "on_reauthenticate": self.on_reauthenticate,
            "on_success": self.on_success,
            "on_failure": self.on_failure,
        }
