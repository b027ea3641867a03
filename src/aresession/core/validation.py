r"""Parameter validation utilities for the request executor
configuration."""

from __future__ import annotations

__all__ = ["validate_executor_params", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from aresession.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_executor_params(
    max_retries: int,
    auth_status_codes: Sequence[int] = (401,),
    vendor_timeout_markers: Sequence[str] = (),
) -> None:
    """Validate the request executor parameters.

    Args:
        max_retries: Maximum number of retries after the first attempt.
            Must be >= 0. A value of 0 means a single attempt.
        auth_status_codes: HTTP status codes that trigger reauthentication.
            Each must be a valid HTTP status code (100-599).
        vendor_timeout_markers: Body substrings that signal a vendor
            timeout. Empty markers are rejected because they match every
            response.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aresession.core.validation import validate_executor_params
        >>> validate_executor_params(max_retries=5)
        >>> validate_executor_params(max_retries=-1)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    for status_code in auth_status_codes:
        if not 100 <= status_code <= 599:
            msg = f"auth_status_codes must contain HTTP status codes, got {status_code}"
            raise ValueError(msg)
    for marker in vendor_timeout_markers:
        if not marker:
            msg = "vendor_timeout_markers must not contain empty strings"
            raise ValueError(msg)
