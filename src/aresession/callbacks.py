r"""Callback types and data structures for observability.

The request executor exposes five lifecycle hooks:

- on_request: Called before each attempt (including the replay after a
  reauthentication)
- on_retry: Called before a transient failure is retried (after the
  backoff delay, if any)
- on_reauthenticate: Called after a successful re-login, right before the
  original request is replayed
- on_success: Called when the logical request returns a response
- on_failure: Called once when the logical request ends with an error

Example:
    ```pycon
    >>> from aresession.callbacks import RetryInfo
    >>> from aresession.core import ExecutorConfig
    >>> def log_retry(retry_info: RetryInfo):
    ...     print(f"Retry {retry_info.attempt}/{retry_info.max_retries + 1}")
    ...
    >>> config = ExecutorConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "ReauthInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
    "invoke_on_failure",
    "invoke_on_reauthenticate",
    "invoke_on_request",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The current attempt number (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        replay: Whether this attempt replays the request after a re-login.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    replay: bool = False


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The number of the upcoming attempt (1-indexed). The first
            retry is attempt 2.
        max_retries: Maximum number of retry attempts configured.
        wait_time: The sleep time in seconds before this retry.
        error: The transport exception that triggered the retry.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    error: BaseException


@dataclass
class ReauthInfo:
    """Information passed to on_reauthenticate callback.

    Attributes:
        url: The URL whose response required a new session.
        method: The HTTP method (e.g., "GET", "POST").
        username: The username used for the re-login.
        status_code: The status code that triggered the re-login.
    """

    url: str
    method: str
    username: str
    status_code: int


@dataclass
class ResponseInfo:
    """Information passed to on_success callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The attempt number that produced the response (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        response: The HTTP response returned to the caller.
        total_time: Total time spent on the logical request (seconds).
        replay: Whether the response comes from the replay after a re-login.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    response: httpx.Response
    total_time: float
    replay: bool = False


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The final attempt number (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        error: The error raised to the caller.
        status_code: The final HTTP status code (if any).
        total_time: Total time spent on the logical request (seconds).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    error: Exception
    status_code: int | None
    total_time: float


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    replay: bool = False,
) -> None:
    """Invoke on_request callback if provided.

    Args:
        on_request: Optional callback to invoke before each attempt.
        url: The URL being requested.
        method: The HTTP method.
        attempt: The current attempt number (0-indexed internally). The
            callback receives this as a 1-indexed value (attempt + 1).
        max_retries: Maximum number of retry attempts.
        replay: Whether the attempt is the replay after a re-login.
    """
    if on_request is not None:
        on_request(
            RequestInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                replay=replay,
            )
        )


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    sleep_time: float,
    error: BaseException,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before a retry.
        url: The URL being requested.
        method: The HTTP method.
        attempt: The attempt that just failed (0-indexed). The callback
            receives the number of the upcoming attempt (attempt + 2).
        max_retries: Maximum number of retry attempts.
        sleep_time: The backoff delay applied before the retry.
        error: The transport exception that triggered the retry.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,
                max_retries=max_retries,
                wait_time=sleep_time,
                error=error,
            )
        )


def invoke_on_reauthenticate(
    on_reauthenticate: Callable[[ReauthInfo], None] | None,
    *,
    url: str,
    method: str,
    username: str,
    status_code: int,
) -> None:
    """Invoke on_reauthenticate callback if provided."""
    if on_reauthenticate is not None:
        on_reauthenticate(
            ReauthInfo(url=url, method=method, username=username, status_code=status_code)
        )


def invoke_on_success(
    on_success: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    response: httpx.Response,
    start_time: float,
    replay: bool = False,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke when a response is returned.
        url: The URL that was requested.
        method: The HTTP method.
        attempt: The attempt number that produced the response (0-indexed
            internally, reported 1-indexed).
        max_retries: Maximum number of retry attempts.
        response: The HTTP response object.
        start_time: The timestamp when the logical request started.
        replay: Whether the response comes from the replay.
    """
    if on_success is not None:
        on_success(
            ResponseInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                response=response,
                total_time=time.time() - start_time,
                replay=replay,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    error: Exception,
    status_code: int | None,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided."""
    if on_failure is not None:
        on_failure(
            FailureInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                error=error,
                status_code=status_code,
                total_time=time.time() - start_time,
            )
        )
