r"""Exceptions raised while executing session-aware HTTP requests.

Every terminal failure of a logical request is reported as a subclass of
``RequestExecutorError``, so callers can distinguish "the network broke"
(``TimeoutExceeded``, ``TransportError``) from "the backend told us the
session timed out" (``VendorTimeoutSignal``) and "we could not log in
again" (``AuthenticationFailed``).
"""

from __future__ import annotations

__all__ = [
    "AuthenticationFailed",
    "RequestExecutorError",
    "TimeoutExceeded",
    "TransportError",
    "TransportTimeout",
    "VendorTimeoutSignal",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RequestExecutorError(RuntimeError):
    r"""Base class of the errors that terminate a logical request.

    Args:
        message: A descriptive error message.
        method: The HTTP method of the failed request, if known.
        url: The URL of the failed request, if known.
        status_code: The HTTP status code of the last response, if any.
        response: The last HTTP response, if any.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from aresession.exceptions import RequestExecutorError
        >>> error = RequestExecutorError(
        ...     "GET request to https://example.com failed",
        ...     method="GET",
        ...     url="https://example.com",
        ... )
        >>> error.method
        'GET'
        >>> error.status_code is None
        True

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response = response
        self.cause = cause


class TimeoutExceeded(RequestExecutorError):
    r"""Raised when transient transport failures exhausted the retry budget.

    ``cause`` holds the transport exception of the last attempt.
    """


class TransportError(RequestExecutorError):
    r"""Raised when the transport failed in a way retrying cannot fix."""


class VendorTimeoutSignal(RequestExecutorError):
    r"""Raised when the backend answered with its session-timeout marker.

    The backend signals this condition with a redirect-to-login page
    (``302 Found``) rather than a network failure. It is never retried.
    """


class AuthenticationFailed(RequestExecutorError):
    r"""Raised when a session could not be (re-)established.

    Session managers raise it from ``login`` when the credentials are
    rejected. The executor raises it when a 401 response arrives and no
    session manager is available.

    Example:
        ```pycon
        >>> from aresession.exceptions import AuthenticationFailed
        >>> raise AuthenticationFailed("invalid username or password")
        Traceback (most recent call last):
            ...
        aresession.exceptions.AuthenticationFailed: invalid username or password

        ```
    """


class TransportTimeout(Exception):
    r"""Raised by a transport when a single attempt timed out.

    Custom transports raise it to report a transient failure that the
    executor is allowed to retry. It never reaches callers of the
    executor directly: once the retry budget is exhausted it is wrapped
    in ``TimeoutExceeded``.
    """
