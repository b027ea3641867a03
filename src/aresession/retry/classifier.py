r"""Classification of attempt results.

This module provides the AttemptClassifier class that maps what the
transport returned or raised to an explicit ``AttemptOutcome``.
"""

from __future__ import annotations

__all__ = ["TRANSIENT_EXCEPTIONS", "AttemptClassifier"]

import logging
from typing import TYPE_CHECKING

import httpx

from aresession.core.config import AUTH_STATUS_CODES, VENDOR_TIMEOUT_MARKERS
from aresession.exceptions import TransportTimeout
from aresession.retry.outcome import (
    AuthFailure,
    FatalTransportFailure,
    Success,
    TransientFailure,
    VendorTimeout,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aresession.request import Request
    from aresession.retry.outcome import AttemptOutcome
    from aresession.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)

# Timeouts, connection failures and connections dropped mid-response
TRANSIENT_EXCEPTIONS: tuple[type[Exception], ...] = (
    TransportTimeout,
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


class AttemptClassifier:
    """Classifies transport results into attempt outcomes.

    Responses are checked in this order: authentication statuses first,
    then the vendor timeout signal. Every other response is a success,
    whatever its status code.

    Args:
        auth_status_codes: HTTP status codes that mean the session must
            be re-established.
        vendor_timeout_markers: Body substrings that mean the backend
            timed the session out.
        is_vendor_timeout: Optional extra predicate that flags a
            response as a vendor timeout.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresession.retry.classifier import AttemptClassifier
        >>> classifier = AttemptClassifier()
        >>> classifier.classify_response(httpx.Response(401))
        AuthFailure(response=<Response [401 Unauthorized]>)
        >>> classifier.classify_response(httpx.Response(200, text="<title>302 Found</title>"))
        VendorTimeout(response=<Response [200 OK]>)
        >>> classifier.classify_response(httpx.Response(404))
        Success(response=<Response [404 Not Found]>)

        ```
    """

    def __init__(
        self,
        auth_status_codes: tuple[int, ...] = AUTH_STATUS_CODES,
        vendor_timeout_markers: tuple[str, ...] = VENDOR_TIMEOUT_MARKERS,
        is_vendor_timeout: Callable[[httpx.Response], bool] | None = None,
    ) -> None:
        self.auth_status_codes = auth_status_codes
        self.vendor_timeout_markers = vendor_timeout_markers
        self.is_vendor_timeout = is_vendor_timeout

    def attempt(self, transport: Transport, request: Request, url: str) -> AttemptOutcome:
        """Issue the request once and classify the result.

        Args:
            transport: The transport to perform the call with.
            request: The request to issue.
            url: The resolved absolute URL of the request.

        Returns:
            The outcome of the attempt.
        """
        try:
            response = transport.perform(request.method, url, request.headers, request.body)
        except (*TRANSIENT_EXCEPTIONS, httpx.RequestError) as exc:
            return self.classify_exception(exc)
        return self.classify_response(response)

    def classify_response(self, response: httpx.Response) -> AttemptOutcome:
        """Classify an HTTP response.

        Args:
            response: The response returned by the transport.

        Returns:
            ``AuthFailure``, ``VendorTimeout`` or ``Success``.
        """
        if response.status_code in self.auth_status_codes:
            return AuthFailure(response)
        if self._is_vendor_timeout(response):
            return VendorTimeout(response)
        return Success(response)

    def classify_exception(self, exc: Exception) -> AttemptOutcome:
        """Classify an exception raised by the transport.

        Args:
            exc: The exception raised by the transport.

        Returns:
            ``TransientFailure`` for timeouts and connection failures,
            ``FatalTransportFailure`` for any other transport error.
        """
        if isinstance(exc, TRANSIENT_EXCEPTIONS):
            return TransientFailure(exc)
        return FatalTransportFailure(exc)

    def _is_vendor_timeout(self, response: httpx.Response) -> bool:
        if self.is_vendor_timeout is not None and self.is_vendor_timeout(response):
            return True
        if not self.vendor_timeout_markers:
            return False
        try:
            body = response.text
        except httpx.ResponseNotRead:
            # Streamed responses are not inspected
            logger.debug("Skipping vendor timeout check on a streamed response")
            return False
        return any(marker in body for marker in self.vendor_timeout_markers)
