r"""Transports that perform a single physical HTTP call.

The executor only depends on the ``Transport`` protocol. ``HttpxTransport``
is the default implementation on top of ``httpx.Client``; tests and
callers with special needs can pass any object with a compatible
``perform`` method.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport"]

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from aresession.core.config import DEFAULT_TIMEOUT
from aresession.core.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    r"""Perform one HTTP call.

    Implementations return the response whatever its status code. They
    raise ``aresession.exceptions.TransportTimeout`` or an
    ``httpx.RequestError`` when no response could be obtained.
    """

    def perform(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | str | None,
    ) -> httpx.Response: ...


class HttpxTransport:
    r"""Transport backed by an ``httpx.Client``.

    A client passed by the caller is never closed here: its lifecycle
    stays with the caller. A client created by the transport itself is
    closed by ``close`` or when leaving the ``with`` block.

    The session cookies set by the login request live in the client's
    cookie jar, so every call made through the same transport carries
    the current session.

    Args:
        client: Optional httpx.Client instance. If ``None``, a new client
            is created, and closed by ``close``.
        timeout: The timeout of the client created when ``client`` is
            ``None``. Ignored otherwise.

    Raises:
        ValueError: If ``timeout`` is not positive.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresession.transport import HttpxTransport
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        >>> with HttpxTransport(client=httpx.Client(transport=mock)) as transport:
        ...     transport.perform("GET", "https://example.com", {}, None).text
        ...
        'ok'

        ```
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def perform(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | str | None,
    ) -> httpx.Response:
        """Send the request and return the response, read in full.

        Args:
            method: The HTTP method.
            url: The absolute URL.
            headers: The request headers.
            body: The request body, if any.

        Returns:
            The HTTP response, whatever its status code.

        Raises:
            httpx.RequestError: If no response could be obtained.
        """
        logger.debug(f"{method} {url}")
        return self._client.request(method, url, headers=dict(headers), content=body)
