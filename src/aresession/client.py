r"""Context manager client for session-aware HTTP requests.

``SessionClient`` bundles an ``HttpxTransport``, a session manager and a
``RequestExecutor`` configured for one backend, and exposes one method
per HTTP verb.
"""

from __future__ import annotations

__all__ = ["SessionClient"]

from typing import TYPE_CHECKING, Any

from aresession.core.config import DEFAULT_TIMEOUT, ExecutorConfig
from aresession.exceptions import AuthenticationFailed
from aresession.request import Request
from aresession.retry.executor import RequestExecutor
from aresession.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    import httpx

    from aresession.session import Credentials, SessionManager


class SessionClient:
    r"""Client for a backend that expires sessions.

    The base URL, the retry maximum and the transport are passed at
    construction: nothing is read from global state, so several clients
    for different backends can coexist.

    Args:
        session: Optional session manager used for ``login`` and to log
            in again when a request comes back unauthorized.
        config: Optional ExecutorConfig instance. If ``None``, a default
            ExecutorConfig is used.
        client: Optional httpx.Client instance. A client passed here is
            not closed by the SessionClient. If ``None``, a new client is
            created and closed when the ``with`` block exits.
        timeout: Timeout of the client created when ``client`` is
            ``None``. Defaults to 10 seconds.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresession import SessionClient
        >>> from aresession.core import ExecutorConfig
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, json={"foo": "bar"}))
        >>> with SessionClient(
        ...     config=ExecutorConfig(base_url="https://api.example.com"),
        ...     client=httpx.Client(transport=mock),
        ... ) as client:
        ...     client.get("/data").json()
        ...
        {'foo': 'bar'}

        ```
    """

    def __init__(
        self,
        *,
        session: SessionManager | None = None,
        config: ExecutorConfig | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = HttpxTransport(client, timeout=timeout)
        self._session = session
        self._executor = RequestExecutor(
            self._transport, session=session, config=config or ExecutorConfig()
        )

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def session(self) -> SessionManager | None:
        return self._session

    def __enter__(self) -> Self:
        self._transport.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._transport.__exit__(exc_type, exc_val, exc_tb)

    def login(self, username: str | None = None, password: str | None = None) -> Credentials:
        """Log in through the session manager.

        The credentials are remembered by the session manager and reused
        when a later request has to log in again. Missing arguments fall
        back to the stored or default credentials.

        Raises:
            AuthenticationFailed: If no session manager is configured or
                the login failed.
        """
        if self._session is None:
            msg = "no session manager is configured"
            raise AuthenticationFailed(msg)
        return self._session.login(username, password)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: bytes | str | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP request with retries and reauthentication.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, ...).
            url: An absolute URL or a path relative to the configured
                base URL.
            headers: Optional request headers.
            body: Optional request body.

        Returns:
            The HTTP response.

        Raises:
            TimeoutExceeded: If the transient failures exhausted the
                retry budget.
            VendorTimeoutSignal: If the backend returned its
                session-timeout page.
            AuthenticationFailed: If logging in again failed.
            TransportError: If the transport failed permanently.
        """
        return self._executor.execute(Request(method, url, headers=headers or {}, body=body))

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", url, **kwargs)
