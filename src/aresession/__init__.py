r"""aresession - Session-aware HTTP requests with retry and reauthentication.

This package executes HTTP requests against a backend that expires its
sessions. Built on top of the httpx library, it hides the usual failure
modes of such backends from callers who just want a response.

Key Features:
    - Bounded, sequential retry of transport timeouts and connection
      failures (5 retries by default)
    - Automatic re-login and single replay of the request after a 401
    - Immediate, distinct error for the backend's session-timeout page
    - Injectable transport and session manager, no global state
    - Callback/Event system and structured logging for observability

Example:
    ```pycon
    >>> from aresession import BaseSessionManager, SessionClient
    >>> from aresession.core import ExecutorConfig
    >>> class MySession(BaseSessionManager):
    ...     def send_login_request(self, username, password):
    ...         ...  # POST the credentials to the backend
    ...
    >>> with SessionClient(
    ...     session=MySession(),
    ...     config=ExecutorConfig(base_url="https://api.example.com"),
    ... ) as client:  # doctest: +SKIP
    ...     client.login("user", "password")
    ...     response = client.get("/v1/apps")
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AuthenticationFailed",
    "BaseSessionManager",
    "Credentials",
    "ExecutorConfig",
    "HttpxTransport",
    "Request",
    "RequestExecutor",
    "RequestExecutorError",
    "SessionClient",
    "SessionManager",
    "TimeoutExceeded",
    "Transport",
    "TransportError",
    "TransportTimeout",
    "VendorTimeoutSignal",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aresession.client import SessionClient
from aresession.core.config import ExecutorConfig
from aresession.exceptions import (
    AuthenticationFailed,
    RequestExecutorError,
    TimeoutExceeded,
    TransportError,
    TransportTimeout,
    VendorTimeoutSignal,
)
from aresession.request import Request
from aresession.retry.executor import RequestExecutor
from aresession.session import BaseSessionManager, Credentials, SessionManager
from aresession.transport import HttpxTransport, Transport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
