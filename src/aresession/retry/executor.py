r"""Request executor with retry and reauthentication.

This module provides the RequestExecutor class that drives one logical
request through the transport, retrying transient failures and logging
in again when the session expired.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

import logging
import time
from typing import TYPE_CHECKING, NoReturn

from aresession.callbacks import (
    invoke_on_failure,
    invoke_on_reauthenticate,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)
from aresession.core.config import ExecutorConfig
from aresession.exceptions import (
    AuthenticationFailed,
    RequestExecutorError,
    TimeoutExceeded,
    TransportError,
    VendorTimeoutSignal,
)
from aresession.retry.budget import RetryBudget
from aresession.retry.classifier import AttemptClassifier
from aresession.retry.outcome import (
    AuthFailure,
    FatalTransportFailure,
    Success,
    TransientFailure,
    VendorTimeout,
)
from aresession.utils.structured_logging import log_structured

if TYPE_CHECKING:
    import httpx

    from aresession.request import Request
    from aresession.retry.outcome import AttemptOutcome
    from aresession.session import Credentials, SessionManager
    from aresession.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)


class RequestExecutor:
    """Executes logical requests with retries and reauthentication.

    For every logical request the executor issues the request, classifies
    the result and then:

    - returns the response if it is neither an authentication failure
      nor a vendor timeout signal (4xx and 5xx responses included)
    - retries transport timeouts and connection failures until the retry
      budget is exhausted, then raises ``TimeoutExceeded``
    - raises ``VendorTimeoutSignal`` at once when the backend answers
      with its session-timeout page, whatever the remaining budget
    - on 401, logs in again through the session manager and replays the
      request exactly once; the outcome of the replay is final
    - raises ``TransportError`` at once for transport errors that a retry
      cannot fix

    The executor keeps no state between logical requests, so one
    instance can serve several threads as long as the transport and the
    session manager can.

    Args:
        transport: The transport performing the physical calls.
        session: Optional session manager used to log in again after a
            401 response. Without it, a 401 raises
            ``AuthenticationFailed``.
        config: Optional executor configuration. If ``None``, a default
            ExecutorConfig is used.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresession.core import ExecutorConfig
        >>> from aresession.request import Request
        >>> from aresession.retry import RequestExecutor
        >>> from aresession.transport import HttpxTransport
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, text="pong"))
        >>> executor = RequestExecutor(
        ...     HttpxTransport(httpx.Client(transport=mock)),
        ...     config=ExecutorConfig(base_url="https://api.example.com"),
        ... )
        >>> executor.execute(Request("GET", "/ping")).text
        'pong'

        ```
    """

    def __init__(
        self,
        transport: Transport,
        session: SessionManager | None = None,
        config: ExecutorConfig | None = None,
    ) -> None:
        self.transport = transport
        self.session = session
        self.config: ExecutorConfig = config or ExecutorConfig()
        self.classifier: AttemptClassifier = AttemptClassifier(
            auth_status_codes=self.config.auth_status_codes,
            vendor_timeout_markers=self.config.vendor_timeout_markers,
            is_vendor_timeout=self.config.is_vendor_timeout,
        )

    def execute(self, request: Request) -> httpx.Response:
        """Execute a logical request.

        Args:
            request: The request to execute.

        Returns:
            The HTTP response. Only authentication failures and vendor
            timeout signals are turned into errors: any other status is
            returned as-is.

        Raises:
            TimeoutExceeded: If every attempt failed with a transient
                transport error. The last transport error is the cause.
            VendorTimeoutSignal: If the backend answered with its
                session-timeout page.
            AuthenticationFailed: If the session expired and logging in
                again failed.
            Exception: Any other error raised by the session manager
                during the login propagates unchanged.
            TransportError: If the transport failed in a way that
                retrying cannot fix.
        """
        url = request.resolve_url(self.config.base_url)
        method = request.method
        max_retries = self.config.max_retries
        budget = RetryBudget(max_retries)
        start_time = time.time()

        while True:
            attempt = budget.used
            invoke_on_request(
                self.config.on_request,
                url=url,
                method=method,
                attempt=attempt,
                max_retries=max_retries,
            )
            logger.debug(f"{method} {url}: attempt {attempt + 1}/{max_retries + 1}")
            outcome = self.classifier.attempt(self.transport, request, url)

            if isinstance(outcome, Success):
                return self._succeed(outcome.response, url, method, attempt, start_time)

            if isinstance(outcome, TransientFailure):
                if budget.consume():
                    self._wait_before_retry(outcome.cause, url, method, attempt, budget)
                    continue
                error = TimeoutExceeded(
                    f"{method} request to {url} failed after {attempt + 1} attempts: "
                    f"{outcome.cause!r}",
                    method=method,
                    url=url,
                    cause=outcome.cause,
                )
                self._fail(error, url, method, attempt, start_time)
                raise error from outcome.cause

            if isinstance(outcome, VendorTimeout):
                error = VendorTimeoutSignal(
                    f"{method} request to {url} returned the backend session-timeout page",
                    method=method,
                    url=url,
                    status_code=outcome.response.status_code,
                    response=outcome.response,
                )
                self._fail(error, url, method, attempt, start_time)
                raise error

            if isinstance(outcome, AuthFailure):
                logger.warning(
                    f"{method} request to {url} returned {outcome.response.status_code}: "
                    "session lost, logging in again"
                )
                try:
                    credentials = self.reauthenticate()
                except Exception as exc:
                    self._fail(exc, url, method, attempt, start_time)
                    raise
                invoke_on_reauthenticate(
                    self.config.on_reauthenticate,
                    url=url,
                    method=method,
                    username=credentials.username,
                    status_code=outcome.response.status_code,
                )
                return self._replay(request, url, attempt + 1, start_time)

            self._raise_transport_error(outcome, url, method, attempt, start_time)

    def reauthenticate(self) -> Credentials:
        """Log in again with the session manager's current credentials.

        The session manager resolves its current credentials and logs in
        with them in one call, so a concurrent ``login`` with new
        credentials is never overwritten. Failures are not retried: a
        failed login ends the logical request.

        Returns:
            The credentials used for the login.

        Raises:
            AuthenticationFailed: If no session manager is configured,
                no credentials are available, or the login failed.
        """
        if self.session is None:
            msg = "the session expired and no session manager is configured"
            raise AuthenticationFailed(msg)
        credentials = self.session.login()
        logger.info(f"Logged in again as {credentials.username}")
        return credentials

    def _replay(
        self, request: Request, url: str, attempt: int, start_time: float
    ) -> httpx.Response:
        method = request.method
        invoke_on_request(
            self.config.on_request,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            replay=True,
        )
        logger.debug(f"{method} {url}: replaying after reauthentication")
        outcome = self.classifier.attempt(self.transport, request, url)
        if isinstance(outcome, (Success, AuthFailure, VendorTimeout)):
            return self._succeed(outcome.response, url, method, attempt, start_time, replay=True)
        if isinstance(outcome, TransientFailure):
            error = TimeoutExceeded(
                f"{method} request to {url} failed after reauthentication: {outcome.cause!r}",
                method=method,
                url=url,
                cause=outcome.cause,
            )
            self._fail(error, url, method, attempt, start_time)
            raise error from outcome.cause
        self._raise_transport_error(outcome, url, method, attempt, start_time)

    def _raise_transport_error(
        self,
        outcome: AttemptOutcome,
        url: str,
        method: str,
        attempt: int,
        start_time: float,
    ) -> NoReturn:
        if not isinstance(outcome, FatalTransportFailure):  # pragma: no cover
            msg = f"unexpected attempt outcome: {outcome!r}"
            raise TypeError(msg)
        error = TransportError(
            f"{method} request to {url} failed: {outcome.cause!r}",
            method=method,
            url=url,
            cause=outcome.cause,
        )
        self._fail(error, url, method, attempt, start_time)
        raise error from outcome.cause

    def _wait_before_retry(
        self,
        cause: Exception,
        url: str,
        method: str,
        attempt: int,
        budget: RetryBudget,
    ) -> None:
        strategy = self.config.backoff_strategy
        sleep_time = strategy.calculate(attempt) if strategy is not None else 0.0
        logger.warning(
            f"{method} request to {url} failed with {type(cause).__name__}: {cause}. "
            f"Retrying in {sleep_time:.2f}s (remaining: {budget.remaining})"
        )
        if sleep_time > 0:
            time.sleep(sleep_time)
        invoke_on_retry(
            self.config.on_retry,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            sleep_time=sleep_time,
            error=cause,
        )

    def _succeed(
        self,
        response: httpx.Response,
        url: str,
        method: str,
        attempt: int,
        start_time: float,
        replay: bool = False,
    ) -> httpx.Response:
        log_structured(
            logger,
            logging.DEBUG,
            f"{method} request to {url} returned {response.status_code}",
            method=method,
            url=url,
            attempt=attempt + 1,
            status_code=response.status_code,
            replay=replay,
        )
        invoke_on_success(
            self.config.on_success,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            response=response,
            start_time=start_time,
            replay=replay,
        )
        return response

    def _fail(
        self,
        error: Exception,
        url: str,
        method: str,
        attempt: int,
        start_time: float,
    ) -> None:
        status_code = error.status_code if isinstance(error, RequestExecutorError) else None
        log_structured(
            logger,
            logging.WARNING,
            str(error),
            method=method,
            url=url,
            attempt=attempt + 1,
            error_type=type(error).__name__,
            status_code=status_code,
        )
        invoke_on_failure(
            self.config.on_failure,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            error=error,
            status_code=status_code,
            start_time=start_time,
        )
