r"""Session managers own the credentials and the login call.

The executor never touches the session itself: when a request comes back
unauthorized it calls ``login`` without arguments, and the session manager
logs in again with its current credentials. ``BaseSessionManager``
implements the bookkeeping (most recent credentials, defaults, locking)
and leaves the actual login request to subclasses.

Example:
    ```pycon
    >>> from aresession.exceptions import AuthenticationFailed
    >>> from aresession.session import BaseSessionManager, Credentials
    >>> class StaticSessionManager(BaseSessionManager):
    ...     def send_login_request(self, username, password):
    ...         if password != "secret":
    ...             raise AuthenticationFailed("invalid username or password")
    ...
    >>> session = StaticSessionManager(default_credentials=Credentials("bob", "secret"))
    >>> session.login()
    Credentials(username='bob')
    >>> session.logged_in
    True
    >>> session.current_credentials().username
    'bob'

    ```
"""

from __future__ import annotations

__all__ = ["BaseSessionManager", "Credentials", "SessionManager"]

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from aresession.exceptions import AuthenticationFailed

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """A username and password pair.

    The password is left out of the representation so credentials can
    be logged safely.

    Example:
        ```pycon
        >>> from aresession.session import Credentials
        >>> Credentials("bob", "secret")
        Credentials(username='bob')

        ```
    """

    username: str
    password: str = field(repr=False)


@runtime_checkable
class SessionManager(Protocol):
    r"""Interface consumed by the executor to re-establish a session."""

    def login(self, username: str | None = None, password: str | None = None) -> Credentials:
        """Log in and return the credentials used.

        Missing arguments are resolved from ``current_credentials`` in
        the same critical section as the login call. Raises
        ``AuthenticationFailed`` on failure.
        """

    def current_credentials(self) -> Credentials:
        """Return the credentials to use for the next login."""


class BaseSessionManager(ABC):
    r"""Base class of session managers.

    ``login`` remembers the credentials it receives before sending the
    login request, so a later reauthentication reuses the credentials
    that were most recently supplied, even if that login failed. When no
    credentials were ever supplied, ``default_credentials`` are used.

    ``login`` and ``current_credentials`` are serialized by a re-entrant
    lock: concurrent reauthentications of several logical requests wait
    for each other instead of racing on the session.

    Args:
        default_credentials: Optional credentials used when ``login`` is
            called without arguments and no credentials were stored.
    """

    def __init__(self, default_credentials: Credentials | None = None) -> None:
        self._default_credentials = default_credentials
        self._credentials: Credentials | None = None
        self._logged_in = False
        self._lock = threading.RLock()

    @property
    def logged_in(self) -> bool:
        r"""Whether the last login succeeded."""
        return self._logged_in

    def current_credentials(self) -> Credentials:
        """Return the most recently supplied credentials, or the
        defaults.

        Raises:
            AuthenticationFailed: If no credentials are available.
        """
        with self._lock:
            if self._credentials is not None:
                return self._credentials
            if self._default_credentials is not None:
                return self._default_credentials
        msg = "no credentials available to log in"
        raise AuthenticationFailed(msg)

    def login(self, username: str | None = None, password: str | None = None) -> Credentials:
        """Log in and remember the credentials.

        Missing arguments are taken from ``current_credentials`` while
        the lock is held, so a concurrent ``login`` with new credentials
        cannot be overwritten by stale ones.

        Args:
            username: Optional username.
            password: Optional password.

        Returns:
            The credentials the login was sent with.

        Raises:
            AuthenticationFailed: If no credentials are available or the
                backend rejects them.
        """
        with self._lock:
            if username is None or password is None:
                current = self.current_credentials()
                username = current.username if username is None else username
                password = current.password if password is None else password
            credentials = Credentials(username, password)
            self._credentials = credentials
            self._logged_in = False
            logger.debug(f"Logging in as {username}")
            self.send_login_request(username, password)
            self._logged_in = True
            logger.debug(f"Logged in as {username}")
            return credentials

    @abstractmethod
    def send_login_request(self, username: str, password: str) -> None:
        """Send the login request to the backend.

        Args:
            username: The username.
            password: The password.

        Raises:
            AuthenticationFailed: If the backend rejects the credentials.
        """
