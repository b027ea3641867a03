r"""Shared test helpers: scripted transports, stub session managers and
response factories."""

from __future__ import annotations

__all__ = [
    "TEST_URL",
    "ScriptedTransport",
    "StubSessionManager",
    "create_response",
]

from typing import TYPE_CHECKING

import httpx

from aresession.exceptions import AuthenticationFailed
from aresession.session import BaseSessionManager, Credentials

if TYPE_CHECKING:
    from collections.abc import Mapping

TEST_URL = "http://example.com"


def create_response(
    status_code: int = 200,
    text: str = "",
    headers: Mapping[str, str] | None = None,
    url: str = TEST_URL,
) -> httpx.Response:
    """Create a fully read httpx.Response."""
    return httpx.Response(
        status_code, text=text, headers=headers, request=httpx.Request("GET", url)
    )


class ScriptedTransport:
    """Transport that replays a fixed sequence of responses and
    exceptions.

    Each call to ``perform`` consumes the next item: an exception is
    raised, a response is returned. Calls are recorded in ``calls``.
    """

    def __init__(self, *results: httpx.Response | Exception) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, str, dict[str, str], bytes | str | None]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def perform(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | str | None,
    ) -> httpx.Response:
        self.calls.append((method, url, dict(headers), body))
        if not self.results:
            msg = "no scripted result left"
            raise AssertionError(msg)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class StubSessionManager(BaseSessionManager):
    """Session manager that records login calls.

    Args:
        default_credentials: Optional default credentials.
        valid_credentials: If set, only these credentials are accepted.
        fail: If ``True``, every login is rejected.
    """

    def __init__(
        self,
        default_credentials: Credentials | None = None,
        valid_credentials: Credentials | None = None,
        fail: bool = False,
    ) -> None:
        super().__init__(default_credentials)
        self.valid_credentials = valid_credentials
        self.fail = fail
        self.login_requests: list[tuple[str, str]] = []

    def send_login_request(self, username: str, password: str) -> None:
        self.login_requests.append((username, password))
        if self.fail:
            msg = "Faked"
            raise AuthenticationFailed(msg)
        if self.valid_credentials is not None and self.valid_credentials != Credentials(
            username, password
        ):
            msg = "invalid username or password"
            raise AuthenticationFailed(msg)
