r"""Immutable description of a logical HTTP request."""

from __future__ import annotations

__all__ = ["Request"]

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class Request:
    r"""An HTTP call that the executor may issue several times.

    The request is assumed to be idempotent: retries and the replay
    after a re-login send exactly the same method, URL, headers and
    body.

    Args:
        method: The HTTP method. It is normalized to upper case.
        url: An absolute URL, or a path resolved against the executor's
            ``base_url``.
        headers: Optional request headers. They are copied into a
            read-only mapping.
        body: Optional request body.

    Example:
        ```pycon
        >>> from aresession.request import Request
        >>> request = Request("get", "/v1/apps", headers={"Accept": "application/json"})
        >>> request.method
        'GET'
        >>> request.resolve_url("https://api.example.com")
        'https://api.example.com/v1/apps'

        ```
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def resolve_url(self, base_url: str | None = None) -> str:
        """Return the URL to send the request to.

        Args:
            base_url: Optional base URL. It is ignored when the request
                URL is already absolute.

        Returns:
            The absolute URL if a base URL was given, otherwise the
            request URL unchanged.
        """
        if base_url is None:
            return self.url
        return str(httpx.URL(base_url).join(self.url))
