r"""Explicit outcomes of a single attempt.

The classifier turns whatever the transport returned or raised into one
of these variants. The executor then dispatches on the variant, which
keeps every transition of the retry state machine visible in one place.
"""

from __future__ import annotations

__all__ = [
    "AttemptOutcome",
    "AuthFailure",
    "FatalTransportFailure",
    "Success",
    "TransientFailure",
    "VendorTimeout",
]

from dataclasses import dataclass
from typing import Union

import httpx


@dataclass(frozen=True)
class Success:
    """The transport returned a response to hand back to the caller.

    Any status other than the authentication and vendor-timeout signals
    counts, including 4xx and 5xx responses.
    """

    response: httpx.Response


@dataclass(frozen=True)
class TransientFailure:
    """The transport timed out or lost the connection."""

    cause: Exception


@dataclass(frozen=True)
class FatalTransportFailure:
    """The transport failed in a way that retrying cannot fix."""

    cause: Exception


@dataclass(frozen=True)
class AuthFailure:
    """The backend rejected the session (e.g. 401 Unauthorized)."""

    response: httpx.Response


@dataclass(frozen=True)
class VendorTimeout:
    """The backend answered with its session-timeout page."""

    response: httpx.Response


AttemptOutcome = Union[Success, TransientFailure, FatalTransportFailure, AuthFailure, VendorTimeout]
