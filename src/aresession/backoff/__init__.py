r"""Delay strategies applied between retries of a transient failure.

By default the executor re-issues a request immediately after a
transport failure. A strategy from this package inserts a pause
before each retry instead.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from aresession.backoff.base import BaseBackoffStrategy
from aresession.backoff.constant import ConstantBackoff
from aresession.backoff.exponential import ExponentialBackoff
