r"""Retry and reauthentication engine.

Public API:
    - RequestExecutor: Drives a logical request through the transport
    - AttemptClassifier: Maps transport results to attempt outcomes
    - RetryBudget: Counts the retries left for one logical request
    - Success, TransientFailure, FatalTransportFailure, AuthFailure,
      VendorTimeout: The possible outcomes of one attempt
"""

from __future__ import annotations

__all__ = [
    "AttemptClassifier",
    "AttemptOutcome",
    "AuthFailure",
    "FatalTransportFailure",
    "RequestExecutor",
    "RetryBudget",
    "Success",
    "TransientFailure",
    "VendorTimeout",
]

from aresession.retry.budget import RetryBudget
from aresession.retry.classifier import AttemptClassifier
from aresession.retry.executor import RequestExecutor
from aresession.retry.outcome import (
    AttemptOutcome,
    AuthFailure,
    FatalTransportFailure,
    Success,
    TransientFailure,
    VendorTimeout,
)
