r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the index of a retry to the number of
    seconds the executor sleeps before issuing it.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a retry.

        Args:
            attempt: The retry index (0-indexed). ``attempt=0`` is the
                delay before the first retry.

        Returns:
            The delay in seconds.
        """
