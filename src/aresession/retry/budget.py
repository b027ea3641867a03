r"""Retry budget of one logical request."""

from __future__ import annotations

__all__ = ["RetryBudget"]


class RetryBudget:
    r"""Count the retries still allowed for one logical request.

    A new budget is created for every logical request, so budgets are
    never shared between callers.

    Args:
        max_retries: The number of retries allowed after the first
            attempt. Must be >= 0.

    Example:
        ```pycon
        >>> from aresession.retry.budget import RetryBudget
        >>> budget = RetryBudget(max_retries=1)
        >>> budget.consume()
        True
        >>> budget.consume()
        False
        >>> budget.exhausted
        True

        ```
    """

    def __init__(self, max_retries: int) -> None:
        if max_retries < 0:
            msg = f"max_retries must be >= 0, got {max_retries}"
            raise ValueError(msg)
        self.max_retries = max_retries
        self.remaining = max_retries

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(remaining={self.remaining}, "
            f"max_retries={self.max_retries})"
        )

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    @property
    def used(self) -> int:
        r"""The number of retries consumed so far."""
        return self.max_retries - self.remaining

    def consume(self) -> bool:
        """Use one retry if any is left.

        Returns:
            ``True`` if a retry may be issued, ``False`` if the budget
            was already exhausted.
        """
        if self.remaining == 0:
            return False
        self.remaining -= 1
        return True
