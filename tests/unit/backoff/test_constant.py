r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from aresession.backoff import BaseBackoffStrategy, ConstantBackoff


def test_constant_backoff_is_strategy() -> None:
    """Test that ConstantBackoff is a backoff strategy."""
    assert isinstance(ConstantBackoff(), BaseBackoffStrategy)


def test_constant_backoff_default() -> None:
    """Test the default ConstantBackoff delay."""
    backoff = ConstantBackoff()
    assert backoff.delay == 3.0
    assert backoff.calculate(0) == 3.0
    assert backoff.calculate(4) == 3.0


def test_constant_backoff_custom_delay() -> None:
    """Test ConstantBackoff with a custom delay."""
    backoff = ConstantBackoff(delay=0.25)
    assert [backoff.calculate(i) for i in range(3)] == [0.25, 0.25, 0.25]


def test_constant_backoff_zero_delay() -> None:
    """Test ConstantBackoff with a zero delay."""
    assert ConstantBackoff(delay=0.0).calculate(3) == 0.0


def test_constant_backoff_invalid_delay() -> None:
    """Test that a negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-1.0)


def test_constant_backoff_repr() -> None:
    """Test ConstantBackoff.__repr__."""
    assert repr(ConstantBackoff(delay=2.0)) == "ConstantBackoff(delay=2.0)"
