r"""Unit tests for parameter validation."""

from __future__ import annotations

import httpx
import pytest

from aresession.core import validate_executor_params, validate_timeout


@pytest.mark.parametrize("timeout", [0.1, 10, 30.0, httpx.Timeout(5.0)])
def test_validate_timeout_valid(timeout: float | httpx.Timeout) -> None:
    """Test validate_timeout with valid values."""
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, -1, -0.5])
def test_validate_timeout_invalid(timeout: float) -> None:
    """Test that validate_timeout rejects non-positive values."""
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


def test_validate_executor_params_valid() -> None:
    """Test validate_executor_params with valid values."""
    validate_executor_params(
        max_retries=0, auth_status_codes=(401, 403), vendor_timeout_markers=("expired",)
    )


def test_validate_executor_params_negative_max_retries() -> None:
    """Test that a negative max_retries is rejected."""
    with pytest.raises(ValueError, match=r"max_retries must be >= 0, got -3"):
        validate_executor_params(max_retries=-3)


@pytest.mark.parametrize("status_code", [0, 99, 600])
def test_validate_executor_params_invalid_status(status_code: int) -> None:
    """Test that an invalid HTTP status code is rejected."""
    with pytest.raises(ValueError, match=r"auth_status_codes"):
        validate_executor_params(max_retries=1, auth_status_codes=(status_code,))


def test_validate_executor_params_empty_marker() -> None:
    """Test that an empty vendor timeout marker is rejected."""
    with pytest.raises(ValueError, match=r"vendor_timeout_markers"):
        validate_executor_params(max_retries=1, vendor_timeout_markers=("ok", ""))
