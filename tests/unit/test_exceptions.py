r"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import httpx
import pytest

from aresession.exceptions import (
    AuthenticationFailed,
    RequestExecutorError,
    TimeoutExceeded,
    TransportError,
    VendorTimeoutSignal,
)
from tests.helpers import TEST_URL, create_response


def test_request_executor_error_defaults() -> None:
    """Test RequestExecutorError default attributes."""
    error = RequestExecutorError("failed")

    assert str(error) == "failed"
    assert error.message == "failed"
    assert error.method is None
    assert error.url is None
    assert error.status_code is None
    assert error.response is None
    assert error.cause is None
    assert isinstance(error, RuntimeError)


def test_request_executor_error_attributes() -> None:
    """Test RequestExecutorError attributes."""
    cause = httpx.ReadTimeout("timed out")
    response = create_response(200)
    error = TimeoutExceeded(
        "GET request failed",
        method="GET",
        url=TEST_URL,
        status_code=200,
        response=response,
        cause=cause,
    )

    assert error.method == "GET"
    assert error.url == TEST_URL
    assert error.status_code == 200
    assert error.response is response
    assert error.cause is cause


@pytest.mark.parametrize(
    "error_cls", [AuthenticationFailed, TimeoutExceeded, TransportError, VendorTimeoutSignal]
)
def test_executor_errors_can_be_caught_together(error_cls: type[RequestExecutorError]) -> None:
    """Test that executor errors share a base class."""
    with pytest.raises(RequestExecutorError, match=r"boom"):
        raise error_cls("boom")
