from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from aresession.session import Credentials
from tests.helpers import TEST_URL, StubSessionManager, create_response

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a successful httpx.Response for testing."""
    return create_response(200, text='{foo: "bar"}')


@pytest.fixture
def unauthorized_response() -> httpx.Response:
    """Create a 401 httpx.Response for testing."""
    return create_response(401, text="Unauthorized")


@pytest.fixture
def vendor_timeout_response() -> httpx.Response:
    """Create a response carrying the backend session-timeout page."""
    return create_response(
        200, text="<html><head><title>302 Found</title></head><body>Found</body></html>"
    )


@pytest.fixture
def timeout_error() -> httpx.TimeoutException:
    """Create a transport timeout for testing."""
    return httpx.ReadTimeout("timed out", request=httpx.Request("GET", TEST_URL))


@pytest.fixture
def session() -> StubSessionManager:
    """Create a session manager that accepts any credentials."""
    return StubSessionManager(default_credentials=Credentials("user", "password"))


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
