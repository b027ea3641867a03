r"""Unit tests for session managers."""

from __future__ import annotations

import threading
import time

import pytest

from aresession.exceptions import AuthenticationFailed
from aresession.session import BaseSessionManager, Credentials, SessionManager
from tests.helpers import StubSessionManager


def test_credentials_repr_hides_password() -> None:
    """Test that the password is not in the repr."""
    assert "secret" not in repr(Credentials("bob", "secret"))


def test_credentials_equality() -> None:
    """Test Credentials equality."""
    assert Credentials("bob", "secret") == Credentials("bob", "secret")
    assert Credentials("bob", "secret") != Credentials("bob", "other")


def test_base_session_manager_is_abstract() -> None:
    """Test that BaseSessionManager cannot be instantiated."""
    with pytest.raises(TypeError):
        BaseSessionManager()  # type: ignore[abstract]


def test_stub_session_manager_is_session_manager() -> None:
    """Test that BaseSessionManager subclasses are SessionManagers."""
    assert isinstance(StubSessionManager(), SessionManager)


def test_current_credentials_without_credentials() -> None:
    """Test current_credentials without any credentials."""
    with pytest.raises(AuthenticationFailed, match=r"no credentials available"):
        StubSessionManager().current_credentials()


def test_current_credentials_defaults() -> None:
    """Test that current_credentials falls back to the defaults."""
    session = StubSessionManager(default_credentials=Credentials("d", "dp"))
    assert session.current_credentials() == Credentials("d", "dp")


def test_login_stores_credentials() -> None:
    """Test that login stores and returns the credentials."""
    session = StubSessionManager(default_credentials=Credentials("d", "dp"))

    assert session.login("u", "p") == Credentials("u", "p")
    assert session.logged_in
    assert session.current_credentials() == Credentials("u", "p")
    assert session.login_requests == [("u", "p")]


def test_login_without_arguments_uses_defaults() -> None:
    """Test login without arguments and no stored credentials."""
    session = StubSessionManager(default_credentials=Credentials("d", "dp"))
    session.login()

    assert session.login_requests == [("d", "dp")]


def test_login_without_arguments_uses_last_credentials() -> None:
    """Test login without arguments after a previous login."""
    session = StubSessionManager(default_credentials=Credentials("d", "dp"))
    session.login("u", "p")
    session.login()

    assert session.login_requests == [("u", "p"), ("u", "p")]


def test_login_partial_arguments() -> None:
    """Test login with only a password."""
    session = StubSessionManager(default_credentials=Credentials("d", "dp"))
    session.login(password="other")

    assert session.login_requests == [("d", "other")]


def test_login_without_any_credentials() -> None:
    """Test login without any credentials available."""
    session = StubSessionManager()

    with pytest.raises(AuthenticationFailed):
        session.login()

    assert session.login_requests == []
    assert not session.logged_in


def test_login_failure_keeps_supplied_credentials() -> None:
    """Test that a failed login still stores its credentials."""
    session = StubSessionManager(valid_credentials=Credentials("u", "p"))

    with pytest.raises(AuthenticationFailed, match=r"invalid username or password"):
        session.login("u", "wrong")

    assert not session.logged_in
    assert session.current_credentials() == Credentials("u", "wrong")


def test_login_failure_after_success_resets_logged_in() -> None:
    """Test that a failed login resets logged_in."""
    session = StubSessionManager(valid_credentials=Credentials("u", "p"))
    session.login("u", "p")

    with pytest.raises(AuthenticationFailed):
        session.login("u", "wrong")

    assert not session.logged_in


def test_concurrent_logins_are_serialized() -> None:
    """Test that concurrent logins do not overlap."""
    active = []
    overlaps = []

    class SlowSessionManager(BaseSessionManager):
        def send_login_request(self, username: str, password: str) -> None:  # noqa: ARG002
            active.append(username)
            if len(active) > 1:
                overlaps.append(username)
            time.sleep(0.01)
            active.remove(username)

    session = SlowSessionManager(default_credentials=Credentials("u", "p"))
    threads = [threading.Thread(target=session.login) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps == []
    assert session.logged_in
