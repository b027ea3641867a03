from __future__ import annotations

import logging
import sys

import httpx

import aresession

logger: logging.Logger = logging.getLogger(__name__)

BASE_URL = "https://api.example.com"


class _Session(aresession.BaseSessionManager):
    def send_login_request(self, username: str, password: str) -> None:
        logger.info(f"Logging in as {username}")


def _make_client(transport: httpx.MockTransport) -> aresession.SessionClient:
    return aresession.SessionClient(
        session=_Session(default_credentials=aresession.Credentials("user", "password")),
        config=aresession.ExecutorConfig(base_url=BASE_URL),
        client=httpx.Client(transport=transport),
    )


def check_get() -> None:
    logger.info("Checking get...")
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"foo": "bar"}))
    with _make_client(transport) as client:
        response = client.get("/data")
    assert response.json() == {"foo": "bar"}


def check_retry() -> None:
    logger.info("Checking retry...")
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            msg = "timed out"
            raise httpx.ReadTimeout(msg, request=request)
        return httpx.Response(200)

    with _make_client(httpx.MockTransport(handler)) as client:
        response = client.get("/data")
    assert response.status_code == 200
    assert len(calls) == 3


def check_reauthentication() -> None:
    logger.info("Checking reauthentication...")
    statuses = [401, 200]
    transport = httpx.MockTransport(lambda request: httpx.Response(statuses.pop(0)))
    with _make_client(transport) as client:
        response = client.post("/data", body="{}")
    assert response.status_code == 200
    assert client.session.logged_in


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_get()
        check_retry()
        check_reauthentication()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
