from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
import requests

from adapters.transport.requests_transport import (
    LoggingSession,
    RequestsTransport,
    new_session,
)
from core.errors import TransportError
from core.ports.transport import TransportResponse


class DummySession:
    def __init__(self, response=None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.last_call = None
        self.closed = False

    def request(self, method, url, **kwargs):
        self.last_call = {"method": method, "url": url, **kwargs}
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def test_send_maps_response():
    session = DummySession(SimpleNamespace(status_code=200, text='{"serverTime":1}'))
    transport = RequestsTransport(session, timeout=3.5)

    result = transport.send("GET", "https://api.binance.com/api/v3/time", {}, None)

    assert result == TransportResponse(status=200, body='{"serverTime":1}')
    assert session.last_call == {
        "method": "GET",
        "url": "https://api.binance.com/api/v3/time",
        "headers": {},
        "data": None,
        "timeout": 3.5,
    }


def test_non_2xx_is_returned_not_raised():
    session = DummySession(SimpleNamespace(status_code=429, text="Too many requests"))

    result = RequestsTransport(session).send("GET", "https://x/api", {}, None)

    assert result.status == 429


@pytest.mark.parametrize(
    "exc",
    [
        requests.ConnectionError("refused"),
        requests.Timeout("read timed out"),
    ],
)
def test_request_exceptions_become_transport_errors(exc):
    transport = RequestsTransport(DummySession(exc=exc))

    with pytest.raises(TransportError) as exc_info:
        transport.send(
            "GET",
            "https://api.binance.com/api/v3/account?timestamp=1&signature=abcdef",
            {"X-MBX-APIKEY": "key"},
            None,
        )

    assert exc_info.value.__cause__ is exc
    assert "abcdef" not in str(exc_info.value)


def test_close_closes_session():
    session = DummySession()
    RequestsTransport(session).close()

    assert session.closed


def test_transport_builds_its_own_session(monkeypatch):
    built = []

    def fake_new_session(debug=False):
        built.append(debug)
        return DummySession(SimpleNamespace(status_code=200, text="{}"))

    monkeypatch.setattr(
        "adapters.transport.requests_transport.new_session", fake_new_session
    )

    result = RequestsTransport(debug=True).send("GET", "https://x/api", {}, None)

    assert built == [True]
    assert result.status == 200


def test_new_session_ignores_environment_proxies():
    session = new_session()

    assert session.trust_env is False
    assert session.proxies == {}
    assert session.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert session.headers["User-Agent"].startswith("binance-spot-connector-python/")
    assert not isinstance(session, LoggingSession)


def test_debug_session_logs_masked_request(monkeypatch, caplog):
    monkeypatch.setattr(
        requests.Session,
        "request",
        lambda self, method, url, **kwargs: SimpleNamespace(status_code=200, text="{}"),
    )
    session = new_session(debug=True)
    url = "https://api.binance.com/api/v3/account?timestamp=1&signature=" + "f" * 64

    with caplog.at_level(logging.INFO):
        session.request("get", url, headers={"X-MBX-APIKEY": "abcdefghijkl"})

    assert isinstance(session, LoggingSession)
    assert "f" * 64 not in caplog.text
    assert "abcdefghijkl" not in caplog.text
    assert "abc***jkl" in caplog.text
    assert "signature at end: True" in caplog.text
