"""``requests``-based implementation of the transport port."""

from __future__ import annotations

import logging
from typing import Mapping

import requests

from core.errors import TransportError
from core.logging_utils import mask_key, redact_signature
from core.models import API_KEY_HEADER
from core.ports.transport import TransportPort, TransportResponse

logger = logging.getLogger(__name__)

USER_AGENT = "binance-spot-connector-python/1.0.0"
DEFAULT_TIMEOUT = 10.0


class LoggingSession(requests.Session):
    """Requests session that logs every outgoing request."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        super().__init__()
        self._logger = log or logger

    def request(self, method, url, **kwargs):
        headers = kwargs.get("headers") or {}
        ctype = headers.get("Content-Type") or self.headers.get("Content-Type")
        api_key = headers.get(API_KEY_HEADER) or self.headers.get(API_KEY_HEADER)

        has_sig_end = "signature=" in url and "&" not in url.rsplit("signature=", 1)[1]
        self._logger.info(
            "DEBUG - Request %s %s | Content-Type: %s | %s: %s",
            method.upper(),
            redact_signature(url),
            ctype,
            API_KEY_HEADER,
            mask_key(api_key),
        )
        self._logger.info("DEBUG - signature at end: %s", has_sig_end)
        response = super().request(method, url, **kwargs)
        self._logger.info(
            "DEBUG - Response %s %s | status: %s | body: %s",
            method.upper(),
            redact_signature(url),
            response.status_code,
            response.text,
        )
        return response


def new_session(debug: bool = False) -> requests.Session:
    session = LoggingSession() if debug else requests.Session()
    session.trust_env = False
    session.proxies.clear()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/x-www-form-urlencoded",
        }
    )
    return session


class RequestsTransport(TransportPort):
    """Send requests through a pooled :class:`requests.Session`.

    ``timeout`` bounds both connect and read; a timed out request surfaces
    as :class:`TransportError` like any other connection failure.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        self._session = session or new_session(debug=debug)
        self._timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        try:
            resp = self._session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {redact_signature(url)} failed: {exc}") from exc
        return TransportResponse(status=resp.status_code, body=resp.text)

    def close(self) -> None:
        self._session.close()
