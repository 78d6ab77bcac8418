"""Single-request pipeline shared by every endpoint facade.

Each call walks ``BUILD -> SIGN -> SEND -> RECEIVE -> MAP_RESULT`` once and
keeps no state between calls, so one dispatcher can serve concurrent callers
as long as its transport is thread-safe.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from core.errors import ApiError, TransportError, ValidationError
from core.logging_utils import mask_key, redact_signature
from core.models import (
    API_KEY_HEADER,
    MAX_RECV_WINDOW_MS,
    ApiResponse,
    ClientConfig,
    Credentials,
    ParameterSet,
    Security,
)
from core.ports.logger import LoggerPort
from core.ports.transport import TransportPort
from core.signing import RequestSigner, canonicalize

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def _check_recv_window(value: Any) -> int:
    """Return ``value`` as an int, accepting decimal digit strings."""
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"recvWindow must be an integer, got {value!r}")
    if value <= 0 or value > MAX_RECV_WINDOW_MS:
        raise ValidationError(
            f"recvWindow must be in (0, {MAX_RECV_WINDOW_MS}], got {value}"
        )
    return value


class ApiRequestDispatcher:
    """Turn an endpoint invocation into exactly one HTTP request.

    Parameters
    ----------
    transport:
        Object implementing :class:`core.ports.transport.TransportPort`.
    config:
        Base URL, default credentials, default ``recvWindow`` and the
        timestamp offset applied to signed calls.
    clock:
        Callable returning the current epoch time in milliseconds.
    log:
        Anything exposing ``debug/info/warning/error``; defaults to the
        module logger.
    """

    def __init__(
        self,
        transport: TransportPort,
        config: ClientConfig | None = None,
        *,
        clock: Callable[[], int] = now_ms,
        log: LoggerPort | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or ClientConfig()
        self._clock = clock
        self._log = log or logger

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Pipeline steps
    def build(
        self,
        params: ParameterSet | None,
        security: Security,
    ) -> dict[str, Any]:
        """Return a fresh parameter dict with injected fields.

        The caller's mapping is never modified. The configured default
        ``recvWindow`` only applies to signed calls; an explicit one is
        validated whatever the security.
        """

        merged: dict[str, Any] = dict(params or {})
        if (
            security is Security.SIGNED
            and merged.get("recvWindow") is None
            and self._config.recv_window is not None
        ):
            merged["recvWindow"] = self._config.recv_window
        if merged.get("recvWindow") is not None:
            merged["recvWindow"] = _check_recv_window(merged["recvWindow"])
        if security is Security.SIGNED:
            merged.pop("timestamp", None)
            merged.pop("signature", None)
            merged["timestamp"] = self._clock() + self._config.timestamp_offset_ms
        return merged

    def _resolve_credentials(
        self, credentials: Credentials | None, security: Security
    ) -> Credentials:
        creds = credentials or self._config.credentials
        if security.needs_api_key and not creds.api_key:
            raise ValidationError(f"An API key is required for {security.value} endpoints")
        if security is Security.SIGNED and not creds.api_secret:
            raise ValidationError("An API secret is required for SIGNED endpoints")
        return creds

    def build_url(self, path: str, query: str) -> str:
        url = self._config.base_url.rstrip("/") + path
        return f"{url}?{query}" if query else url

    # ------------------------------------------------------------------
    def dispatch(
        self,
        path: str,
        method: str = "GET",
        params: ParameterSet | None = None,
        *,
        security: Security = Security.NONE,
        credentials: Credentials | None = None,
    ) -> ApiResponse:
        """Send one request and return the raw response.

        ``recvWindow`` in ``params`` may be an int or a string of digits and
        must lie in ``(0, 60000]``.

        Raises
        ------
        ValidationError
            A parameter or credential is invalid; nothing was sent.
        TransportError
            The transport could not complete the request.
        ApiError
            Binance answered with a non-2xx status.
        """

        method = method.upper()
        creds = self._resolve_credentials(credentials, security)
        payload = self.build(params, security)

        if security is Security.SIGNED:
            query = RequestSigner(creds.api_secret).signed_query(payload)
        else:
            query = canonicalize(payload)

        headers: dict[str, str] = {}
        if security.needs_api_key:
            headers[API_KEY_HEADER] = creds.api_key

        url = self.build_url(path, query)
        self._log.debug(
            "Request %s %s | security=%s | %s=%s",
            method,
            redact_signature(url),
            security.value,
            API_KEY_HEADER,
            mask_key(headers.get(API_KEY_HEADER)),
        )

        try:
            response = self._transport.send(method, url, headers, None)
        except TransportError as exc:
            self._log.error("Transport failure for %s %s: %s", method, path, exc)
            raise

        self._log.debug("Response %s %s | status=%d", method, path, response.status)
        if not 200 <= response.status < 300:
            self._log.warning(
                "Binance error for %s %s | status=%d body=%s",
                method,
                path,
                response.status,
                response.body,
            )
            raise ApiError(response.status, response.body)
        return ApiResponse(status=response.status, body=response.body)
