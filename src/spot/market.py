"""Public market endpoints and clock-drift measurement."""

from __future__ import annotations

import json
import logging
from typing import Callable, Sequence

from core.dispatcher import ApiRequestDispatcher, now_ms
from core.models import Security

logger = logging.getLogger(__name__)

PING = "/api/v3/ping"
SERVER_TIME = "/api/v3/time"
EXCHANGE_INFO = "/api/v3/exchangeInfo"


class Market:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def ping(self) -> str:
        """Test connectivity to the REST API. Weight: 1."""
        return self._dispatcher.dispatch(PING, "GET").body

    def server_time(self) -> str:
        """Return ``{"serverTime": <ms>}``. Weight: 1."""
        return self._dispatcher.dispatch(SERVER_TIME, "GET").body

    def exchange_info(
        self, symbol: str | None = None, symbols: Sequence[str] | None = None
    ) -> str:
        """Current exchange trading rules and symbol information. Weight: 10.

        ``symbols`` is sent as a JSON array, Binance rejects combining it
        with ``symbol``.
        """
        params = {
            "symbol": symbol,
            "symbols": json.dumps(list(symbols), separators=(",", ":")) if symbols else None,
        }
        return self._dispatcher.dispatch(
            EXCHANGE_INFO, "GET", params, security=Security.NONE
        ).body


def server_drift_ms(
    market: Market,
    *,
    safety_ms: int = 300,
    clock: Callable[[], int] | None = None,
) -> int:
    """Return the ``timestamp_offset_ms`` that aligns local time with Binance.

    The offset lags the server by ``safety_ms`` so requests never look like
    they come from the future.
    """
    local_ms = (clock or now_ms)()
    server_ms = int(json.loads(market.server_time())["serverTime"])
    drift = server_ms - local_ms
    offset = drift - safety_ms
    logger.info(
        "Binance timing: serverTime=%d localTime=%d drift_ms=%+d safety_ms=%d offset_ms=%+d",
        server_ms,
        local_ms,
        drift,
        safety_ms,
        offset,
    )
    return offset
