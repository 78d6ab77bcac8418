"""C2C (peer-to-peer) endpoints."""

from __future__ import annotations

from core.dispatcher import ApiRequestDispatcher
from core.models import Security
from spot.enums import Side

GET_C2C_TRADE_HISTORY = "/sapi/v1/c2c/orderMatch/listUserOrderHistory"


class C2C:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def get_c2c_trade_history(
        self,
        trade_type: Side,
        start_timestamp: int | None = None,
        end_timestamp: int | None = None,
        page: int | None = None,
        rows: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """C2C trade history, last 30 days by default. Weight: 1.

        ``rows`` defaults to 100 and is capped at 100 by Binance.
        """
        return self._dispatcher.dispatch(
            GET_C2C_TRADE_HISTORY,
            "GET",
            {
                "tradeType": trade_type,
                "startTimestamp": start_timestamp,
                "endTimestamp": end_timestamp,
                "page": page,
                "rows": rows,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body
