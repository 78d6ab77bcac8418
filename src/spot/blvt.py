"""Binance Leveraged Tokens (BLVT) endpoints."""

from __future__ import annotations

from decimal import Decimal

from core.dispatcher import ApiRequestDispatcher
from core.models import Security

GET_BLVT_INFO = "/sapi/v1/blvt/tokenInfo"
SUBSCRIBE_BLVT = "/sapi/v1/blvt/subscribe"
QUERY_SUBSCRIPTION_RECORD = "/sapi/v1/blvt/subscribe/record"
REDEEM_BLVT = "/sapi/v1/blvt/redeem"
QUERY_REDEMPTION_RECORD = "/sapi/v1/blvt/redeem/record"
GET_BLVT_USER_LIMIT_INFO = "/sapi/v1/blvt/userLimit"


class Blvt:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def get_blvt_info(self, token_name: str | None = None) -> str:
        """Token details; only needs the API key. Weight: 1."""
        return self._dispatcher.dispatch(
            GET_BLVT_INFO,
            "GET",
            {"tokenName": token_name},
            security=Security.USER_STREAM,
        ).body

    def subscribe_blvt(
        self, token_name: str, cost: Decimal | float, recv_window: int | None = None
    ) -> str:
        """Subscribe ``cost`` USDT worth of ``token_name``. Weight: 1."""
        return self._dispatcher.dispatch(
            SUBSCRIBE_BLVT,
            "POST",
            {"tokenName": token_name, "cost": cost, "recvWindow": recv_window},
            security=Security.SIGNED,
        ).body

    def query_subscription_record(
        self,
        token_name: str | None = None,
        id: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Weight: 1. Only the last 30 days are available."""
        return self._dispatcher.dispatch(
            QUERY_SUBSCRIPTION_RECORD,
            "GET",
            {
                "tokenName": token_name,
                "id": id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def redeem_blvt(
        self, token_name: str, amount: Decimal | float, recv_window: int | None = None
    ) -> str:
        """Weight: 1."""
        return self._dispatcher.dispatch(
            REDEEM_BLVT,
            "POST",
            {"tokenName": token_name, "amount": amount, "recvWindow": recv_window},
            security=Security.SIGNED,
        ).body

    def query_redemption_record(
        self,
        token_name: str | None = None,
        id: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._dispatcher.dispatch(
            QUERY_REDEMPTION_RECORD,
            "GET",
            {
                "tokenName": token_name,
                "id": id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def get_blvt_user_limit_info(
        self, token_name: str | None = None, recv_window: int | None = None
    ) -> str:
        return self._dispatcher.dispatch(
            GET_BLVT_USER_LIMIT_INFO,
            "GET",
            {"tokenName": token_name, "recvWindow": recv_window},
            security=Security.SIGNED,
        ).body
