"""Wallet endpoints."""

from __future__ import annotations

from decimal import Decimal

from core.dispatcher import ApiRequestDispatcher
from core.models import Security
from spot.enums import UniversalTransferType

USER_UNIVERSAL_TRANSFER = "/sapi/v1/asset/transfer"
QUERY_USER_UNIVERSAL_TRANSFER_HISTORY = "/sapi/v1/asset/transfer"


class Wallet:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def user_universal_transfer(
        self,
        type: UniversalTransferType,
        asset: str,
        amount: Decimal | float,
        from_symbol: str | None = None,
        to_symbol: str | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Move ``amount`` of ``asset`` between the wallets named by ``type``.

        ``from_symbol``/``to_symbol`` are required when the source or target
        is an isolated margin account. Weight: 1.
        """
        return self._dispatcher.dispatch(
            USER_UNIVERSAL_TRANSFER,
            "POST",
            {
                "type": type,
                "asset": asset,
                "amount": amount,
                "fromSymbol": from_symbol,
                "toSymbol": to_symbol,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def query_user_universal_transfer_history(
        self,
        type: UniversalTransferType,
        start_time: int | None = None,
        end_time: int | None = None,
        current: int | None = None,
        size: int | None = None,
        from_symbol: str | None = None,
        to_symbol: str | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Weight: 1. ``size`` default 10, max 100."""
        return self._dispatcher.dispatch(
            QUERY_USER_UNIVERSAL_TRANSFER_HISTORY,
            "GET",
            {
                "type": type,
                "startTime": start_time,
                "endTime": end_time,
                "current": current,
                "size": size,
                "fromSymbol": from_symbol,
                "toSymbol": to_symbol,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body
