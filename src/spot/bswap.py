"""Binance Liquid Swap (BSwap) endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from core.dispatcher import ApiRequestDispatcher
from core.models import Security
from spot.enums import LiquidityOperation, LiquidityRemovalType, SwapStatus

LIST_ALL_SWAP_POOLS = "/sapi/v1/bswap/pools"
GET_LIQUIDITY_INFORMATION_OF_A_POOL = "/sapi/v1/bswap/liquidity"
ADD_LIQUIDITY = "/sapi/v1/bswap/liquidityAdd"
REMOVE_LIQUIDITY = "/sapi/v1/bswap/liquidityRemove"
GET_LIQUIDITY_OPERATION_RECORD = "/sapi/v1/bswap/liquidityOps"
REQUEST_QUOTE = "/sapi/v1/bswap/quote"
SWAP = "/sapi/v1/bswap/swap"
GET_SWAP_HISTORY = "/sapi/v1/bswap/swap"


class BSwap:
    """Swap pools, liquidity management and swaps.

    All methods return the raw JSON body.
    """

    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def list_all_swap_pools(self) -> str:
        """Metadata about all swap pools. Weight: 1."""
        return self._dispatcher.dispatch(LIST_ALL_SWAP_POOLS, "GET").body

    def get_liquidity_information_of_a_pool(
        self, pool_id: int | None = None, recv_window: int | None = None
    ) -> str:
        """Liquidity information and user share of a pool.

        Weight: 1 for one pool, 10 when ``pool_id`` is omitted.
        """
        return self._dispatcher.dispatch(
            GET_LIQUIDITY_INFORMATION_OF_A_POOL,
            "GET",
            {"poolId": pool_id, "recvWindow": recv_window},
            security=Security.SIGNED,
        ).body

    def add_liquidity(
        self,
        pool_id: int,
        asset: str,
        quantity: Decimal | float,
        recv_window: int | None = None,
    ) -> str:
        """Add liquidity to a pool. Weight: 2."""
        return self._dispatcher.dispatch(
            ADD_LIQUIDITY,
            "POST",
            {
                "poolId": pool_id,
                "asset": asset,
                "quantity": quantity,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def remove_liquidity(
        self,
        pool_id: int,
        type: LiquidityRemovalType,
        share_amount: Decimal | float,
        asset: Sequence[str] | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Remove liquidity from a pool. Weight: 2.

        ``asset`` is mandatory for ``SINGLE`` removal; each entry is sent as
        a separate ``asset`` parameter.
        """
        return self._dispatcher.dispatch(
            REMOVE_LIQUIDITY,
            "POST",
            {
                "poolId": pool_id,
                "type": type,
                "asset": list(asset) if asset else None,
                "shareAmount": share_amount,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def get_liquidity_operation_record(
        self,
        operation_id: int | None = None,
        pool_id: int | None = None,
        operation: LiquidityOperation | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Liquidity add/remove records. Weight: 2. ``limit`` default 500, max 1000."""
        return self._dispatcher.dispatch(
            GET_LIQUIDITY_OPERATION_RECORD,
            "GET",
            {
                "operationId": operation_id,
                "poolId": pool_id,
                "operation": operation,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def request_quote(
        self,
        quote_asset: str,
        base_asset: str,
        quote_qty: Decimal | float,
        recv_window: int | None = None,
    ) -> str:
        """Quote for swapping ``quote_asset`` into ``base_asset``. Weight: 2.

        The quote is for reference only; the executed price follows the
        pool's liquidity at swap time.
        """
        return self._dispatcher.dispatch(
            REQUEST_QUOTE,
            "GET",
            {
                "quoteAsset": quote_asset,
                "baseAsset": base_asset,
                "quoteQty": quote_qty,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def swap(
        self,
        quote_asset: str,
        base_asset: str,
        quote_qty: Decimal | float,
        recv_window: int | None = None,
    ) -> str:
        """Swap ``quote_asset`` for ``base_asset``. Weight: 2."""
        return self._dispatcher.dispatch(
            SWAP,
            "POST",
            {
                "quoteAsset": quote_asset,
                "baseAsset": base_asset,
                "quoteQty": quote_qty,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body

    def get_swap_history(
        self,
        swap_id: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        status: SwapStatus | None = None,
        quote_asset: str | None = None,
        base_asset: str | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Swap history. Weight: 2. ``limit`` default 3, max 100."""
        return self._dispatcher.dispatch(
            GET_SWAP_HISTORY,
            "GET",
            {
                "swapId": swap_id,
                "startTime": start_time,
                "endTime": end_time,
                "status": status,
                "quoteAsset": quote_asset,
                "baseAsset": base_asset,
                "limit": limit,
                "recvWindow": recv_window,
            },
            security=Security.SIGNED,
        ).body
