"""Listen-key management for spot, margin and isolated margin user streams.

A listen key stays valid for 60 minutes; pinging extends it, closing
invalidates it. These endpoints only need the API key header.
"""

from __future__ import annotations

from core.dispatcher import ApiRequestDispatcher
from core.models import Security

SPOT_USER_DATA_STREAM = "/api/v3/userDataStream"
MARGIN_USER_DATA_STREAM = "/sapi/v1/userDataStream"
ISOLATED_MARGIN_USER_DATA_STREAM = "/sapi/v1/userDataStream/isolated"


class UserDataStreams:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _call(self, path: str, method: str, params: dict | None = None) -> str:
        return self._dispatcher.dispatch(
            path, method, params, security=Security.USER_STREAM
        ).body

    # ------------------------------------------------------------------
    # Spot
    def create_spot_listen_key(self) -> str:
        return self._call(SPOT_USER_DATA_STREAM, "POST")

    def ping_spot_listen_key(self, listen_key: str) -> str:
        return self._call(SPOT_USER_DATA_STREAM, "PUT", {"listenKey": listen_key})

    def close_spot_listen_key(self, listen_key: str) -> str:
        return self._call(SPOT_USER_DATA_STREAM, "DELETE", {"listenKey": listen_key})

    # ------------------------------------------------------------------
    # Cross margin
    def create_margin_listen_key(self) -> str:
        return self._call(MARGIN_USER_DATA_STREAM, "POST")

    def ping_margin_listen_key(self, listen_key: str) -> str:
        return self._call(MARGIN_USER_DATA_STREAM, "PUT", {"listenKey": listen_key})

    def close_margin_listen_key(self, listen_key: str) -> str:
        return self._call(MARGIN_USER_DATA_STREAM, "DELETE", {"listenKey": listen_key})

    # ------------------------------------------------------------------
    # Isolated margin
    def create_isolated_margin_listen_key(self, symbol: str) -> str:
        return self._call(ISOLATED_MARGIN_USER_DATA_STREAM, "POST", {"symbol": symbol})

    def ping_isolated_margin_listen_key(self, symbol: str, listen_key: str) -> str:
        return self._call(
            ISOLATED_MARGIN_USER_DATA_STREAM,
            "PUT",
            {"symbol": symbol, "listenKey": listen_key},
        )

    def close_isolated_margin_listen_key(self, symbol: str, listen_key: str) -> str:
        return self._call(
            ISOLATED_MARGIN_USER_DATA_STREAM,
            "DELETE",
            {"symbol": symbol, "listenKey": listen_key},
        )
