"""Entry point wiring settings, transport and dispatcher into the facades."""

from __future__ import annotations

import logging

from adapters.transport.requests_transport import RequestsTransport
from config.settings import Settings, build_client_config
from core.dispatcher import ApiRequestDispatcher
from core.models import ClientConfig
from core.ports.transport import TransportPort
from spot.blvt import Blvt
from spot.bswap import BSwap
from spot.c2c import C2C
from spot.market import Market, server_drift_ms
from spot.sub_account import SubAccount
from spot.user_data_streams import UserDataStreams
from spot.wallet import Wallet

logger = logging.getLogger(__name__)


class SpotClient:
    """All endpoint groups sharing one :class:`ApiRequestDispatcher`."""

    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self.dispatcher = dispatcher
        self.market = Market(dispatcher)
        self.bswap = BSwap(dispatcher)
        self.blvt = Blvt(dispatcher)
        self.c2c = C2C(dispatcher)
        self.sub_account = SubAccount(dispatcher)
        self.user_data_streams = UserDataStreams(dispatcher)
        self.wallet = Wallet(dispatcher)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: TransportPort) -> "SpotClient":
        return cls(ApiRequestDispatcher(transport, config))

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: TransportPort | None = None
    ) -> "SpotClient":
        """Build a client from :class:`Settings`.

        With ``SYNC_TIME`` enabled the server clock is queried once and the
        measured drift becomes the timestamp offset of signed requests.
        """
        transport = transport or RequestsTransport(
            timeout=settings.HTTP_TIMEOUT, debug=settings.DEBUG_MODE
        )
        config = build_client_config(settings)
        if settings.SYNC_TIME:
            offset = server_drift_ms(
                Market(ApiRequestDispatcher(transport, config)),
                safety_ms=settings.SAFETY_MS,
            )
            config = build_client_config(settings, timestamp_offset_ms=offset)
        logger.info(
            "Spot client ready | base_url=%s recv_window=%s offset_ms=%+d",
            config.base_url,
            config.recv_window,
            config.timestamp_offset_ms,
        )
        return cls.from_config(config, transport)
