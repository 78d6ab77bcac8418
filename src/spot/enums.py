"""Enumerated parameter values accepted by the Spot/Wallet endpoints."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class LiquidityRemovalType(str, Enum):
    SINGLE = "SINGLE"
    COMBINATION = "COMBINATION"


class LiquidityOperation(str, Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"


class SwapStatus(IntEnum):
    PENDING = 0
    SUCCESS = 1
    FAILED = 2


class FuturesType(IntEnum):
    USDT_MARGINED_FUTURES = 1
    COIN_MARGINED_FUTURES = 2


class FuturesTransferType(IntEnum):
    SPOT_TO_USDT_MARGINED_FUTURES = 1
    USDT_MARGINED_FUTURES_TO_SPOT = 2
    SPOT_TO_COIN_MARGINED_FUTURES = 3
    COIN_MARGINED_FUTURES_TO_SPOT = 4


class MarginTransferType(IntEnum):
    SPOT_TO_MARGIN = 1
    MARGIN_TO_SPOT = 2


class SubUserTransferType(IntEnum):
    TRANSFER_IN = 1
    TRANSFER_OUT = 2


class UniversalTransferAccountType(str, Enum):
    SPOT = "SPOT"
    USDT_FUTURE = "USDT_FUTURE"
    COIN_FUTURE = "COIN_FUTURE"


class UniversalTransferType(str, Enum):
    """Source/target wallet pair of a user universal transfer."""

    MAIN_C2C = "MAIN_C2C"
    MAIN_UMFUTURE = "MAIN_UMFUTURE"
    MAIN_CMFUTURE = "MAIN_CMFUTURE"
    MAIN_MARGIN = "MAIN_MARGIN"
    MAIN_MINING = "MAIN_MINING"
    C2C_MAIN = "C2C_MAIN"
    C2C_UMFUTURE = "C2C_UMFUTURE"
    C2C_MINING = "C2C_MINING"
    C2C_MARGIN = "C2C_MARGIN"
    UMFUTURE_MAIN = "UMFUTURE_MAIN"
    UMFUTURE_C2C = "UMFUTURE_C2C"
    UMFUTURE_MARGIN = "UMFUTURE_MARGIN"
    CMFUTURE_MAIN = "CMFUTURE_MAIN"
    CMFUTURE_MARGIN = "CMFUTURE_MARGIN"
    MARGIN_MAIN = "MARGIN_MAIN"
    MARGIN_UMFUTURE = "MARGIN_UMFUTURE"
    MARGIN_CMFUTURE = "MARGIN_CMFUTURE"
    MARGIN_MINING = "MARGIN_MINING"
    MARGIN_C2C = "MARGIN_C2C"
    MINING_MAIN = "MINING_MAIN"
    MINING_UMFUTURE = "MINING_UMFUTURE"
    MINING_C2C = "MINING_C2C"
    MINING_MARGIN = "MINING_MARGIN"
    MAIN_PAY = "MAIN_PAY"
    PAY_MAIN = "PAY_MAIN"
    ISOLATEDMARGIN_MARGIN = "ISOLATEDMARGIN_MARGIN"
    MARGIN_ISOLATEDMARGIN = "MARGIN_ISOLATEDMARGIN"
    ISOLATEDMARGIN_ISOLATEDMARGIN = "ISOLATEDMARGIN_ISOLATEDMARGIN"
