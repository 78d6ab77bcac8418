"""Binance Spot, Wallet and Sub-account REST endpoint groups."""

from spot.blvt import Blvt
from spot.bswap import BSwap
from spot.c2c import C2C
from spot.client import SpotClient
from spot.market import Market
from spot.sub_account import SubAccount
from spot.user_data_streams import UserDataStreams
from spot.wallet import Wallet

__all__ = [
    "BSwap",
    "Blvt",
    "C2C",
    "Market",
    "SpotClient",
    "SubAccount",
    "UserDataStreams",
    "Wallet",
]
