"""Value objects shared by the signer, the dispatcher and the facades."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping, Sequence, Union

Scalar = Union[str, int, float, Decimal, bool, Enum]
ParamValue = Union[Scalar, Sequence[Scalar], None]
ParameterSet = Mapping[str, ParamValue]

API_KEY_HEADER = "X-MBX-APIKEY"
MAX_RECV_WINDOW_MS = 60000


class Security(str, Enum):
    """How an endpoint authenticates.

    ``NONE`` endpoints are fully public, ``USER_STREAM`` endpoints only need
    the API key header and ``SIGNED`` endpoints additionally carry a
    ``timestamp`` and an HMAC ``signature``.
    """

    NONE = "NONE"
    USER_STREAM = "USER_STREAM"
    SIGNED = "SIGNED"

    @property
    def needs_api_key(self) -> bool:
        return self is not Security.NONE


@dataclass(frozen=True, slots=True)
class Credentials:
    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Explicit configuration handed to :class:`ApiRequestDispatcher`."""

    base_url: str = "https://api.binance.com"
    credentials: Credentials = field(default_factory=Credentials)
    recv_window: int | None = None
    timestamp_offset_ms: int = 0


@dataclass(frozen=True, slots=True)
class ApiResponse:
    status: int
    body: str
