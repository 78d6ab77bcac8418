"""Transport port definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True, slots=True)
class TransportResponse:
    status: int
    body: str


class TransportPort(Protocol):
    """Minimal HTTP contract used by the dispatcher."""

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | None,
    ) -> TransportResponse:
        """Issue one request and return its status and raw body.

        Timeouts and cancellation follow the implementation's own policy;
        failures are raised as :class:`core.errors.TransportError`.
        """

        ...
