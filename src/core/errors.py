"""Exception hierarchy raised by the request pipeline."""

from __future__ import annotations


class ConnectorError(Exception):
    """Base class for every error raised by the connector."""


class ValidationError(ConnectorError, ValueError):
    """A caller-supplied value breaks a documented constraint.

    Raised before anything is sent over the network.
    """


class TransportError(ConnectorError):
    """The underlying HTTP send failed (DNS, connection refused, timeout)."""


class ApiError(ConnectorError):
    """Binance answered with a status outside ``[200, 300)``.

    The body is kept verbatim; error payloads differ between endpoint
    families so interpreting them is left to the caller.
    """

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP {status}: {body}")
        self.status = status
        self.body = body

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500
