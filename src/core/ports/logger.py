"""Logging capability required by the core."""

from __future__ import annotations

from typing import Any, Protocol


class LoggerPort(Protocol):
    """Subset of :class:`logging.Logger` the dispatcher relies on."""

    def debug(self, msg: str, *args: Any) -> None:
        ...

    def info(self, msg: str, *args: Any) -> None:
        ...

    def warning(self, msg: str, *args: Any) -> None:
        ...

    def error(self, msg: str, *args: Any) -> None:
        ...
