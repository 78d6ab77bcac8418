"""List every BSwap pool; public endpoint, no credentials needed."""

from __future__ import annotations

import logging

from config.logging import setup_logging
from config.settings import load_settings
from core.errors import ConnectorError
from spot import SpotClient

logger = logging.getLogger(__name__)


def main() -> int:
    settings = load_settings()
    setup_logging(level=settings.LOG_LEVEL, mode=settings.LOG_MODE)
    client = SpotClient.from_settings(settings)
    try:
        logger.info(client.bswap.list_all_swap_pools())
    except ConnectorError as exc:
        logger.error("Request failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
