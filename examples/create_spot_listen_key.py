"""Create a spot user-data listen key and print it."""

from __future__ import annotations

import json
import logging

from config.logging import setup_logging
from config.settings import load_settings
from spot import SpotClient

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(level=settings.LOG_LEVEL, mode=settings.LOG_MODE)
    client = SpotClient.from_settings(settings)
    listen_key = json.loads(client.user_data_streams.create_spot_listen_key())["listenKey"]
    logger.info("listenKey=%s", listen_key)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
