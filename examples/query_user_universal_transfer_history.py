"""Show the history of one kind of universal transfer.

    python examples/query_user_universal_transfer_history.py MAIN_C2C
"""

from __future__ import annotations

import argparse
import logging

from config.logging import setup_logging
from config.settings import load_settings
from spot import SpotClient
from spot.enums import UniversalTransferType

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("type", choices=[t.value for t in UniversalTransferType])
    parser.add_argument("--size", type=int, default=None)
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(level=settings.LOG_LEVEL, mode=settings.LOG_MODE)

    client = SpotClient.from_settings(settings)
    logger.info(
        client.wallet.query_user_universal_transfer_history(
            UniversalTransferType(args.type), size=args.size
        )
    )


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
