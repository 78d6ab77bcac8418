"""Move funds between two of the account's wallets.

    python examples/user_universal_transfer.py MAIN_C2C BNB 2.1
"""

from __future__ import annotations

import argparse
import logging
from decimal import Decimal

from config.logging import setup_logging
from config.settings import load_settings
from spot import SpotClient
from spot.enums import UniversalTransferType

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("type", choices=[t.value for t in UniversalTransferType])
    parser.add_argument("asset")
    parser.add_argument("amount", type=Decimal)
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(level=settings.LOG_LEVEL, mode=settings.LOG_MODE)

    client = SpotClient.from_settings(settings)
    result = client.wallet.user_universal_transfer(
        UniversalTransferType(args.type), args.asset, args.amount
    )
    logger.info(result)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
