from __future__ import annotations

import argparse
import logging
from typing import Sequence

from pricefeed.config import SETTINGS
from pricefeed.errors import PriceFeedError
from pricefeed.logging_setup import setup_logger
from pricefeed.models import OutputMode
from pricefeed.services.pipeline import export_prices

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pricefeed",
        description="Export blockchain.info BTC price history as a Quicken import CSV",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--output", type=str, default=SETTINGS.output_path)

    subparsers = parser.add_subparsers(dest="mode", metavar="MODE", required=True)
    subparsers.add_parser(OutputMode.BTC.value, help="prices in BTC")
    subparsers.add_parser(OutputMode.MBTC.value, help="prices in 1/1000 BTC (miliBTC)")
    subparsers.add_parser(OutputMode.TEST.value, help="not implemented")
    return parser


def _log_error_chain(exc: BaseException) -> None:
    logger.error("%s", exc)
    cause = exc.__cause__
    while cause is not None:
        logger.error("because: %s", cause)
        cause = cause.__cause__


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.verbose)
    logger.debug("Args: %s", args)

    try:
        export_prices(OutputMode(args.mode), output_path=args.output)
    except PriceFeedError as exc:
        _log_error_chain(exc)
        logger.error("unrecoverable price export failure")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
