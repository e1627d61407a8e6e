from __future__ import annotations

import logging
import math
from typing import BinaryIO, Iterable, Sequence

import pandas as pd

from pricefeed.config import SETTINGS
from pricefeed.errors import WriteError
from pricefeed.models import DestinationRecord, SourceRecord

logger = logging.getLogger(__name__)

_OUTPUT_COLUMNS = ["symbol", "date", "price"]


def _format_price(price: float) -> str:
    if math.isnan(price):
        return "NaN"
    return f"{price:.6f}"


def into_quicken_data(symbol: str, prices: Iterable[SourceRecord]) -> list[DestinationRecord]:
    return [DestinationRecord(symbol=symbol, price=p.price, date=p.date) for p in prices]


def convert_to_mbtc(prices: Iterable[DestinationRecord]) -> list[DestinationRecord]:
    """Restate BTC prices in 1/1000 units under the milli symbol."""
    return [
        DestinationRecord(
            symbol=SETTINGS.milli_symbol,
            price=q.price / SETTINGS.milli_divisor,
            date=q.date,
        )
        for q in prices
    ]


def _to_frame(records: Sequence[DestinationRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "symbol": [r.symbol for r in records],
            "date": [r.date.strftime(SETTINGS.quicken_date_format) for r in records],
            "price": [_format_price(r.price) for r in records],
        },
        columns=_OUTPUT_COLUMNS,
    )


def write_records(sink: BinaryIO, records: Sequence[DestinationRecord]) -> None:
    """Write ``records`` to ``sink`` as headerless ``symbol,MM/DD/YYYY,price`` rows."""
    frame = _to_frame(records)
    try:
        frame.to_csv(sink, header=False, index=False, lineterminator="\n", encoding="utf-8")
    except OSError as exc:
        raise WriteError("Failed to write records") from exc
    logger.debug("Wrote %s records", len(frame))
