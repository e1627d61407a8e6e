from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class OutputMode(str, Enum):
    """Selects how prices are labelled and scaled in the Quicken export."""

    BTC = "btc"
    MBTC = "mbtc"
    TEST = "test"


@dataclass(frozen=True)
class SourceRecord:
    """One row of the blockchain.info market-price feed."""

    date: date
    price: float


@dataclass(frozen=True)
class DestinationRecord:
    """One row of the Quicken price import file."""

    symbol: str
    price: float
    date: date
