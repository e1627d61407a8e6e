from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    price_history_url: str = "https://api.blockchain.info/charts/market-price?format=csv"
    request_timeout_s: float = 30.0
    output_path: str = "out.csv"
    symbol: str = "BTC"
    milli_symbol: str = "miliBTC"
    milli_divisor: float = 1000.0
    date_format: str = "%Y-%m-%d"
    quicken_date_format: str = "%m/%d/%Y"


SETTINGS = Settings()
