from __future__ import annotations

import logging
from pathlib import Path

from pricefeed.config import SETTINGS, Settings
from pricefeed.errors import ModeNotImplementedError, WriteError
from pricefeed.models import DestinationRecord, OutputMode
from pricefeed.services.blockchain_client import fetch_csv_text
from pricefeed.services.quicken import convert_to_mbtc, into_quicken_data, write_records
from pricefeed.services.transformer import load_price_history

logger = logging.getLogger(__name__)


def build_quicken_prices(mode: OutputMode, settings: Settings = SETTINGS) -> list[DestinationRecord]:
    if mode is OutputMode.TEST:
        raise ModeNotImplementedError("no test command")

    csv_text = fetch_csv_text(settings)
    prices = load_price_history(csv_text)
    records = into_quicken_data(settings.symbol, prices)

    if mode is OutputMode.MBTC:
        records = convert_to_mbtc(records)

    logger.info("Prepared %s %s records", len(records), mode.value)
    return records


def export_prices(
    mode: OutputMode, output_path: str | Path | None = None, settings: Settings = SETTINGS
) -> Path:
    """Run the whole pipeline and write the Quicken CSV.

    All records are built before the output file is opened, so a fetch or
    decode failure leaves any existing file untouched.
    """
    records = build_quicken_prices(mode, settings)

    path = Path(output_path or settings.output_path)
    try:
        with path.open("wb") as handle:
            write_records(handle, records)
    except WriteError:
        raise
    except OSError as exc:
        raise WriteError(f"Failed to write {path}") from exc

    logger.info("Wrote %s", path)
    return path
