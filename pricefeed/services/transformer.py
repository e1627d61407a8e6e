from __future__ import annotations

import io
import logging
import re
from datetime import date, datetime

import pandas as pd

from pricefeed.config import SETTINGS
from pricefeed.errors import DecodeError
from pricefeed.models import SourceRecord

logger = logging.getLogger(__name__)

_COLUMNS = ("date", "price")

_PRICE_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def _read_headerless_csv(text: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(io.StringIO(text), header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=list(_COLUMNS))
    except pd.errors.ParserError as exc:
        raise DecodeError("Malformed CSV row in price history") from exc

    if df.shape[1] != len(_COLUMNS):
        raise DecodeError(f"Expected {len(_COLUMNS)} columns, found {df.shape[1]}")
    df.columns = list(_COLUMNS)
    return df


def _is_missing(value: object) -> bool:
    return not isinstance(value, str) or value == ""


def _parse_date(raw: str) -> date:
    # The feed sometimes appends a time of day; only the first token is a date.
    tokens = raw.split()
    if not tokens:
        raise DecodeError("unable to extract date")
    try:
        return datetime.strptime(tokens[0], SETTINGS.date_format).date()
    except ValueError as exc:
        raise DecodeError(f"unparseable date {tokens[0]!r}") from exc


def _parse_price(raw: str) -> float:
    # float() alone also takes padding, underscores and non-ASCII digits.
    if not _PRICE_RE.fullmatch(raw):
        raise DecodeError(f"unparseable price {raw!r}")
    try:
        return float(raw)
    except ValueError as exc:
        raise DecodeError(f"unparseable price {raw!r}") from exc


def load_price_history(csv_text: str) -> list[SourceRecord]:
    """Decode the headerless ``date,price`` feed into ``SourceRecord`` objects.

    Every row must decode; the first bad one aborts the whole batch.
    """
    df = _read_headerless_csv(csv_text)

    records: list[SourceRecord] = []
    for row_num, (raw_date, raw_price) in enumerate(
        zip(df["date"].tolist(), df["price"].tolist()), start=1
    ):
        if _is_missing(raw_date) or _is_missing(raw_price):
            raise DecodeError(f"Row {row_num}: expected date and price columns")
        try:
            records.append(SourceRecord(date=_parse_date(raw_date), price=_parse_price(raw_price)))
        except DecodeError as exc:
            raise DecodeError(f"Row {row_num}: {exc}") from exc

    logger.debug("Decoded %s price records", len(records))
    return records
