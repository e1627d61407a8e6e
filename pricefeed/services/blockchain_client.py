from __future__ import annotations

import logging

import requests

from pricefeed.config import SETTINGS, Settings
from pricefeed.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_csv_text(settings: Settings = SETTINGS) -> str:
    """Download the blockchain.info market-price history as CSV text.

    Single attempt, no cache. Connection problems, timeouts and non-2xx
    responses are all reported as ``FetchError`` with the requests exception
    as its cause.
    """
    url = settings.price_history_url
    logger.info("Downloading price history from %s", url)
    try:
        resp = requests.get(url, timeout=settings.request_timeout_s)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError("Failed to fetch price history") from exc

    logger.debug("Received %s bytes (HTTP %s)", len(resp.content), resp.status_code)
    return resp.text
