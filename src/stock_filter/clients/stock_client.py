"""
Upstream data supplier: fetch stock rows from an /api/stocks endpoint.

Whatever goes wrong on the way (connection, HTTP status, bad JSON) the caller
still gets a list of StockRecord: the static FALLBACK_STOCKS.
"""

import asyncio
import logging
from typing import Any, List

import aiohttp
import requests
from pydantic import ValidationError

from ..config import Settings
from ..core.models import StockRecord
from ..sample_data import FALLBACK_STOCKS, SAMPLE_STOCKS

logger = logging.getLogger(__name__)


def parse_stocks_payload(payload: Any) -> List[StockRecord]:
    """
    Turn an endpoint response into records.
    Accepts {"success": true, "data": [...]}, {"success": false, "fallback": [...]} or a bare list.
    """
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        key = "data" if payload.get("success") else "fallback"
        if key == "fallback":
            logger.warning("API failed, using fallback data: %s", payload.get("error"))
        rows = payload.get(key) or []
        if not isinstance(rows, list):
            logger.warning("Expected a list under %r, got %s; ignoring", key, type(rows).__name__)
            return []
    else:
        logger.warning("Unexpected payload type %s, ignoring", type(payload).__name__)
        return []

    records: List[StockRecord] = []
    for row in rows:
        try:
            records.append(StockRecord.model_validate(row))
        except ValidationError as e:
            # skip rows without a usable symbol/company
            logger.warning("Skipping malformed stock row %r: %s", row, e)
    return records


def fetch_stocks(url: str, timeout: float = 8) -> List[StockRecord]:
    """Blocking fetch via requests. Returns FALLBACK_STOCKS on any failure."""
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error fetching %s: %s", url, e)
        return list(FALLBACK_STOCKS)
    except requests.exceptions.RequestException as e:
        logger.error("Request to %s failed: %s", url, e)
        return list(FALLBACK_STOCKS)
    except ValueError as e:
        logger.error("Invalid JSON from %s: %s", url, e)
        return list(FALLBACK_STOCKS)
    return parse_stocks_payload(payload)


async def fetch_stocks_async(url: str, timeout: float = 8) -> List[StockRecord]:
    """aiohttp variant of fetch_stocks for use inside the server's event loop."""
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                payload = await response.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Request to %s failed: %r", url, e)
        return list(FALLBACK_STOCKS)
    except ValueError as e:
        logger.error("Invalid JSON from %s: %s", url, e)
        return list(FALLBACK_STOCKS)
    return parse_stocks_payload(payload)


def load_stocks(settings: Settings) -> List[StockRecord]:
    if settings.data_source == "sample":
        return list(SAMPLE_STOCKS)
    return fetch_stocks(settings.api_url, timeout=settings.request_timeout_seconds)


async def load_stocks_async(settings: Settings) -> List[StockRecord]:
    if settings.data_source == "sample":
        return list(SAMPLE_STOCKS)
    return await fetch_stocks_async(settings.api_url, timeout=settings.request_timeout_seconds)
