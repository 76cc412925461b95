# addicted/services/jupiter.py
"""
Jupiter price service.
Current $WEED USD price for the dashboard and /api/token/price.
"""

import math

import requests

from addicted.config import Settings, settings as default_settings
from addicted.services.results import ErrorKind, FetchResult
from addicted.utils.logger import get_logger

logger = get_logger(__name__)


def _extract_price(payload, mint: str) -> float:
    """
    Pull data[<mint>].price out of a Jupiter response.
    Raises ValueError/KeyError when the entry is missing or not a usable price.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise ValueError("response has no 'data' mapping")
    entry = payload["data"].get(mint)
    if not isinstance(entry, dict) or "price" not in entry:
        raise KeyError(f"no price entry for {mint}")

    raw = entry["price"]
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"price is not numeric: {raw!r}")
    price = float(raw)
    # zero is indistinguishable from "no market", so it counts as missing
    if not math.isfinite(price) or price <= 0:
        raise ValueError(f"price is not a positive number: {raw!r}")
    return price


def fetch_weed_price(settings: Settings = None) -> FetchResult:
    """Single GET against Jupiter. Never raises."""
    cfg = settings or default_settings
    mint = cfg.WEED_MINT_ADDRESS
    try:
        r = requests.get(
            cfg.JUPITER_PRICE_URL,
            params={"ids": mint},
            timeout=cfg.HTTP_TIMEOUT_SECS,
        )
        r.raise_for_status()
    except requests.HTTPError as e:
        code = e.response.status_code if e.response is not None else None
        logger.warning(f"Failed to fetch WEED price: HTTP {code}")
        return FetchResult.unavailable(ErrorKind.HTTP_STATUS, f"HTTP {code}", status_code=code)
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch WEED price: {e}")
        return FetchResult.unavailable(ErrorKind.TRANSPORT, str(e))

    try:
        return FetchResult.success(_extract_price(r.json(), mint))
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Failed to fetch WEED price: bad response: {e}")
        return FetchResult.unavailable(ErrorKind.MALFORMED, str(e))


def get_weed_price(settings: Settings = None):
    """Current price in USD, or None if unavailable."""
    return fetch_weed_price(settings).value
