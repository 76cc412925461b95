# addicted/services/solana.py
"""
Solana JSON-RPC supply service.

Circulating supply comes from `getTokenSupply`; the total is the fixed
240M from the official tokenomics and is never read from the node.

Some public RPC providers reject POSTs at the default endpoint. Point
SOLANA_RPC_ENDPOINT at a dedicated provider (QuickNode, Helius, ...) then.
"""

from dataclasses import dataclass

import requests

from addicted.config import Settings, settings as default_settings
from addicted.services.results import ErrorKind, FetchResult
from addicted.utils.logger import get_logger

logger = get_logger(__name__)

HDR = {"Content-Type": "application/json"}


class RpcHTTPError(Exception):
    """Non-2xx answer from the RPC endpoint."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


@dataclass(frozen=True)
class SupplyInfo:
    total: int
    supply: float

    def to_dict(self) -> dict:
        return {"total": self.total, "supply": self.supply}


def build_token_supply_request(mint: str) -> dict:
    return {"jsonrpc": "2.0", "id": 1, "method": "getTokenSupply", "params": [mint]}


def _extract_ui_amount(payload) -> float:
    if isinstance(payload, dict) and payload.get("error"):
        err = payload["error"]
        msg = err.get("message") if isinstance(err, dict) else err
        raise ValueError(f"rpc error: {msg}")
    amount = payload["result"]["value"]["uiAmountString"]
    if not isinstance(amount, str):
        raise TypeError(f"uiAmountString is not a string: {amount!r}")
    return float(amount)


def fetch_token_supply(settings: Settings = None) -> FetchResult:
    """Single getTokenSupply POST. Never raises."""
    cfg = settings or default_settings
    payload = build_token_supply_request(cfg.WEED_MINT_ADDRESS)
    try:
        r = requests.post(
            cfg.SOLANA_RPC_ENDPOINT,
            headers=HDR,
            json=payload,
            timeout=cfg.HTTP_TIMEOUT_SECS,
        )
        if not r.ok:
            raise RpcHTTPError(r.status_code)
    except RpcHTTPError as e:
        logger.warning(f"Failed to fetch token supply: {e}")
        return FetchResult.unavailable(ErrorKind.HTTP_STATUS, str(e), status_code=e.status_code)
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch token supply: {e}")
        return FetchResult.unavailable(ErrorKind.TRANSPORT, str(e))

    try:
        supply = _extract_ui_amount(r.json())
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Failed to fetch token supply: bad response: {e!r}")
        return FetchResult.unavailable(ErrorKind.MALFORMED, repr(e))
    return FetchResult.success(SupplyInfo(total=cfg.WEED_TOTAL_SUPPLY, supply=supply))


def get_token_supply(settings: Settings = None):
    """SupplyInfo(total, supply), or None if unavailable."""
    return fetch_token_supply(settings).value


def get_circulating_supply(settings: Settings = None):
    """Just the circulating number, the shape the dashboard needs."""
    info = get_token_supply(settings)
    return info.supply if info is not None else None
