# addicted/config.py
import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(raw: str) -> Optional[float]:
    raw = (raw or "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # Core
    PORT: int = int(os.getenv("PORT", "10000"))
    FLASK_ENV: str = os.getenv("FLASK_ENV", "production")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    # Token
    WEED_MINT_ADDRESS: str = os.getenv("WEED_MINT_ADDRESS", "E2gLkTXSbbTMmJM19xkquawun2ShJSi7G59A8c2PtbFa")
    WEED_TOTAL_SUPPLY: int = 240_000_000  # official tokenomics, fixed

    # Data APIs
    JUPITER_PRICE_URL: str = os.getenv("JUPITER_PRICE_URL", "https://price.jup.ag/v4/price")
    SOLANA_RPC_ENDPOINT: str = os.getenv("SOLANA_RPC_ENDPOINT", "https://api.mainnet-beta.solana.com")

    # Unset means requests waits indefinitely
    HTTP_TIMEOUT_SECS: Optional[float] = _optional_float(os.getenv("HTTP_TIMEOUT_SECS", ""))


settings = Settings()
