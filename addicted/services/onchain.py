# addicted/services/onchain.py
"""
On-chain activity for $WEED: mint/burn history and seed-pack distribution.

Neither is built yet. Both need transaction-level data: signatures for the
mint (or the openSeedPack program) followed by getTransaction on each, and
for packs, parsing the program logs to map seed numbers back to strains.
Providers such as Helius or QuickNode expose token-activity endpoints that
make this cheaper than raw RPC.

Until then both return an explicit NOT_IMPLEMENTED result, whatever the
arguments, so callers can tell "not built" apart from "upstream had no data".
MintBurnEvents and PackDistribution are the shapes the finished versions
will put in FetchResult.value.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from addicted.services.results import FetchResult


@dataclass
class MintBurnEvents:
    # parallel lists, same length, ordered by timestamp ascending
    timestamps: List[int] = field(default_factory=list)  # ms since epoch
    mints: List[float] = field(default_factory=list)
    burns: List[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"timestamps": self.timestamps, "mints": self.mints, "burns": self.burns}


@dataclass
class PackDistribution:
    counts: Dict[str, int] = field(default_factory=dict)  # strain label -> packs opened
    total: int = 0

    def to_dict(self) -> dict:
        return {"counts": self.counts, "total": self.total}


def fetch_mint_burn_events(limit: int = 100) -> FetchResult:
    return FetchResult.not_implemented("mint/burn event history is not available yet")


def get_mint_burn_events(limit: int = 100):
    """MintBurnEvents for the last `limit` transactions, or None."""
    return fetch_mint_burn_events(limit).value


def fetch_pack_distribution(program_id: str) -> FetchResult:
    return FetchResult.not_implemented("pack distribution is not available yet")


def get_pack_distribution(program_id: str):
    """PackDistribution for the given openSeedPack program, or None."""
    return fetch_pack_distribution(program_id).value
