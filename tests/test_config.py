from addicted.config import Settings, _optional_float


def test_total_supply_is_fixed():
    cfg = Settings()

    assert cfg.WEED_MINT_ADDRESS
    assert cfg.WEED_TOTAL_SUPPLY == 240_000_000


def test_overrides_are_per_instance():
    a = Settings(SOLANA_RPC_ENDPOINT="https://rpc-a.test")
    b = Settings(SOLANA_RPC_ENDPOINT="https://rpc-b.test")

    assert a.SOLANA_RPC_ENDPOINT != b.SOLANA_RPC_ENDPOINT


def test_optional_float():
    assert _optional_float("") is None
    assert _optional_float("  ") is None
    assert _optional_float("7.5") == 7.5
