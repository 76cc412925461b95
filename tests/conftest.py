import json

import pytest
import requests

from addicted.app import create_app
from addicted.config import Settings

MINT = "E2gLkTXSbbTMmJM19xkquawun2ShJSi7G59A8c2PtbFa"


def make_response(status_code=200, body=None, raw=None, url="https://example.test"):
    """Real requests.Response so .ok / .json() / raise_for_status() behave as in production."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


@pytest.fixture
def test_settings():
    return Settings(
        WEED_MINT_ADDRESS=MINT,
        JUPITER_PRICE_URL="https://price.test/v4/price",
        SOLANA_RPC_ENDPOINT="https://rpc.test",
        HTTP_TIMEOUT_SECS=None,
        LOG_LEVEL="DEBUG",
        LOG_FILE="",
    )


@pytest.fixture
def price_body():
    return {"data": {MINT: {"id": MINT, "price": 0.0042}}}


@pytest.fixture
def supply_body():
    return {"jsonrpc": "2.0", "id": 1, "result": {"value": {"uiAmountString": "123456789.123"}}}


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings)
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def response_factory():
    return make_response
