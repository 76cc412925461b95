# addicted/routes/token.py
"""
Token API Routes
----------------
JSON surface over the four data functions. Unlike the dashboard, these
report *why* a value is missing so callers can decide whether to retry:
  ok              -> 200
  unavailable     -> 502 (upstream failed or answered garbage)
  not_implemented -> 501
  bad arguments   -> 400
"""

from flask import Blueprint, current_app, jsonify, request

from addicted.services.jupiter import fetch_weed_price
from addicted.services.onchain import fetch_mint_burn_events, fetch_pack_distribution
from addicted.services.results import FetchStatus
from addicted.services.solana import fetch_token_supply

token_bp = Blueprint("token_bp", __name__)

STATUS_CODES = {
    FetchStatus.OK: 200,
    FetchStatus.UNAVAILABLE: 502,
    FetchStatus.NOT_IMPLEMENTED: 501,
}


def _settings():
    return current_app.config["SETTINGS"]


def _respond(result, body=None):
    if not result.ok:
        return jsonify(result.to_dict()), STATUS_CODES[result.status]
    return jsonify({"ok": True, **(body or {})}), 200


@token_bp.route("/api/token/price", methods=["GET"])
def token_price():
    cfg = _settings()
    result = fetch_weed_price(cfg)
    return _respond(result, {"mint": cfg.WEED_MINT_ADDRESS, "price": result.value})


@token_bp.route("/api/token/supply", methods=["GET"])
def token_supply():
    cfg = _settings()
    result = fetch_token_supply(cfg)
    body = {"mint": cfg.WEED_MINT_ADDRESS}
    if result.ok:
        body.update(result.value.to_dict())
    return _respond(result, body)


@token_bp.route("/api/token/mint-burn", methods=["GET"])
def token_mint_burn():
    """
    Query params:
      - limit (default 100, must be positive)
    """
    try:
        limit = int(request.args.get("limit", "100"))
    except ValueError:
        limit = 0
    if limit <= 0:
        return jsonify({"ok": False, "error": "limit must be a positive integer"}), 400
    result = fetch_mint_burn_events(limit)
    return _respond(result, result.value.to_dict() if result.ok else None)


@token_bp.route("/api/token/pack-distribution/<program_id>", methods=["GET"])
def token_pack_distribution(program_id: str):
    if not program_id.strip():
        return jsonify({"ok": False, "error": "program_id must be a non-empty string"}), 400
    result = fetch_pack_distribution(program_id.strip())
    return _respond(result, result.value.to_dict() if result.ok else None)
