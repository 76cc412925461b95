# addicted/app.py
from flask import Flask, jsonify
from flask_cors import CORS

# ---- Core Config ----
from addicted.config import settings as default_settings
from addicted.routes.dashboard import dashboard_bp
from addicted.routes.token import token_bp
from addicted.utils.logger import configure_logging


def create_app(settings=None):
    cfg = settings or default_settings
    configure_logging(cfg)

    # ---- Initialize Flask ----
    app = Flask(__name__)
    app.config["SETTINGS"] = cfg
    CORS(app)

    @app.route("/healthz")
    def healthz():
        return jsonify({"ok": True})

    # ---- ENV Diagnostic ----
    @app.route("/test-env")
    def test_env():
        """Which endpoints are configured, without exposing full values."""
        return jsonify({
            "mint": bool(cfg.WEED_MINT_ADDRESS),
            "jupiter": bool(cfg.JUPITER_PRICE_URL),
            "solana_rpc": bool(cfg.SOLANA_RPC_ENDPOINT),
            "solana_rpc_is_public": "api.mainnet-beta.solana.com" in cfg.SOLANA_RPC_ENDPOINT,
            "http_timeout": cfg.HTTP_TIMEOUT_SECS,
        })

    # ---- Blueprints ----
    app.register_blueprint(dashboard_bp, url_prefix="")
    app.register_blueprint(token_bp, url_prefix="")

    return app


app = create_app()

# ---- Run Server ----
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=default_settings.PORT)
