"""
Dance Verify - Flask application
Agent-to-agent dance verification, paid per request via x402.
"""

import logging
import time

from flask import Flask, jsonify
from flasgger import Swagger
from flask_cors import CORS

from dance_verify import config
from dance_verify.errors import DanceVerifyError, PaymentRequired
from dance_verify.routes.info import info_bp
from dance_verify.routes.verify import verify_bp
from dance_verify.services.payment_service import PaymentGate, payment_required_headers
from dance_verify.services.receipt_service import ReceiptLedger

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)

    # Configuration
    app.config.from_mapping(config.load_config())
    if test_config:
        app.config.from_mapping(test_config)
    app.config["STARTED_AT"] = time.monotonic()

    # Process-lifetime stores: start empty, never persisted
    app.extensions["payment_gate"] = PaymentGate(
        payee=app.config["WALLET_ADDRESS"],
        network=app.config["NETWORK"],
        chain_id=app.config["CHAIN_ID"],
        token=app.config["USDC_ADDRESS"],
    )
    app.extensions["receipt_ledger"] = ReceiptLedger(
        verifier=app.config["WALLET_ADDRESS"],
        chain=app.config["NETWORK"],
        chain_id=app.config["CHAIN_ID"],
    )

    # --- Error handling -------------------------------------------------
    @app.errorhandler(DanceVerifyError)
    def handle_dance_verify_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        if isinstance(error, PaymentRequired):
            for name, value in payment_required_headers(error.requirements).items():
                response.headers[name] = value
        return response

    # Browser clients on other origins
    CORS(app)

    # Initialize Swagger
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": "apispec_1",
                "route": "/apispec_1.json",
                "rule_filter": lambda rule: True,  # all in
                "model_filter": lambda tag: True,  # all in
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/",
    }
    Swagger(app, config=swagger_config)

    # Register Blueprints
    app.register_blueprint(info_bp)
    app.register_blueprint(verify_bp)

    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    wallet = app.config["WALLET_ADDRESS"]
    logger.info(
        "%s operational on port %s | chain %s (%s) | wallet %s...%s | x402 payments enabled",
        config.SERVICE_NAME, app.config["PORT"], app.config["NETWORK"],
        app.config["CHAIN_ID"], wallet[:10], wallet[-8:],
    )
    app.run(host="0.0.0.0", port=app.config["PORT"], threaded=True)


if __name__ == "__main__":
    main()
