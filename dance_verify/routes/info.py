"""
Free Routes
Service descriptor, style list, health and receipt lookup.
"""

import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from dance_verify import config
from dance_verify.services.payment_service import PRICES, X402_VERSION, format_price
from dance_verify.services.receipt_service import get_receipt_ledger
from dance_verify.services.styles import DANCE_STYLES, SPECIALTY

info_bp = Blueprint("info", __name__)


@info_bp.route("/", methods=["GET"])
def service_descriptor():
    """
    Service descriptor
    ---
    tags:
      - Info
    responses:
      200:
        description: Service name, pricing and x402 network details
    """
    return jsonify({
        "service": config.SERVICE_NAME,
        "version": config.SERVICE_VERSION,
        "description": "Agent-to-Agent Dance Verification Protocol",
        "status": "operational",
        "chain": current_app.config["NETWORK"],
        "wallet": current_app.config["WALLET_ADDRESS"],
        "endpoints": {
            "POST /verify/move": f"{format_price(PRICES['verify/move'])} - Verify a dance move",
            "POST /verify/video": f"{format_price(PRICES['verify/video'])} - Verify video content",
            "POST /verify/choreography": f"{format_price(PRICES['verify/choreography'])} - Full routine analysis",
            "POST /verify/attribution": f"{format_price(PRICES['verify/attribution'])} - Check move attribution",
            "GET /styles": "Free - List supported dance styles",
            "GET /receipt/<id>": "Free - Retrieve a verification receipt",
            "GET /health": "Free - Service health check",
        },
        "x402": {
            "version": X402_VERSION,
            "network": current_app.config["NETWORK"],
            "token": "USDC",
            "tokenAddress": current_app.config["USDC_ADDRESS"],
        },
    }), 200


@info_bp.route("/styles", methods=["GET"])
def list_styles():
    """
    List supported dance styles
    ---
    tags:
      - Info
    responses:
      200:
        description: Recognized style identifiers and specialty metadata
    """
    return jsonify({
        "styles": list(DANCE_STYLES),
        "count": len(DANCE_STYLES),
        "specialty": SPECIALTY,
    }), 200


@info_bp.route("/health", methods=["GET"])
def health():
    """
    Health check endpoint
    ---
    tags:
      - Health
    responses:
      200:
        description: Service is healthy
    """
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - current_app.config["STARTED_AT"],
        "receipts_issued": get_receipt_ledger().count(),
    }), 200


@info_bp.route("/receipt/<receipt_id>", methods=["GET"])
def get_receipt(receipt_id):
    """
    Retrieve a verification receipt
    ---
    tags:
      - Receipts
    parameters:
      - name: receipt_id
        in: path
        type: string
        required: true
    responses:
      200:
        description: The stored receipt
      404:
        description: Receipt not found
    """
    return jsonify(get_receipt_ledger().get(receipt_id).to_dict()), 200
