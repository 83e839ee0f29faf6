"""
Verification Routes (paid)
Every route runs the x402 gate first; field validation only happens for
callers that have paid.
"""

from flask import Blueprint, jsonify, request

from dance_verify.services import verification_service
from dance_verify.services.payment_service import x402_required
from dance_verify.services.receipt_service import get_receipt_ledger

verify_bp = Blueprint("verify", __name__, url_prefix="/verify")


def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@verify_bp.route("/move", methods=["POST"])
@x402_required("verify/move")
def verify_move():
    """
    Verify a dance move
    ---
    tags:
      - Verify
    parameters:
      - in: header
        name: X-402-Payment
        type: string
        description: JSON (or base64 JSON) payment proof with txHash and/or signature
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - style
            - move_name
          properties:
            style:
              type: string
            move_name:
              type: string
            claimed_creator:
              type: string
            description:
              type: string
            video_url:
              type: string
    responses:
      200:
        description: Receipt minted
      400:
        description: Missing fields or unrecognized style
      402:
        description: Payment required or invalid
    """
    receipt = verification_service.verify_move(get_receipt_ledger(), _body())
    return jsonify(receipt.to_dict()), 200


@verify_bp.route("/video", methods=["POST"])
@x402_required("verify/video")
def verify_video():
    """
    Verify video content
    ---
    tags:
      - Verify
    parameters:
      - in: header
        name: X-402-Payment
        type: string
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - video_url
          properties:
            video_url:
              type: string
            style:
              type: string
            title:
              type: string
            claimed_creators:
              type: array
              items:
                type: string
            description:
              type: string
    responses:
      200:
        description: Receipt minted
      400:
        description: Missing video_url
      402:
        description: Payment required or invalid
    """
    receipt = verification_service.verify_video(get_receipt_ledger(), _body())
    return jsonify(receipt.to_dict()), 200


@verify_bp.route("/choreography", methods=["POST"])
@x402_required("verify/choreography")
def verify_choreography():
    """
    Full routine analysis
    ---
    tags:
      - Verify
    parameters:
      - in: header
        name: X-402-Payment
        type: string
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            video_url:
              type: string
            moves:
              type: array
              items:
                type: string
            style:
              type: string
            title:
              type: string
            choreographer:
              type: string
            duration_seconds:
              type: number
    responses:
      200:
        description: Receipt minted
      400:
        description: Neither video_url nor moves supplied
      402:
        description: Payment required or invalid
    """
    receipt = verification_service.verify_choreography(get_receipt_ledger(), _body())
    return jsonify(receipt.to_dict()), 200


@verify_bp.route("/attribution", methods=["POST"])
@x402_required("verify/attribution")
def verify_attribution():
    """
    Check move attribution
    ---
    tags:
      - Verify
    parameters:
      - in: header
        name: X-402-Payment
        type: string
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - move_name
            - claimed_creator
          properties:
            move_name:
              type: string
            claimed_creator:
              type: string
            style:
              type: string
            year:
              type: integer
            evidence_urls:
              type: array
              items:
                type: string
    responses:
      200:
        description: Receipt minted
      400:
        description: Missing fields
      402:
        description: Payment required or invalid
    """
    receipt = verification_service.verify_attribution(get_receipt_ledger(), _body())
    return jsonify(receipt.to_dict()), 200
