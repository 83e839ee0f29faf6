"""
Payment Gate - x402
Gates protected endpoints behind a payment proof header and rejects replays.

Only the proof shape and single use of its txHash are checked here; the
on-chain transaction itself is not verified.
"""

import json
import logging
import threading
import time
from decimal import Decimal
from functools import wraps
from types import MappingProxyType

from flask import current_app, request

from dance_verify import config
from dance_verify.errors import PaymentInvalid, PaymentRequired
from dance_verify.models.payment import PaymentProof

logger = logging.getLogger(__name__)

X402_VERSION = "1"
PAYMENT_HEADERS = ("X-402-Payment", "X-Payment")

# Pricing in USDC
PRICES = MappingProxyType({
    "verify/move": Decimal("0.001"),
    "verify/video": Decimal("0.01"),
    "verify/choreography": Decimal("0.05"),
    "verify/attribution": Decimal("0.005"),
})
DEFAULT_PRICE = Decimal("0.001")


def price_for(endpoint):
    return PRICES.get(endpoint, DEFAULT_PRICE)


def to_token_units(price):
    """Scale a USDC price to the token's smallest unit, truncating."""
    return int(price * (10 ** config.USDC_DECIMALS))


def format_price(price):
    return f"{price} USDC"


class UsedPaymentRegistry:
    """txHash -> first-use time (epoch ms). Grows for the life of the process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._used = {}

    def claim(self, tx_hash):
        """Mark tx_hash as used. Returns False if it was already used."""
        with self._lock:
            if tx_hash in self._used:
                return False
            self._used[tx_hash] = int(time.time() * 1000)
            return True

    def used_at(self, tx_hash):
        with self._lock:
            return self._used.get(tx_hash)

    def __len__(self):
        with self._lock:
            return len(self._used)


class PaymentGate:
    def __init__(self, payee, network=config.NETWORK, chain_id=config.CHAIN_ID,
                 token=config.USDC_ADDRESS, registry=None):
        self.payee = payee
        self.network = network
        self.chain_id = chain_id
        self.token = token
        self.registry = registry if registry is not None else UsedPaymentRegistry()

    def requirements(self, endpoint):
        """Machine-readable payment instructions for a 402 response."""
        return {
            "scheme": "exact",
            "network": self.network,
            "chainId": self.chain_id,
            "payee": self.payee,
            "token": self.token,
            "amount": str(to_token_units(price_for(endpoint))),
            "description": f"{config.SERVICE_NAME}: {endpoint}",
            "resource": f"/{endpoint}",
            "mimeType": "application/json",
        }

    def check(self, endpoint, header_value):
        """
        Let the request through or raise PaymentRequired / PaymentInvalid.
        Returns the accepted PaymentProof.
        """
        if not header_value:
            raise PaymentRequired(
                f"This endpoint requires {format_price(price_for(endpoint))} payment via x402",
                self.requirements(endpoint),
            )

        try:
            proof = PaymentProof.from_header(header_value)
        except PaymentInvalid as e:
            logger.warning("Payment header rejected for %s: %s", endpoint, e.message)
            raise

        if not proof.is_well_formed:
            logger.warning("Payment missing txHash or signature for %s", endpoint)
            raise PaymentInvalid("Payment proof must include a txHash or signature.")

        if proof.tx_hash and not self.registry.claim(proof.tx_hash):
            logger.warning("Payment already used: %s", proof.tx_hash)
            raise PaymentInvalid("Payment has already been used. Each txHash authorizes one request.")

        return proof


def get_payment_gate():
    return current_app.extensions["payment_gate"]


def payment_header():
    for name in PAYMENT_HEADERS:
        value = request.headers.get(name)
        if value:
            return value
    return None


def x402_required(endpoint):
    """Route decorator: run the payment gate before the view executes."""
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            get_payment_gate().check(endpoint, payment_header())
            return view(*args, **kwargs)
        return wrapper
    return decorator


def payment_required_headers(requirements):
    return {
        "X-402-Version": X402_VERSION,
        "X-402-Payment": json.dumps(requirements),
    }
