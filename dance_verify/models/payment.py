"""
PaymentProof Model
Decoded form of the x402 payment header: { txHash?, signature? }
"""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Optional

from dance_verify.errors import PaymentInvalid


@dataclass(frozen=True)
class PaymentProof:
    tx_hash: Optional[str] = None
    signature: Optional[str] = None

    @property
    def is_well_formed(self):
        return bool(self.tx_hash or self.signature)

    @classmethod
    def from_header(cls, raw):
        """
        Parse the header value as JSON, or as base64-encoded JSON.
        Anything else is rejected as PaymentInvalid.
        """
        try:
            payload = json.loads(_decode(raw))
        except (ValueError, binascii.Error, RecursionError) as e:
            raise PaymentInvalid(f"Payment header could not be parsed: {e}") from e

        if not isinstance(payload, dict):
            raise PaymentInvalid("Payment header must decode to a JSON object")

        tx_hash = payload.get("txHash")
        signature = payload.get("signature")
        return cls(
            tx_hash=tx_hash if isinstance(tx_hash, str) and tx_hash else None,
            signature=signature if isinstance(signature, str) and signature else None,
        )


def _decode(raw):
    text = raw.strip()
    if text.startswith("{"):
        return text
    return base64.b64decode(text, validate=True).decode("utf-8")
