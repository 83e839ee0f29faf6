"""
Receipt Model
Immutable record of a verification claim and its provisional result.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone

from dance_verify import config

DISCLAIMER = "Claim recorded. Advanced AI verification coming Q2 2026."


@dataclass(frozen=True)
class Receipt:
    receipt_id: str
    timestamp: int  # epoch milliseconds
    operation_type: str
    request: dict = field(repr=False)
    result: dict = field(repr=False)
    price_paid: str
    verifier: str
    chain: str = config.NETWORK
    chain_id: int = config.CHAIN_ID

    def __post_init__(self):
        # Callers keep no handle on the stored payloads
        object.__setattr__(self, "request", copy.deepcopy(self.request))
        object.__setattr__(self, "result", copy.deepcopy(self.result))

    @property
    def iso_time(self):
        moment = datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)
        return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_dict(self):
        return {
            "id": self.receipt_id,
            "version": config.RECEIPT_VERSION,
            "service": config.SERVICE_NAME,
            "timestamp": self.timestamp,
            "isoTime": self.iso_time,
            "chain": self.chain,
            "chainId": self.chain_id,
            "verifier": self.verifier,
            "type": self.operation_type,
            "request": copy.deepcopy(self.request),
            "result": copy.deepcopy(self.result),
            "price_paid": self.price_paid,
            "verification_level": "basic",
            "note": DISCLAIMER,
        }
