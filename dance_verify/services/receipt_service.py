"""
Receipt Ledger
Mints receipts with unique ids and serves them back. In-memory only: the
store starts empty and is discarded with the process.
"""

import logging
import threading
import time
import uuid

from flask import current_app

from dance_verify import config
from dance_verify.errors import NotFound
from dance_verify.models.receipt import Receipt

logger = logging.getLogger(__name__)

RECEIPT_ID_PREFIX = "dv_"


def new_receipt_id():
    return f"{RECEIPT_ID_PREFIX}{uuid.uuid4().hex[:16]}"


class ReceiptLedger:
    def __init__(self, verifier, chain=config.NETWORK, chain_id=config.CHAIN_ID):
        self.verifier = verifier
        self.chain = chain
        self.chain_id = chain_id
        self._lock = threading.Lock()
        self._receipts = {}

    def mint(self, operation_type, request_payload, result_payload, price_paid):
        with self._lock:
            receipt_id = new_receipt_id()
            while receipt_id in self._receipts:
                receipt_id = new_receipt_id()

            receipt = Receipt(
                receipt_id=receipt_id,
                timestamp=int(time.time() * 1000),
                operation_type=operation_type,
                request=request_payload,
                result=result_payload,
                price_paid=price_paid,
                verifier=self.verifier,
                chain=self.chain,
                chain_id=self.chain_id,
            )
            self._receipts[receipt_id] = receipt

        logger.info("Minted receipt %s (%s)", receipt_id, operation_type)
        return receipt

    def get(self, receipt_id):
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise NotFound("Receipt not found. It may never have existed or was issued before the last restart.")
        return receipt

    def count(self):
        with self._lock:
            return len(self._receipts)


def get_receipt_ledger():
    return current_app.extensions["receipt_ledger"]
