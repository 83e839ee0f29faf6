import dataclasses
import threading
import unittest

from dance_verify.errors import NotFound
from dance_verify.services.receipt_service import ReceiptLedger

VERIFIER = "0x000000000000000000000000000000000000bEEF"


class TestReceiptLedger(unittest.TestCase):
    def setUp(self):
        self.ledger = ReceiptLedger(verifier=VERIFIER)

    def test_mint_then_get_round_trip(self):
        receipt = self.ledger.mint(
            "move_verification", {"style": "krump"}, {"confidence": 0.7}, "0.001 USDC"
        )
        fetched = self.ledger.get(receipt.receipt_id)
        self.assertEqual(fetched.to_dict(), receipt.to_dict())

        body = receipt.to_dict()
        self.assertTrue(body["id"].startswith("dv_"))
        self.assertEqual(len(body["id"]), 3 + 16)
        self.assertEqual(body["verifier"], VERIFIER)
        self.assertEqual(body["type"], "move_verification")
        self.assertEqual(body["price_paid"], "0.001 USDC")
        self.assertEqual(body["verification_level"], "basic")
        self.assertTrue(body["isoTime"].endswith("Z"))

    def test_unknown_id(self):
        with self.assertRaises(NotFound):
            self.ledger.get("dv_0000000000000000")

    def test_count(self):
        self.assertEqual(self.ledger.count(), 0)
        self.ledger.mint("video_verification", {}, {}, "0.01 USDC")
        self.ledger.mint("video_verification", {}, {}, "0.01 USDC")
        self.assertEqual(self.ledger.count(), 2)

    def test_receipt_is_immutable(self):
        request_payload = {"moves": ["jab"]}
        receipt = self.ledger.mint("choreography_verification", request_payload, {}, "0.05 USDC")

        request_payload["moves"].append("stomp")
        receipt.to_dict()["request"]["moves"].append("buck")
        self.assertEqual(self.ledger.get(receipt.receipt_id).request, {"moves": ["jab"]})

        with self.assertRaises(dataclasses.FrozenInstanceError):
            receipt.price_paid = "free"

    def test_concurrent_mint_unique_ids(self):
        ids = []
        lock = threading.Lock()

        def mint_many():
            for _ in range(50):
                r = self.ledger.mint("move_verification", {}, {}, "0.001 USDC")
                with lock:
                    ids.append(r.receipt_id)

        threads = [threading.Thread(target=mint_many) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(set(ids)), 400)
        self.assertEqual(self.ledger.count(), 400)


if __name__ == "__main__":
    unittest.main()
