from dance_verify.models.payment import PaymentProof
from dance_verify.models.receipt import Receipt
