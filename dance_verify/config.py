"""
Dance Verify - Configuration
Environment-supplied settings plus the fixed x402 network constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()

PORT = int(os.environ.get("PORT", 3402))
WALLET_ADDRESS = os.environ.get("WALLET_ADDRESS", "0x1e1A34178d80a03E8F4B78f9Cc2AFA8Db23BB092")

SERVICE_NAME = "Dance Verify"
SERVICE_VERSION = "1.0.0"
RECEIPT_VERSION = "1.0"

# Base Sepolia testnet
NETWORK = "base-sepolia"
CHAIN_ID = 84532
USDC_ADDRESS = "0x036CbD53842c5426634e7929541eC2318f3dCF7e"
USDC_DECIMALS = 6


def load_config():
    return {
        "PORT": PORT,
        "WALLET_ADDRESS": WALLET_ADDRESS,
        "NETWORK": NETWORK,
        "CHAIN_ID": CHAIN_ID,
        "USDC_ADDRESS": USDC_ADDRESS,
    }
