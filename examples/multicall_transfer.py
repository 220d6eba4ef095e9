#!/usr/bin/env python3
"""
Example: Multicall token transfer

Estimates and then executes a two-call multicall (an ERC-20 approve followed
by a transfer) from a Starknet account.

Usage:
    python examples/multicall_transfer.py

Environment Variables:
    STARKCALL_NETWORK: mainnet or goerli (default: goerli)
    STARKCALL_RPC_URL: Node JSON-RPC URL (default: network preset)
    ACCOUNT_ADDRESS: Account contract address
    ACCOUNT_PRIVATE_KEY: Stark private key for the account
    TOKEN_ADDRESS: ERC-20 contract (default: goerli ETH)
    RECIPIENT: Address receiving the transfer
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

# Load .env file
load_dotenv()

from starkcall import Call, JsonRpcClient, NetworkConfig, StarkCallError
from starkcall.utils.logging import configure_logging

ACCOUNT_ADDRESS = os.getenv("ACCOUNT_ADDRESS", "")
ACCOUNT_PRIVATE_KEY = os.getenv("ACCOUNT_PRIVATE_KEY", "")
TOKEN_ADDRESS = os.getenv(
    "TOKEN_ADDRESS",
    "0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7",
)
RECIPIENT = os.getenv("RECIPIENT", "")

# 0.0001 ETH as a uint256 (low, high)
AMOUNT = (10**14, 0)


async def main() -> None:
    print("starkcall - Multicall Transfer\n")

    if not ACCOUNT_ADDRESS or not ACCOUNT_PRIVATE_KEY or not RECIPIENT:
        print("Missing environment variables")
        print("Set: ACCOUNT_ADDRESS, ACCOUNT_PRIVATE_KEY and RECIPIENT")
        sys.exit(1)

    configure_logging("DEBUG")
    network = NetworkConfig.from_env()
    print(f"Network: {network.name.value} ({network.chain_id})")
    print(f"RPC:     {network.rpc_url}")

    calls = [
        Call(contract_address=TOKEN_ADDRESS, entry_point="approve", calldata=[RECIPIENT, *AMOUNT]),
        Call(contract_address=TOKEN_ADDRESS, entry_point="transfer", calldata=[RECIPIENT, *AMOUNT]),
    ]

    async with JsonRpcClient(network.rpc_url) as rpc:
        account = rpc.account(ACCOUNT_PRIVATE_KEY, ACCOUNT_ADDRESS)
        print(f"Account: {account.address}")

        try:
            nonce = await account.nonce(timeout=30)
            print(f"Nonce:   {nonce}\n")

            estimate = await account.estimate_fee(calls, timeout=30)
            print(f"Estimated fee: {estimate.overall_fee_int()} wei")

            result = await account.execute(calls, timeout=60)
        except StarkCallError as e:
            print(f"\nFailed: {e}")
            print(e.to_dict())
            sys.exit(1)

    print(f"Transaction: {result.transaction_hash}")


if __name__ == "__main__":
    asyncio.run(main())
