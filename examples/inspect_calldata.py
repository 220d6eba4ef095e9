#!/usr/bin/env python3
"""
Example: Inspect multicall calldata and transaction hash

Runs offline. Shows the ``__execute__`` calldata layout for a small batch,
decodes it back, and computes the invoke transaction hash that an account
would sign.

Usage:
    python examples/inspect_calldata.py
"""

from starkcall import (
    Call,
    StarkSigner,
    TransactionHasher,
    decode_execute_calldata,
    encode_execute_calldata_hex,
)

# Test values (DO NOT USE IN PRODUCTION)
PRIVATE_KEY = "0x1234567890abcdef1234567890abcdef"
ACCOUNT_ADDRESS = "0x0126dd900b82c7fc95e8851f9c64d0600992e82657388a48d3c466553d4d9246"
COUNTER_ADDRESS = "0x07a0f1ae8bd5e6e5d79b5d6f4e5b2c1a7b7a4b4b4a2a6c9d8e7f6a5b4c3d2e1f"


def main() -> None:
    print("=" * 60)
    print("starkcall - Calldata Inspector")
    print("=" * 60)
    print()

    calls = [
        Call(contract_address=COUNTER_ADDRESS, entry_point="increase_balance", calldata=[10]),
        Call(contract_address=COUNTER_ADDRESS, entry_point="increment"),
        Call(contract_address=COUNTER_ADDRESS, entry_point="set", calldata=["0x2a", "7"]),
    ]
    nonce = 3

    encoded = encode_execute_calldata_hex(calls, nonce)
    print("Encoded calldata:")
    for index, item in enumerate(encoded):
        print(f"  [{index:2}] {item}")
    print()

    decoded, decoded_nonce = decode_execute_calldata(encoded)
    print(f"Decoded {len(decoded)} calls (nonce {decoded_nonce}):")
    for call in decoded:
        print(f"  to={hex(call.contract_address)[:12]}... selector={hex(call.selector)[:12]}... args={list(call.calldata)}")
    print()

    tx_hash = TransactionHasher().transaction_hash(
        calls,
        nonce=nonce,
        max_fee=0x200000000,
        version=0,
        sender_address=ACCOUNT_ADDRESS,
        chain_id="SN_GOERLI",
    )
    signature = StarkSigner(PRIVATE_KEY).sign(tx_hash)
    print(f"Transaction hash: {hex(tx_hash)}")
    print(f"Signature:        {signature.to_wire()}")


if __name__ == "__main__":
    main()
