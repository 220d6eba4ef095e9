"""
Shared fixtures for starkcall tests.
"""

from typing import Any, List, Tuple

import pytest

from starkcall.account import Account
from starkcall.types import Call, FeeEstimate, InvokeResult, InvokeTransaction


# =============================================================================
# Test Constants
# =============================================================================

# Private key for tests (DO NOT USE IN PRODUCTION)
TEST_PRIVATE_KEY = "0x1234567890abcdef1234567890abcdef"
ACCOUNT_ADDRESS = "0x0126dd900b82c7fc95e8851f9c64d0600992e82657388a48d3c466553d4d9246"
TOKEN_ADDRESS = "0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7"
COUNTER_ADDRESS = "0x07a0f1ae8bd5e6e5d79b5d6f4e5b2c1a7b7a4b4b4a2a6c9d8e7f6a5b4c3d2e1f"
RECIPIENT = "0x0543e54f26ae33686f57da2ceebed98b340c3a78e9390931bd84fb711d5caabc"

CHAIN_ID = "SN_GOERLI"
ONCHAIN_NONCE = 7
TX_HASH = "0x" + "ab" * 31


# =============================================================================
# Stub Provider
# =============================================================================


class StubProvider:
    """Records every round trip and answers from canned values.

    Each response may be a value or an exception instance to raise.
    """

    def __init__(
        self,
        nonce_result: Any = None,
        chain_id: Any = CHAIN_ID,
        fee_estimate: Any = None,
        invoke_result: Any = None,
    ) -> None:
        self.nonce_result = [hex(ONCHAIN_NONCE)] if nonce_result is None else nonce_result
        self.chain_id_result = chain_id
        self.fee_estimate = fee_estimate or FeeEstimate(
            gas_consumed="0x10", gas_price="0x6", overall_fee="0x64"
        )
        self.invoke_result = invoke_result or InvokeResult(transaction_hash=TX_HASH)
        self.requests: List[Tuple[str, Any]] = []

    @staticmethod
    def _answer(value: Any) -> Any:
        if isinstance(value, BaseException):
            raise value
        return value

    async def call(self, call: Call, block_id: str = "latest") -> List[str]:
        self.requests.append(("call", (call, block_id)))
        return self._answer(self.nonce_result)

    async def chain_id(self) -> str:
        self.requests.append(("chain_id", ()))
        return self._answer(self.chain_id_result)

    async def estimate_fee(self, invoke: InvokeTransaction, block_id: str = "latest") -> FeeEstimate:
        self.requests.append(("estimate_fee", (invoke, block_id)))
        return self._answer(self.fee_estimate)

    async def add_invoke_transaction(self, invoke: InvokeTransaction) -> InvokeResult:
        self.requests.append(("add_invoke_transaction", (invoke,)))
        return self._answer(self.invoke_result)

    def methods(self) -> List[str]:
        return [method for method, _ in self.requests]

    def payloads(self, method: str) -> List[InvokeTransaction]:
        return [args[0] for name, args in self.requests if name == method]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture()
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture()
def account(provider: StubProvider) -> Account:
    return Account(provider, ACCOUNT_ADDRESS, TEST_PRIVATE_KEY)


@pytest.fixture()
def transfer_call() -> Call:
    return Call(contract_address=TOKEN_ADDRESS, entry_point="transfer", calldata=[RECIPIENT, "100", "0"])


@pytest.fixture()
def no_arg_call() -> Call:
    return Call(contract_address=COUNTER_ADDRESS, entry_point="increment")


@pytest.fixture()
def calls(transfer_call: Call, no_arg_call: Call) -> List[Call]:
    return [
        transfer_call,
        no_arg_call,
        Call(contract_address=COUNTER_ADDRESS, entry_point="increase_balance", calldata=["0x2a"]),
    ]
