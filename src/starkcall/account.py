"""Account orchestration for multicall invoke transactions.

An :class:`Account` owns a sender address and a signing key and drives the
pipeline for one operation at a time::

    nonce -> max fee -> hash -> sign -> estimate / submit

Unset :class:`~starkcall.types.ExecutionDetails` fields are resolved on the
way: the nonce is read from the account contract, the max fee is the fixed
default (estimation) or twice the network estimate (execution), the version
is 0. Any failure aborts the operation before anything is submitted; nothing
is retried and nothing is cached between calls.

The account does not serialize concurrent ``execute`` calls. Two concurrent
executions can read the same on-chain nonce and one of them will be
rejected; callers that submit concurrently must serialize per account.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Awaitable, Optional, Sequence, TypeVar, Union

from starkcall.calldata import encode_execute_calldata_hex
from starkcall.config import DEFAULT_CONSTANTS, TransactionConstants
from starkcall.constants import BLOCK_TAG_LATEST
from starkcall.errors import (
    ChainLookupError,
    ConfigurationError,
    DeadlineExceededError,
    EncodingError,
    NonceUnavailableError,
    NotFoundError,
    RemoteCallError,
)
from starkcall.hashing import TransactionHasher
from starkcall.rpc import JsonRpcClient
from starkcall.signer import StarkSigner
from starkcall.types import Call, ExecutionDetails, FeeEstimate, InvokeResult, InvokeTransaction, Signature
from starkcall.utils.felt import parse_felt, to_hex
from starkcall.utils.logging import LogContext, get_logger

__all__ = ["Account", "SubmissionMode"]

T = TypeVar("T")

_logger = get_logger(__name__)


class SubmissionMode(str, Enum):
    """What to do with a signed invoke transaction."""

    ESTIMATE = "estimate"
    EXECUTE = "execute"


class Account:
    """
    Account contract controlled by a Stark private key.

    Example:
        ```python
        async with JsonRpcClient(rpc_url) as rpc:
            account = Account(rpc, address, private_key)
            result = await account.execute([
                Call(contract_address=token, entry_point="transfer", calldata=[to, 100, 0]),
            ])
            print(result.transaction_hash)
        ```
    """

    def __init__(
        self,
        provider: JsonRpcClient,
        address: Union[str, int],
        private_key: Optional[Union[str, int]] = None,
        *,
        constants: TransactionConstants = DEFAULT_CONSTANTS,
        signer: Optional[StarkSigner] = None,
    ) -> None:
        """
        Initialize the account.

        Args:
            provider: JSON-RPC client used for every round trip
            address: Account contract address
            private_key: Stark private key (ignored when ``signer`` is given)
            constants: Domain tag, entry points and fee defaults
            signer: Pre-built signer

        Raises:
            ConfigurationError: If the address or key is invalid
        """
        try:
            self._address = parse_felt(address, "address")
        except EncodingError as e:
            raise ConfigurationError(f"Invalid account address: {address!r}") from e

        self.provider = provider
        self.constants = constants
        self._signer = signer or StarkSigner(private_key)
        self._hasher = TransactionHasher(constants)
        self._log = LogContext(_logger, {"address": self.address})

    @property
    def address(self) -> str:
        return to_hex(self._address)

    @property
    def public_key(self) -> int:
        return self._signer.public_key

    def __repr__(self) -> str:
        return f"Account(address={self.address})"

    # ------------------------------------------------------------------
    # Signing and hashing
    # ------------------------------------------------------------------

    def sign(self, msg_hash: int) -> Signature:
        return self._signer.sign(msg_hash)

    def verify(self, msg_hash: int, signature: Sequence[int]) -> bool:
        """Check a signature against this account's public key."""
        return self._signer.verify(msg_hash, signature)

    async def hash_multicall(self, calls: Sequence[Call], details: ExecutionDetails) -> int:
        """Compute the transaction hash for fully resolved details.

        The chain id is fetched from the node on every call.

        Raises:
            ConfigurationError: If any of nonce, max fee or version is unset
            ChainLookupError: If the chain id cannot be fetched
            EncodingError: If a call cannot be encoded
        """
        if not details.is_resolved:
            raise ConfigurationError(
                "hash_multicall requires nonce, max_fee and version to be set",
                details={"step": "hash", "unset": [k for k, v in details.model_dump().items() if v is None]},
            )
        chain_id = await self._chain_id()
        return self._hasher.transaction_hash(
            calls,
            nonce=details.nonce,
            max_fee=details.max_fee,
            version=details.version,
            sender_address=self._address,
            chain_id=chain_id,
        )

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def nonce(self, timeout: Optional[float] = None) -> int:
        """Read the account nonce at the latest block.

        Raises:
            NonceUnavailableError: If the call returns no data or a non-integer
            RemoteCallError: If the round trip fails
            DeadlineExceededError: If ``timeout`` elapses
        """
        return await self._with_deadline(self._fetch_nonce(), timeout, "nonce")

    async def estimate_fee(
        self,
        calls: Sequence[Call],
        details: Optional[ExecutionDetails] = None,
        timeout: Optional[float] = None,
    ) -> FeeEstimate:
        """Estimate the fee of a multicall.

        Unset details resolve to the on-chain nonce, the default max fee
        (``0x200000000``) and version 0.

        Raises:
            NonceUnavailableError: If the nonce has to be read and cannot be
            ChainLookupError: If the chain id cannot be fetched
            EncodingError: If a call cannot be encoded
            RemoteCallError: If the estimation round trip fails
            DeadlineExceededError: If ``timeout`` elapses
        """
        return await self._with_deadline(
            self._estimate_fee(calls, details or ExecutionDetails()),
            timeout,
            "estimate_fee",
        )

    async def execute(
        self,
        calls: Sequence[Call],
        details: Optional[ExecutionDetails] = None,
        timeout: Optional[float] = None,
    ) -> InvokeResult:
        """Sign and submit a multicall.

        Unset details resolve to the on-chain nonce, twice the estimated
        overall fee and version 0.

        Raises:
            NonceUnavailableError: If the nonce has to be read and cannot be
            FeeParseError: If the fee estimate cannot be parsed
            ChainLookupError: If the chain id cannot be fetched
            EncodingError: If a call cannot be encoded
            RemoteCallError: If estimation or submission fails
            DeadlineExceededError: If ``timeout`` elapses
        """
        return await self._with_deadline(
            self._execute(calls, details or ExecutionDetails()),
            timeout,
            "execute",
        )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def _fetch_nonce(self) -> int:
        query = Call(contract_address=self._address, entry_point=self.constants.nonce_entry_point)
        try:
            result = await self.provider.call(query, BLOCK_TAG_LATEST)
        except NotFoundError as e:
            raise NonceUnavailableError(self.address, reason="no result") from e
        if not result:
            raise NonceUnavailableError(self.address, reason="empty result")
        try:
            nonce = parse_felt(result[0], "nonce")
        except EncodingError as e:
            raise NonceUnavailableError(self.address, reason=f"unparseable nonce {result[0]!r}") from e
        self._log.debug("Nonce resolved", extra={"nonce": nonce})
        return nonce

    async def _resolve_nonce(self, details: ExecutionDetails) -> int:
        if details.nonce is not None:
            return details.nonce
        return await self._fetch_nonce()

    async def _estimate_fee(self, calls: Sequence[Call], details: ExecutionDetails) -> FeeEstimate:
        nonce = await self._resolve_nonce(details)
        max_fee = details.max_fee if details.max_fee is not None else self.constants.default_max_fee
        version = details.version if details.version is not None else self.constants.default_version

        invoke = await self._build_and_sign(calls, nonce=nonce, max_fee=max_fee, version=version)
        return await self._submit(SubmissionMode.ESTIMATE, invoke)

    async def _execute(self, calls: Sequence[Call], details: ExecutionDetails) -> InvokeResult:
        nonce = await self._resolve_nonce(details)

        max_fee = details.max_fee
        if max_fee is None:
            # Estimate with the nonce we are about to sign with.
            estimate = await self._estimate_fee(calls, details.with_values(nonce=nonce))
            max_fee = estimate.overall_fee_int() * self.constants.fee_multiplier
            self._log.debug(
                "Max fee from estimate",
                extra={"overall_fee": estimate.overall_fee, "max_fee": to_hex(max_fee)},
            )
        version = details.version if details.version is not None else self.constants.default_version

        invoke = await self._build_and_sign(calls, nonce=nonce, max_fee=max_fee, version=version)
        return await self._submit(SubmissionMode.EXECUTE, invoke)

    async def _build_and_sign(
        self,
        calls: Sequence[Call],
        *,
        nonce: int,
        max_fee: int,
        version: int,
    ) -> InvokeTransaction:
        """Hash, sign and assemble the invoke payload shared by both modes."""
        tx_hash = await self.hash_multicall(
            calls, ExecutionDetails(nonce=nonce, max_fee=max_fee, version=version)
        )
        signature = self.sign(tx_hash)
        self._log.debug(
            "Transaction signed",
            extra={"tx_hash": to_hex(tx_hash), "nonce": nonce, "max_fee": to_hex(max_fee), "calls": len(calls)},
        )
        return InvokeTransaction(
            contract_address=self.address,
            entry_point_selector=to_hex(self._hasher.execute_selector),
            calldata=encode_execute_calldata_hex(calls, nonce),
            signature=signature.to_wire(),
            max_fee=to_hex(max_fee),
            version=to_hex(version),
            nonce=to_hex(nonce),
        )

    async def _submit(self, mode: SubmissionMode, invoke: InvokeTransaction) -> Any:
        if mode is SubmissionMode.ESTIMATE:
            return await self.provider.estimate_fee(invoke, BLOCK_TAG_LATEST)

        try:
            result = await self.provider.add_invoke_transaction(invoke)
        except RemoteCallError as e:
            self._log.error("Invoke submission failed", extra={"nonce": invoke.nonce, "error": str(e)})
            raise
        self._log.info(
            "Invoke submitted",
            extra={"tx_hash": result.transaction_hash, "nonce": invoke.nonce, "max_fee": invoke.max_fee},
        )
        return result

    async def _chain_id(self) -> str:
        try:
            chain_id = await self.provider.chain_id()
        except RemoteCallError as e:
            raise ChainLookupError(f"Chain id lookup failed: {e.message}") from e
        if not chain_id:
            raise ChainLookupError("Node returned an empty chain id")
        return chain_id

    @staticmethod
    async def _with_deadline(aw: Awaitable[T], timeout: Optional[float], operation: str) -> T:
        if timeout is None:
            return await aw
        try:
            return await asyncio.wait_for(aw, timeout)
        except asyncio.TimeoutError:
            raise DeadlineExceededError(timeout, operation=operation) from None
