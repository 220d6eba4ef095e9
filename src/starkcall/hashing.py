"""Invoke transaction hashing.

The transaction hash is the Pedersen chain hash (``compute_hash_on_elements``)
of seven field elements, in this order::

    [felt("invoke"), version, sender_address, selector("__execute__"),
     calldata_hash, max_fee, felt(chain_id)]

where ``calldata_hash`` is the same hash over the encoded ``__execute__``
calldata (nonce included). The account contract and the sequencer recompute
this value to check the signature, so the order is fixed.
"""

from __future__ import annotations

from typing import List, Sequence

from starknet_py.hash.utils import compute_hash_on_elements

from starkcall.calldata import encode_execute_calldata
from starkcall.config import DEFAULT_CONSTANTS, TransactionConstants
from starkcall.types import Call
from starkcall.utils.felt import FeltLike, chain_id_to_felt, parse_felt, selector_from_name, string_to_felt

__all__ = ["TransactionHasher"]


class TransactionHasher:
    """Computes calldata and transaction hashes for multicall invokes.

    Stateless apart from its constants; the chain id is passed in on every
    call so a stale value is never reused.
    """

    def __init__(self, constants: TransactionConstants = DEFAULT_CONSTANTS) -> None:
        self.constants = constants
        self._prefix = string_to_felt(constants.transaction_prefix, "transaction_prefix")
        self._execute_selector = selector_from_name(constants.execute_entry_point)

    @property
    def execute_selector(self) -> int:
        return self._execute_selector

    def calldata_hash(self, calls: Sequence[Call], nonce: FeltLike) -> int:
        return compute_hash_on_elements(encode_execute_calldata(calls, nonce))

    def hash_inputs(
        self,
        calls: Sequence[Call],
        *,
        nonce: FeltLike,
        max_fee: FeltLike,
        version: FeltLike,
        sender_address: FeltLike,
        chain_id: str,
    ) -> List[int]:
        """Build the seven elements hashed into the transaction hash.

        Raises:
            EncodingError: If any input is not a valid field element
        """
        return [
            self._prefix,
            parse_felt(version, "version"),
            parse_felt(sender_address, "sender_address"),
            self._execute_selector,
            self.calldata_hash(calls, nonce),
            parse_felt(max_fee, "max_fee"),
            chain_id_to_felt(chain_id),
        ]

    def transaction_hash(
        self,
        calls: Sequence[Call],
        *,
        nonce: FeltLike,
        max_fee: FeltLike,
        version: FeltLike,
        sender_address: FeltLike,
        chain_id: str,
    ) -> int:
        """Hash a multicall invoke.

        Args:
            calls: Calls in execution order
            nonce: Account nonce
            max_fee: Maximum fee the account pays
            version: Transaction version
            sender_address: Account contract address
            chain_id: Chain identifier, e.g. ``"SN_GOERLI"``

        Returns:
            Transaction hash as a field element
        """
        return compute_hash_on_elements(
            self.hash_inputs(
                calls,
                nonce=nonce,
                max_fee=max_fee,
                version=version,
                sender_address=sender_address,
                chain_id=chain_id,
            )
        )
