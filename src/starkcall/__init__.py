"""
starkcall - multicall invoke transactions for Starknet accounts.

Quick Start:
    >>> import asyncio
    >>> from starkcall import Call, JsonRpcClient
    >>>
    >>> async def main():
    ...     async with JsonRpcClient("https://starknet-testnet.public.blastapi.io") as rpc:
    ...         account = rpc.account(private_key="0x...", address="0x...")
    ...         result = await account.execute([
    ...             Call(contract_address="0x...", entry_point="increase_balance", calldata=[10]),
    ...         ])
    ...         print(f"Transaction: {result.transaction_hash}")
    ...
    >>> asyncio.run(main())

Modules:
- `account`: Account orchestration (nonce, estimate_fee, execute)
- `calldata`: `__execute__` calldata encoding and decoding
- `hashing`: Invoke transaction hash
- `signer`: Stark-curve signing
- `rpc`: JSON-RPC client
- `errors`: Exception hierarchy
- `utils`: Field-element and logging helpers
"""

from starkcall.version import __version__, __version_info__

from starkcall.account import Account, SubmissionMode
from starkcall.calldata import (
    decode_execute_calldata,
    encode_execute_calldata,
    encode_execute_calldata_hex,
)
from starkcall.config import (
    DEFAULT_CONSTANTS,
    NETWORKS,
    Network,
    NetworkConfig,
    TransactionConstants,
    get_network_config,
)
from starkcall.errors import (
    ChainLookupError,
    ConfigurationError,
    DeadlineExceededError,
    EncodingError,
    FeeParseError,
    NonceUnavailableError,
    NotFoundError,
    RemoteCallError,
    SigningError,
    StarkCallError,
)
from starkcall.hashing import TransactionHasher
from starkcall.rpc import JsonRpcClient
from starkcall.signer import StarkSigner
from starkcall.types import (
    Call,
    DecodedCall,
    ExecutionDetails,
    FeeEstimate,
    InvokeResult,
    InvokeTransaction,
    Signature,
)

__all__ = [
    "__version__",
    "__version_info__",
    # Account
    "Account",
    "SubmissionMode",
    "JsonRpcClient",
    "StarkSigner",
    "TransactionHasher",
    # Calldata
    "encode_execute_calldata",
    "encode_execute_calldata_hex",
    "decode_execute_calldata",
    # Config
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "get_network_config",
    "TransactionConstants",
    "DEFAULT_CONSTANTS",
    # Types
    "Call",
    "DecodedCall",
    "ExecutionDetails",
    "FeeEstimate",
    "InvokeResult",
    "InvokeTransaction",
    "Signature",
    # Errors
    "StarkCallError",
    "EncodingError",
    "ChainLookupError",
    "NonceUnavailableError",
    "FeeParseError",
    "SigningError",
    "ConfigurationError",
    "RemoteCallError",
    "NotFoundError",
    "DeadlineExceededError",
]
